"""Post Schemas - request/response contracts for /posts."""

from app.schemas.common import (
    FilterCriteria, ListQuery, NonEmptyText, RecordIdIn, RecordIdOut,
    TimestampedOut, CamelModel, UpdateModel,
)


class PostCreate(CamelModel):
    user_id: RecordIdIn
    content: NonEmptyText


class PostUpdate(UpdateModel):
    user_id: RecordIdIn | None = None
    content: NonEmptyText | None = None


class PostOut(TimestampedOut):
    user_id: RecordIdOut
    content: str


class PostFilter(FilterCriteria):
    content: str | None = None


class PostListQuery(ListQuery):
    content: str | None = None
