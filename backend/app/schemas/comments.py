"""Comment Schemas - request/response contracts for /comments."""

from app.schemas.common import (
    FilterCriteria, ListQuery, NonEmptyText, RecordIdIn, RecordIdOut,
    TimestampedOut, CamelModel, UpdateModel,
)


class CommentCreate(CamelModel):
    user_id: RecordIdIn
    post_id: RecordIdIn
    content: NonEmptyText


class CommentUpdate(UpdateModel):
    user_id: RecordIdIn | None = None
    post_id: RecordIdIn | None = None
    content: NonEmptyText | None = None


class CommentOut(TimestampedOut):
    user_id: RecordIdOut
    post_id: RecordIdOut
    content: str


class CommentFilter(FilterCriteria):
    content: str | None = None


class CommentListQuery(ListQuery):
    content: str | None = None
