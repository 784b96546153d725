"""Hashtag Schemas - request/response contracts for /hashtags.

Hashtags have no created_at, so HashtagOut extends RecordOut directly.
"""

from app.schemas.common import (
    FilterCriteria, ListQuery, NonEmptyText, RecordOut, CamelModel, UpdateModel,
)


class HashtagCreate(CamelModel):
    name: NonEmptyText


class HashtagUpdate(UpdateModel):
    name: NonEmptyText | None = None


class HashtagOut(RecordOut):
    name: str


class HashtagFilter(FilterCriteria):
    name: str | None = None


class HashtagListQuery(ListQuery):
    name: str | None = None
