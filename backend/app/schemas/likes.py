"""Like Schemas - request/response contracts for /likes.

Likes carry no text column, so the list endpoint has no text filters.
"""

from app.schemas.common import (
    FilterCriteria, ListQuery, RecordIdIn, RecordIdOut,
    TimestampedOut, CamelModel, UpdateModel,
)


class LikeCreate(CamelModel):
    user_id: RecordIdIn
    post_id: RecordIdIn


class LikeUpdate(UpdateModel):
    user_id: RecordIdIn | None = None
    post_id: RecordIdIn | None = None


class LikeOut(TimestampedOut):
    user_id: RecordIdOut
    post_id: RecordIdOut


class LikeFilter(FilterCriteria):
    pass


class LikeListQuery(ListQuery):
    pass
