"""Follower Schemas - request/response contracts for /followers.

Follow edges carry no text column, so the list endpoint has no text filters.
"""

from app.schemas.common import (
    FilterCriteria, ListQuery, RecordIdIn, RecordIdOut,
    TimestampedOut, CamelModel, UpdateModel,
)


class FollowerCreate(CamelModel):
    follower_id: RecordIdIn
    followee_id: RecordIdIn


class FollowerUpdate(UpdateModel):
    follower_id: RecordIdIn | None = None
    followee_id: RecordIdIn | None = None


class FollowerOut(TimestampedOut):
    follower_id: RecordIdOut
    followee_id: RecordIdOut


class FollowerFilter(FilterCriteria):
    pass


class FollowerListQuery(ListQuery):
    pass
