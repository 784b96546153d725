"""User Schemas - request/response contracts for /users.

Invariants:
    - username, email and passwordHash are non-empty after stripping
    - email must contain a single "@" with text on both sides
    - passwordHash is write-only: accepted on create/update, never returned
"""

from pydantic import AfterValidator
from typing import Annotated

from app.schemas.common import (
    FilterCriteria, ListQuery, NonEmptyText, TimestampedOut, CamelModel, UpdateModel,
)


def _check_email(v: str) -> str:
    local, sep, domain = v.partition("@")
    if not sep or not local or not domain or "@" in domain:
        raise ValueError("email must look like name@domain")
    return v


Email = Annotated[NonEmptyText, AfterValidator(_check_email)]


class UserCreate(CamelModel):
    username: NonEmptyText
    email: Email
    password_hash: NonEmptyText


class UserUpdate(UpdateModel):
    username: NonEmptyText | None = None
    email: Email | None = None
    password_hash: NonEmptyText | None = None


class UserOut(TimestampedOut):
    username: str
    email: str


class UserFilter(FilterCriteria):
    username: str | None = None
    email: str | None = None


class UserListQuery(ListQuery):
    username: str | None = None
    email: str | None = None
