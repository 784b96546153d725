"""Common Schemas - shared building blocks for every resource's API contract.

Invariants:
    - Record ids are accepted as JSON integers or decimal strings, range 1..2^63-1
    - Record ids are always emitted as decimal strings (64-bit precision survives JSON)
    - Field names are camelCase on the wire; snake_case also accepted on input
    - Blank text filters normalize to None so they never become conditions

Design Decisions:
    - Id-to-string conversion is a PlainSerializer on the response type, applied
      at JSON encoding time, instead of a process-wide encoder patch
"""

from datetime import datetime
from typing import Annotated, Generic, TypeVar

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer,
    StringConstraints, field_validator, model_validator,
)
from pydantic.alias_generators import to_camel

from app.core.domain_types import MAX_RECORD_ID


def _coerce_record_id(v: object) -> object:
    """Strip surrounding whitespace from string ids before int coercion."""
    if isinstance(v, str):
        return v.strip()
    return v


RecordIdIn = Annotated[
    int,
    BeforeValidator(_coerce_record_id),
    Field(gt=0, le=MAX_RECORD_ID),
]

RecordIdOut = Annotated[
    int,
    PlainSerializer(lambda v: str(v), return_type=str, when_used="json"),
]


class CamelModel(BaseModel):
    """Base for wire schemas: camelCase aliases, snake_case accepted too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RecordOut(CamelModel):
    """Base for response records: string id, creation timestamp."""
    id: RecordIdOut


class TimestampedOut(RecordOut):
    created_at: datetime


class FilterCriteria(BaseModel):
    """Base for typed per-resource list filters. Every field is an optional str."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def conditions(self) -> dict[str, str]:
        """Column name -> needle for every filter that is present."""
        return self.model_dump(exclude_none=True)


class ListQuery(BaseModel):
    """Raw list-query pagination values. Parsing happens in core/pagination.py."""
    page: str | None = None
    limit: str | None = None


DigitString = Annotated[str, Field(pattern=r"^\d+$")]

NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SearchQuery(BaseModel):
    """Search query-string contract shared by every resource."""
    query: str = Field(min_length=1, max_length=500)
    page: DigitString | None = None
    limit: DigitString | None = None


class PageMeta(BaseModel):
    total: int
    skip: int
    take: int
    page: int
    total_pages: int = Field(alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)


T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """Paginated envelope: {data, meta}."""
    data: list[T]
    meta: PageMeta


class DeleteResult(BaseModel):
    """Envelope returned by a successful delete."""
    success: bool = True
    message: str


class UpdateModel(CamelModel):
    """Base for partial updates: only fields present in the body are written."""

    @model_validator(mode="after")
    def reject_explicit_nulls(self):
        nulls = sorted(
            name for name in self.model_fields_set if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict:
        """Column name -> new value for every field sent in the request."""
        return self.model_dump(exclude_unset=True)
