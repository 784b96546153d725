"""Query Builder - translates typed filter criteria into SQLAlchemy WHERE clauses.

Invariants:
    - Matching is always case-insensitive
    - LIKE wildcards in user input are escaped (autoescape), so "%" matches a literal percent
    - No criteria -> None (no WHERE clause), never an always-false condition
"""

from sqlalchemy import ColumnElement, and_, or_

from app.core.domain_types import MatchMode
from app.db.base import Base


def match_column(column, needle: str, mode: MatchMode) -> ColumnElement[bool]:
    """Case-insensitive contains / starts-with condition on one column."""
    if mode is MatchMode.STARTS_WITH:
        return column.istartswith(needle, autoescape=True)
    return column.icontains(needle, autoescape=True)


def filter_condition(
    model: type[Base], conditions: dict[str, str],
) -> ColumnElement[bool] | None:
    """AND of case-insensitive contains conditions, one per present filter."""
    clauses = [
        match_column(getattr(model, name), needle, MatchMode.CONTAINS)
        for name, needle in conditions.items()
    ]
    if not clauses:
        return None
    return and_(*clauses)


def search_condition(
    model: type[Base], columns: tuple[str, ...], needle: str, mode: MatchMode,
) -> ColumnElement[bool] | None:
    """OR of match conditions over the searchable columns."""
    if not columns:
        return None
    return or_(*(match_column(getattr(model, name), needle, mode) for name in columns))
