"""Query Engine — filter, sort and paginate a snapshot of student records.

Invariants:
    - run_query is PURE: it never mutates the records it is given
    - Filters commute; a record must satisfy every active filter
    - Malformed numeric parameters are ignored (filters) or defaulted (paging), never errors
    - total counts filtered records before pagination
    - Sorting is stable; records missing the sort field keep their relative
      order and follow every record that has a value
    - Out-of-range pages yield an empty window

Design Decisions:
    - Parameters arrive as raw strings and are parsed here, so the HTTP layer
      never rejects a query the engine would tolerate
    - Leading-number parsing: "3.5x" → 3.5, "2abc" → 2
    - Locale-aware ordering independent of the process locale: accent- and
      case-insensitive primary key, lowercase-before-uppercase tie break
"""

import math
import re
import unicodedata
from dataclasses import dataclass, field
from typing import Any, Sequence

from student_records.core.domain_types import (
    DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, SortOrder,
)
from student_records.core.record_schema import StudentRecord

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def parse_float_param(raw: str | None) -> float | None:
    """Leading float of a query value, or None if there isn't one."""
    if raw is None:
        return None
    match = _LEADING_FLOAT.match(raw)
    if not match:
        return None
    value = float(match.group(0))
    return None if math.isnan(value) else value


def parse_positive_int_param(raw: str | None, default: int) -> int:
    """Leading integer of a query value clamped to >= 1, else the default."""
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    try:
        return max(1, int(match.group(0)))
    except ValueError:
        return default


@dataclass(frozen=True)
class RecordQuery:
    """Parsed ListRecords parameters."""
    min_gpa: float | None = None
    max_gpa: float | None = None
    name: str | None = None
    major: str | None = None
    sort: str | None = None
    order: SortOrder = SortOrder.ASC
    limit: int = DEFAULT_PAGE_LIMIT
    page: int = DEFAULT_PAGE

    @classmethod
    def from_params(
        cls,
        min_gpa: str | None = None,
        max_gpa: str | None = None,
        name: str | None = None,
        major: str | None = None,
        sort: str | None = None,
        order: str | None = None,
        limit: str | None = None,
        page: str | None = None,
    ) -> "RecordQuery":
        return cls(
            min_gpa=parse_float_param(min_gpa),
            max_gpa=parse_float_param(max_gpa),
            name=name or None,
            major=major or None,
            sort=sort or None,
            order=(
                SortOrder.DESC
                if order and order.strip().lower() == SortOrder.DESC.value
                else SortOrder.ASC
            ),
            limit=parse_positive_int_param(limit, DEFAULT_PAGE_LIMIT),
            page=parse_positive_int_param(page, DEFAULT_PAGE),
        )


@dataclass
class QueryResult:
    total: int
    page: int
    limit: int
    data: list[StudentRecord] = field(default_factory=list)


# ─── Filter stage ────────────────────────────────────────────────

def _contains(haystack: Any, needle: str) -> bool:
    return isinstance(haystack, str) and needle.lower() in haystack.lower()


def filter_records(
    records: Sequence[StudentRecord], query: RecordQuery,
) -> list[StudentRecord]:
    result = list(records)
    if query.min_gpa is not None:
        result = [r for r in result if r.gpa >= query.min_gpa]
    if query.max_gpa is not None:
        result = [r for r in result if r.gpa <= query.max_gpa]
    if query.name:
        result = [r for r in result if _contains(r.name, query.name)]
    if query.major:
        result = [r for r in result if _contains(r.major, query.major)]
    return result


# ─── Sort stage ──────────────────────────────────────────────────

def collation_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating locale collation for Latin-script text."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), decomposed.casefold(), text.swapcase()


def _sort_key(value: Any) -> tuple:
    if isinstance(value, str):
        return (1, collation_key(value))
    return (0, value)


def sort_records(
    records: Sequence[StudentRecord], sort_field: str | None, order: SortOrder,
) -> list[StudentRecord]:
    if not sort_field:
        return list(records)
    present = [r for r in records if r.get_field(sort_field) is not None]
    missing = [r for r in records if r.get_field(sort_field) is None]
    present.sort(
        key=lambda r: _sort_key(r.get_field(sort_field)),
        reverse=order is SortOrder.DESC,
    )
    return present + missing


# ─── Pagination stage ────────────────────────────────────────────

def paginate(
    records: Sequence[StudentRecord], limit: int, page: int,
) -> list[StudentRecord]:
    start = (page - 1) * limit
    return list(records[start:start + limit])


def run_query(
    records: Sequence[StudentRecord], query: RecordQuery,
) -> QueryResult:
    """Filter → sort → paginate. Input sequence is left untouched."""
    filtered = filter_records(records, query)
    ordered = sort_records(filtered, query.sort, query.order)
    return QueryResult(
        total=len(filtered),
        page=query.page,
        limit=query.limit,
        data=paginate(ordered, query.limit, query.page),
    )
