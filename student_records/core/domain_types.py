"""Domain Types — rich types and bounds shared by validator, store and query engine.

Invariants:
    - RecordId wraps int — never use a bare int for a record key in domain logic
    - GPA bounds are closed: GPA_MIN <= gpa <= GPA_MAX
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecordId = NewType("RecordId", int)


# ─── Bounds & Defaults ───────────────────────────────────────────

GPA_MIN = 0.0
GPA_MAX = 4.0
MIN_AGE = 16
DEFAULT_MAJOR = "Undeclared"
DEFAULT_PAGE_LIMIT = 10
DEFAULT_PAGE = 1


# ─── Enums ───────────────────────────────────────────────────────

class SortOrder(str, Enum):
    """Sort direction for the query engine."""
    ASC = "asc"
    DESC = "desc"


class ErrorKind(str, Enum):
    """Outcome taxonomy surfaced by the core — doubles as the error code."""
    MISSING_FIELD = "MISSING_FIELD"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
