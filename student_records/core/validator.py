"""Field Validation — pure predicates and the single definition of numeric coercion.

Invariants:
    - All predicates are PURE: no IO, no mutation, no exceptions on bad input
    - Predicates never coerce; coercion happens only in coerce_number/coerce_age
    - Only normalize_field (RecordValidationError) and parse_record_id
      (InvalidArgumentError) raise
    - bool is never numeric (True is not a GPA of 1.0)

Design Decisions:
    - Predicates return bool, normalize_field raises: the store chains the two so
      callers get a typed error naming the offending field
    - Numeric strings ("3.5", " 20 ") are part of the gpa/age type contract,
      decided here once instead of at each call site
"""

import math
import re
from datetime import date
from typing import Any

from student_records.core.domain_types import (
    GPA_MAX, GPA_MIN, MIN_AGE, ErrorKind, RecordId,
)
from student_records.core.errors import InvalidArgumentError, RecordValidationError
from student_records.core.record_schema import REQUIRED_CREATE_FIELDS

INDEX_NUMBER_PATTERN = re.compile(r"[A-Za-z0-9]+")
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and not math.isnan(value)


# ─── Coercion ────────────────────────────────────────────────────

def coerce_number(value: Any) -> Any:
    """Numeric strings → int/float. Everything else is returned unchanged."""
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # past the interpreter's int digit limit
                return value
        if _NUMBER_PATTERN.fullmatch(text):
            return float(text)
    return value


def coerce_age(value: Any) -> Any:
    value = coerce_number(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# ─── Predicates ──────────────────────────────────────────────────

def validate_gpa(value: Any) -> bool:
    """True iff value is numeric and GPA_MIN <= value <= GPA_MAX."""
    return _is_number(value) and GPA_MIN <= value <= GPA_MAX


def validate_index_number(value: Any) -> bool:
    """Letters and digits only — no whitespace, no punctuation."""
    return isinstance(value, str) and bool(INDEX_NUMBER_PATTERN.fullmatch(value))


def validate_age(value: Any) -> bool:
    """Age is optional; when present it is a whole number >= MIN_AGE."""
    if value is None:
        return True
    if not _is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value >= MIN_AGE


def validate_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_enrollment_date(value: Any) -> bool:
    """YYYY-MM-DD and an actual calendar date."""
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_missing(value: Any) -> bool:
    # falsy numbers are not missing: a GPA of 0.0 is valid
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def missing_required_fields(fields: dict[str, Any]) -> list[str]:
    """Required create fields that are absent or empty, in schema order."""
    return [
        name for name in REQUIRED_CREATE_FIELDS
        if _is_missing(fields.get(name))
    ]


def validate_required_create_fields(fields: dict[str, Any]) -> ErrorKind | None:
    """ErrorKind.MISSING_FIELD if any required create field is missing, else None."""
    if missing_required_fields(fields):
        return ErrorKind.MISSING_FIELD
    return None


# ─── Field normalization (coerce → validate → raise) ────────────

def _normalize_gpa(value: Any) -> float:
    value = coerce_number(value)
    if not validate_gpa(value):
        raise RecordValidationError(
            "Invalid GPA. It must be a number between 0.0 and 4.0.", "gpa",
        )
    return float(value)


def _normalize_age(value: Any) -> int | None:
    value = coerce_age(value)
    if not validate_age(value):
        raise RecordValidationError(
            f"Invalid age. It must be a whole number of at least {MIN_AGE}.", "age",
        )
    return value


def _normalize_index_number(value: Any) -> str:
    if not validate_index_number(value):
        raise RecordValidationError(
            "Invalid indexNumber. Only letters and numbers are allowed "
            "(no spaces or symbols).",
            "indexNumber",
        )
    return value


def _normalize_enrollment_date(value: Any) -> str:
    if not validate_enrollment_date(value):
        raise RecordValidationError(
            "Invalid enrollmentDate. Expected a date in YYYY-MM-DD form.",
            "enrollmentDate",
        )
    return value


def _normalize_text(name: str):
    def normalize(value: Any) -> str:
        if not validate_non_empty_string(value):
            raise RecordValidationError(
                f"Invalid {name}. It must be a non-empty string.", name,
            )
        return value
    return normalize


_NORMALIZERS = {
    "gpa": _normalize_gpa,
    "age": _normalize_age,
    "indexNumber": _normalize_index_number,
    "enrollmentDate": _normalize_enrollment_date,
    "name": _normalize_text("name"),
    "email": _normalize_text("email"),
    "major": _normalize_text("major"),
}


def normalize_field(name: str, value: Any) -> Any:
    """Coerce and validate one recognized field. Raises RecordValidationError."""
    return _NORMALIZERS[name](value)


def parse_record_id(raw: Any) -> RecordId:
    """Parse an identifier parameter. Raises InvalidArgumentError."""
    if isinstance(raw, bool):
        raise InvalidArgumentError(raw)
    if isinstance(raw, int):
        return RecordId(raw)
    if isinstance(raw, str) and _INTEGER_PATTERN.fullmatch(raw.strip()):
        try:
            return RecordId(int(raw.strip()))
        except ValueError:
            raise InvalidArgumentError(raw) from None
    raise InvalidArgumentError(raw)
