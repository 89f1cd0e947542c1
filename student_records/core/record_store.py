"""Record Store — owner of the student collection and identifier allocation.

Invariants:
    - Identifiers are allocated from a monotonically increasing counter, never reused
    - The counter advances only when a create succeeds
    - Every field is validated BEFORE any mutation; a failed update leaves the record untouched
    - indexNumber is unique across the collection at every observable point
    - Callers only ever receive copies; live records never leave the store
    - Mutations and counter increments are serialized by a single lock

Design Decisions:
    - Explicit store object owned by the app lifespan, not module-level globals:
      construction with seed data and teardown are visible at the call site
    - threading.Lock over asyncio.Lock: the core is synchronous and may be
      called from FastAPI's threadpool as well as from the event loop
    - Insertion-ordered list over dict: canonical default ordering is insertion order
"""

import threading
from datetime import date
from typing import Any, Callable, Iterable

from student_records.core.domain_types import DEFAULT_MAJOR, RecordId
from student_records.core.errors import (
    ConflictError, MissingFieldError, RecordNotFoundError,
)
from student_records.core.record_schema import MUTABLE_FIELDS, StudentRecord
from student_records.core.seed import SEED_NEXT_ID, SEED_RECORDS
from student_records.core.validator import (
    missing_required_fields, normalize_field, parse_record_id,
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class RecordStore:
    """In-memory student record collection."""

    def __init__(
        self,
        records: Iterable[StudentRecord] = (),
        next_id: int = 1,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._lock = threading.Lock()
        self._records: list[StudentRecord] = [r.copy() for r in records]
        self._today = today

        ids = [r.id for r in self._records]
        if len(set(ids)) != len(ids):
            raise ValueError("duplicate record ids in initial records")
        index_numbers = [r.index_number for r in self._records]
        if len(set(index_numbers)) != len(index_numbers):
            raise ValueError("duplicate indexNumber in initial records")
        self._next_id = max([next_id, *(i + 1 for i in ids)])

    @classmethod
    def seeded(cls, today: Callable[[], date] = date.today) -> "RecordStore":
        """Store populated with the standard seed set."""
        records = [
            StudentRecord(
                id=RecordId(row["id"]),
                index_number=row["indexNumber"],
                name=row["name"],
                major=row["major"],
                age=row["age"],
                gpa=row["gpa"],
                email=row["email"],
                enrollment_date=row["enrollmentDate"],
            )
            for row in SEED_RECORDS
        ]
        return cls(records, next_id=SEED_NEXT_ID, today=today)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._records)

    # ─── Reads ───────────────────────────────────────────────────

    def all(self) -> list[StudentRecord]:
        """Snapshot of the collection in insertion order."""
        with self._lock:
            return [r.copy() for r in self._records]

    def get_by_id(self, raw_id: Any) -> StudentRecord:
        record_id = parse_record_id(raw_id)
        with self._lock:
            return self._require(record_id).copy()

    # ─── Mutations ───────────────────────────────────────────────

    def create(self, fields: dict[str, Any]) -> StudentRecord:
        """Validate, apply defaults, assign the next id and append."""
        missing = missing_required_fields(fields)
        if missing:
            raise MissingFieldError(missing)

        values: dict[str, Any] = {}
        for name in MUTABLE_FIELDS:
            raw = fields.get(name)
            if name in ("major", "age", "enrollmentDate") and _is_blank(raw):
                continue
            values[name] = normalize_field(name, raw)

        with self._lock:
            self._check_index_available(values["indexNumber"], owner=None)
            record = StudentRecord(
                id=RecordId(self._next_id),
                index_number=values["indexNumber"],
                name=values["name"],
                major=values.get("major", DEFAULT_MAJOR),
                age=values.get("age"),
                gpa=values["gpa"],
                email=values["email"],
                enrollment_date=values.get(
                    "enrollmentDate", self._today().isoformat(),
                ),
            )
            self._records.append(record)
            self._next_id += 1
            return record.copy()

    def update(self, raw_id: Any, partial: dict[str, Any]) -> StudentRecord:
        """Apply a partial update. Unrecognized keys are ignored."""
        record_id = parse_record_id(raw_id)
        with self._lock:
            record = self._require(record_id)
            changes = {
                name: normalize_field(name, partial[name])
                for name in MUTABLE_FIELDS
                if name in partial
            }
            if "indexNumber" in changes:
                self._check_index_available(changes["indexNumber"], owner=record_id)
            for name, value in changes.items():
                record.set_field(name, value)
            return record.copy()

    def delete(self, raw_id: Any) -> StudentRecord:
        record_id = parse_record_id(raw_id)
        with self._lock:
            for position, record in enumerate(self._records):
                if record.id == record_id:
                    return self._records.pop(position)
            raise RecordNotFoundError(record_id)

    def clear(self) -> None:
        """Discard every record. Used on application shutdown."""
        with self._lock:
            self._records.clear()

    # ─── Internals (caller holds the lock) ───────────────────────

    def _require(self, record_id: RecordId) -> StudentRecord:
        for record in self._records:
            if record.id == record_id:
                return record
        raise RecordNotFoundError(record_id)

    def _check_index_available(
        self, index_number: str, owner: RecordId | None,
    ) -> None:
        for record in self._records:
            if record.index_number == index_number and record.id != owner:
                raise ConflictError("indexNumber", index_number)
