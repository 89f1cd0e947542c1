"""Root conftest — shared test configuration and store fixtures."""

import os
from datetime import date

import pytest

# Keep test runs independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SEED_ON_STARTUP", "true")

from student_records.core.record_store import RecordStore  # noqa: E402

FIXED_TODAY = date(2024, 3, 1)


@pytest.fixture
def store() -> RecordStore:
    """Fresh seeded store with a pinned 'today' for default enrollment dates."""
    return RecordStore.seeded(today=lambda: FIXED_TODAY)


@pytest.fixture
def new_student() -> dict:
    return {
        "indexNumber": "UG2001",
        "name": "Fiona Gallagher",
        "major": "Economics",
        "age": 23,
        "gpa": 3.1,
        "email": "fiona@example.com",
        "enrollmentDate": "2024-01-10",
    }
