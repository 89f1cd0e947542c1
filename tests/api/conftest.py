"""API test fixtures — FastAPI test client bound to a fresh RecordStore.

Invariants:
    - Every test gets its own seeded store
    - get_record_store dependency overridden, so the lifespan is not required

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises middleware and handlers in-process
    - raise_app_exceptions=False: lets the catch-all handler's 500 reach the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from student_records.api.dependencies import get_record_store
from student_records.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_record_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
