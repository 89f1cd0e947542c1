"""FastAPI Dependencies — access to the lifespan-owned RecordStore.

Invariants:
    - The store lives on app.state, created and torn down by the lifespan
    - Routes receive it through Depends(get_record_store), never by import

Design Decisions:
    - Dependency over module global: tests swap the store through
      app.dependency_overrides, the same way a DB session would be overridden
"""

from fastapi import Request

from student_records.core.record_store import RecordStore


def get_record_store(request: Request) -> RecordStore:
    store = getattr(request.app.state, "record_store", None)
    if store is None:
        raise RuntimeError("RecordStore not initialized — lifespan has not run")
    return store
