"""Student Records — CRUD and query endpoints over the in-memory RecordStore.

Invariants:
    - Path ids arrive as raw strings; the core parses them (InvalidArgument → 400)
    - Bodies arrive as raw JSON objects; the core validates and coerces them
    - ListRecords runs the query engine over a snapshot, never the live collection
    - Create and delete are independent, always-registered routes

Design Decisions:
    - Query parameters typed as str: malformed numbers are tolerated by the
      engine instead of rejected by FastAPI
    - Domain errors propagate to the global handlers (api/error_handlers.py)
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status

from student_records.api.dependencies import get_record_store
from student_records.core.query_engine import RecordQuery, run_query
from student_records.core.record_store import RecordStore
from student_records.schemas.student import (
    StudentEnvelope,
    StudentListResponse,
    StudentMessageResponse,
    StudentRecordResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/studentrecords", tags=["studentrecords"])


@router.get("", response_model=StudentListResponse)
async def list_records(
    min_gpa: str | None = Query(None, alias="minGpa"),
    max_gpa: str | None = Query(None, alias="maxGpa"),
    name: str | None = Query(None),
    major: str | None = Query(None),
    sort: str | None = Query(None),
    order: str | None = Query(None),
    limit: str | None = Query(None),
    page: str | None = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """Filter, sort and paginate the collection."""
    query = RecordQuery.from_params(
        min_gpa=min_gpa, max_gpa=max_gpa, name=name, major=major,
        sort=sort, order=order, limit=limit, page=page,
    )
    return StudentListResponse.from_result(run_query(store.all(), query))


@router.get("/{record_id}", response_model=StudentEnvelope)
async def get_record(
    record_id: str, store: RecordStore = Depends(get_record_store),
):
    record = store.get_by_id(record_id)
    return StudentEnvelope(student=StudentRecordResponse.from_record(record))


@router.post(
    "", response_model=StudentMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    body: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_record_store),
):
    """Create a student record."""
    record = store.create(body)
    logger.info(f"Student {record.id} created", extra={"record_id": record.id})
    return StudentMessageResponse.build("Student created successfully", record)


@router.patch("/{record_id}", response_model=StudentMessageResponse)
async def update_record(
    record_id: str,
    body: dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_record_store),
):
    """Partial update — only recognized fields present in the body change."""
    record = store.update(record_id, body)
    logger.info(f"Student {record.id} updated", extra={"record_id": record.id})
    return StudentMessageResponse.build("Student updated successfully", record)


@router.delete("/{record_id}", response_model=StudentMessageResponse)
async def delete_record(
    record_id: str, store: RecordStore = Depends(get_record_store),
):
    record = store.delete(record_id)
    logger.info(f"Student {record.id} deleted", extra={"record_id": record.id})
    return StudentMessageResponse.build("Student deleted successfully", record)
