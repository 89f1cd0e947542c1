"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
"""

from fastapi import APIRouter, Depends, status

from student_records import __version__
from student_records.api.dependencies import get_record_store
from student_records.core.record_store import RecordStore

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(store: RecordStore = Depends(get_record_store)):
    """Basic liveness probe. Reports the current record count."""
    return {
        "status": "healthy",
        "service": "student-records-api",
        "version": __version__,
        "records": len(store),
    }
