"""Student Schemas — response envelopes for the /studentrecords endpoints.

Invariants:
    - Field names are snake_case in Python, camelCase on the wire
    - Every mutating endpoint returns {message, student}

Design Decisions:
    - Request bodies are NOT pydantic models: the core validator owns coercion
      and the typed MissingField/Validation/Conflict outcomes
    - from_record() builds from core dataclasses so routes never touch aliases
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from student_records.core.query_engine import QueryResult
from student_records.core.record_schema import StudentRecord


class StudentRecordResponse(BaseModel):
    """A single student record as served to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    index_number: str
    name: str
    major: str
    age: int | None = None
    gpa: float
    email: str
    enrollment_date: str

    @classmethod
    def from_record(cls, record: StudentRecord) -> "StudentRecordResponse":
        return cls.model_validate(record.to_dict())


class StudentEnvelope(BaseModel):
    student: StudentRecordResponse


class StudentMessageResponse(BaseModel):
    message: str
    student: StudentRecordResponse

    @classmethod
    def build(cls, message: str, record: StudentRecord) -> "StudentMessageResponse":
        return cls(message=message, student=StudentRecordResponse.from_record(record))


class StudentListResponse(BaseModel):
    """Paginated ListRecords result."""
    total: int
    page: int
    limit: int
    data: list[StudentRecordResponse]

    @classmethod
    def from_result(cls, result: QueryResult) -> "StudentListResponse":
        return cls(
            total=result.total,
            page=result.page,
            limit=result.limit,
            data=[StudentRecordResponse.from_record(r) for r in result.data],
        )
