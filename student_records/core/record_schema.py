"""Record Schema — the student record shape shared by validator, store and query engine.

Invariants:
    - Wire names (camelCase) map 1:1 onto dataclass attributes (snake_case)
    - `id` is never in MUTABLE_FIELDS: identifiers are immutable once assigned
    - REQUIRED_CREATE_FIELDS ⊆ MUTABLE_FIELDS

Design Decisions:
    - Explicit allow-list over "keys the record already has": partial updates
      only ever touch the fields named here
    - Required-field variant: name, email, gpa AND indexNumber
    - Dataclass over dict: attribute typos fail loudly, copy() is explicit
"""

from dataclasses import dataclass, replace
from typing import Any

from student_records.core.domain_types import RecordId


# wire name → attribute name
FIELD_ATTRIBUTES: dict[str, str] = {
    "id": "id",
    "indexNumber": "index_number",
    "name": "name",
    "major": "major",
    "age": "age",
    "gpa": "gpa",
    "email": "email",
    "enrollmentDate": "enrollment_date",
}

MUTABLE_FIELDS: tuple[str, ...] = (
    "indexNumber", "name", "major", "age", "gpa", "email", "enrollmentDate",
)

REQUIRED_CREATE_FIELDS: tuple[str, ...] = ("name", "email", "gpa", "indexNumber")


@dataclass
class StudentRecord:
    """A single student entry — mutated only by RecordStore."""

    id: RecordId
    index_number: str
    name: str
    major: str
    age: int | None
    gpa: float
    email: str
    enrollment_date: str

    def get_field(self, wire_name: str) -> Any:
        """Value of a wire-named field, or None for unknown names."""
        attr = FIELD_ATTRIBUTES.get(wire_name)
        if attr is None:
            return None
        return getattr(self, attr)

    def set_field(self, wire_name: str, value: Any) -> None:
        setattr(self, FIELD_ATTRIBUTES[wire_name], value)

    def copy(self) -> "StudentRecord":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire names, in schema order."""
        return {wire: getattr(self, attr) for wire, attr in FIELD_ATTRIBUTES.items()}
