"""Record Schema — field mapping, allow-lists and serialization."""

from student_records.core.record_schema import (
    FIELD_ATTRIBUTES, MUTABLE_FIELDS, REQUIRED_CREATE_FIELDS,
)


def test_id_is_not_mutable():
    assert "id" not in MUTABLE_FIELDS


def test_required_fields_are_mutable_fields():
    assert set(REQUIRED_CREATE_FIELDS) <= set(MUTABLE_FIELDS)


def test_every_mutable_field_maps_to_an_attribute():
    assert set(MUTABLE_FIELDS) <= set(FIELD_ATTRIBUTES)


def test_to_dict_uses_wire_names(store):
    data = store.get_by_id(101).to_dict()
    assert list(data) == list(FIELD_ATTRIBUTES)
    assert data["indexNumber"] == "UG1001"
    assert data["enrollmentDate"] == "2023-09-01"


def test_get_field_by_wire_name(store):
    record = store.get_by_id(104)
    assert record.get_field("gpa") == 3.95
    assert record.get_field("enrollmentDate") == "2021-09-01"
    assert record.get_field("unknown") is None


def test_copy_is_independent(store):
    record = store.get_by_id(101)
    clone = record.copy()
    clone.set_field("major", "Physics")
    assert record.major == "Computer Science"
