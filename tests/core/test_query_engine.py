"""Query Engine — tests for filter, sort and pagination stages.

Tests cover:
    - GPA bounds inclusive, non-numeric bounds ignored
    - name/major case-insensitive containment
    - Sorting: numeric, locale-aware strings, desc, stability, missing fields
    - Pagination: clamping, defaults, windows, out-of-range pages
    - The snapshot passed in is never mutated
"""

import pytest

from student_records.core.domain_types import SortOrder
from student_records.core.query_engine import (
    RecordQuery,
    collation_key,
    parse_float_param,
    parse_positive_int_param,
    run_query,
    sort_records,
)


def _query(**params) -> RecordQuery:
    return RecordQuery.from_params(**params)


def _ids(result) -> list[int]:
    return [r.id for r in result.data]


# ─── parameter parsing ───────────────────────────────────────────

def test_parse_float_param_reads_leading_number():
    assert parse_float_param("3.5") == 3.5
    assert parse_float_param("3.5abc") == 3.5
    assert parse_float_param("abc") is None
    assert parse_float_param("") is None
    assert parse_float_param(None) is None


def test_parse_positive_int_param_clamps_and_defaults():
    assert parse_positive_int_param("5", 10) == 5
    assert parse_positive_int_param("0", 10) == 1
    assert parse_positive_int_param("-3", 10) == 1
    assert parse_positive_int_param("2abc", 10) == 2
    assert parse_positive_int_param("abc", 10) == 10
    assert parse_positive_int_param(None, 1) == 1


def test_parse_positive_int_param_oversized_value_falls_back_to_default():
    assert parse_positive_int_param("1" * 5000, 10) == 10


def test_order_parsing_is_case_insensitive():
    assert _query(order="DESC").order is SortOrder.DESC
    assert _query(order="asc").order is SortOrder.ASC
    assert _query(order="sideways").order is SortOrder.ASC


# ─── filter stage ────────────────────────────────────────────────

def test_min_gpa_is_inclusive(store):
    result = run_query(store.all(), _query(min_gpa="3.5"))
    assert sorted(r.gpa for r in result.data) == [3.5, 3.8, 3.95]
    assert result.total == 3


def test_max_gpa_is_inclusive(store):
    result = run_query(store.all(), _query(max_gpa="3.2"))
    assert _ids(result) == [102, 103]


def test_gpa_range_filters_combine(store):
    result = run_query(store.all(), _query(min_gpa="3.0", max_gpa="3.6"))
    assert _ids(result) == [102, 105]


def test_non_numeric_gpa_filter_is_ignored(store):
    result = run_query(store.all(), _query(min_gpa="high"))
    assert result.total == 5


def test_name_filter_is_case_insensitive_substring(store):
    assert _ids(run_query(store.all(), _query(name="SMITH"))) == [101]
    assert _ids(run_query(store.all(), _query(name="an"))) == [104, 105]


def test_major_filter_is_case_insensitive_substring(store):
    assert _ids(run_query(store.all(), _query(major="engineering"))) == [102]


def test_filters_commute(store):
    a = run_query(store.all(), _query(name="e", min_gpa="3.0"))
    b = run_query(
        run_query(store.all(), _query(min_gpa="3.0")).data, _query(name="e"),
    )
    assert _ids(a) == _ids(b)


def test_no_match_returns_empty(store):
    result = run_query(store.all(), _query(name="zzz"))
    assert result.total == 0
    assert result.data == []


# ─── sort stage ──────────────────────────────────────────────────

def test_no_sort_preserves_insertion_order(store):
    assert _ids(run_query(store.all(), _query())) == [101, 102, 103, 104, 105]


def test_sort_by_gpa_numeric(store):
    result = run_query(store.all(), _query(sort="gpa"))
    assert [r.gpa for r in result.data] == [2.9, 3.2, 3.5, 3.8, 3.95]


def test_sort_by_gpa_desc(store):
    result = run_query(store.all(), _query(sort="gpa", order="desc"))
    assert [r.gpa for r in result.data] == [3.95, 3.8, 3.5, 3.2, 2.9]


def test_sort_by_wire_name_enrollment_date(store):
    result = run_query(store.all(), _query(sort="enrollmentDate"))
    assert _ids(result) == [104, 102, 103, 101, 105]


def test_sort_by_name_is_stable_for_equal_names(store, new_student):
    store.create(new_student | {"name": "Alice Smith", "indexNumber": "UG9001"})
    store.create(new_student | {"name": "Alice Smith", "indexNumber": "UG9002"})
    result = run_query(store.all(), _query(sort="name"))
    assert _ids(result)[:3] == [101, 106, 107]


def test_sort_desc_keeps_equal_values_in_prior_order(store):
    # 101 and 105 share age 20
    result = run_query(store.all(), _query(sort="age", order="desc"))
    assert _ids(result) == [104, 102, 101, 105, 103]


def test_string_sort_ignores_case_and_accents(store):
    records = store.all()
    records[0].name = "émile"
    records[1].name = "Eve"
    records[2].name = "adam"
    records[3].name = "Zed"
    records[4].name = "Bob"
    ordered = sort_records(records, "name", SortOrder.ASC)
    assert [r.name for r in ordered] == ["adam", "Bob", "émile", "Eve", "Zed"]


def test_collation_puts_lowercase_before_uppercase_on_tie():
    assert collation_key("apple") < collation_key("Apple")
    assert collation_key("Apple") < collation_key("banana")


def test_missing_sort_values_follow_present_ones_in_prior_order(store):
    records = store.all()
    records[0].age = None
    records[2].age = None
    ordered = sort_records(records, "age", SortOrder.ASC)
    assert [r.id for r in ordered] == [105, 102, 104, 101, 103]
    ordered_desc = sort_records(records, "age", SortOrder.DESC)
    assert [r.id for r in ordered_desc] == [104, 102, 105, 101, 103]


def test_unknown_sort_field_keeps_order(store):
    assert _ids(run_query(store.all(), _query(sort="shoeSize"))) == [
        101, 102, 103, 104, 105,
    ]


# ─── pagination stage ────────────────────────────────────────────

def test_defaults_are_limit_ten_page_one(store):
    result = run_query(store.all(), _query(limit="lots", page="first"))
    assert (result.limit, result.page) == (10, 1)
    assert len(result.data) == 5


def test_limit_two_page_two_returns_offsets_two_and_three(store):
    result = run_query(store.all(), _query(limit="2", page="2"))
    assert _ids(result) == [103, 104]
    assert result.total == 5


def test_last_partial_page(store):
    assert _ids(run_query(store.all(), _query(limit="2", page="3"))) == [105]


def test_page_out_of_range_is_empty_but_total_kept(store):
    result = run_query(store.all(), _query(limit="2", page="10"))
    assert result.data == []
    assert result.total == 5
    assert result.page == 10


@pytest.mark.parametrize("raw", ["0", "-5"])
def test_limit_and_page_clamped_to_one(store, raw):
    result = run_query(store.all(), _query(limit=raw, page=raw))
    assert (result.limit, result.page) == (1, 1)
    assert _ids(result) == [101]


def test_pagination_applies_after_sort(store):
    result = run_query(store.all(), _query(sort="gpa", order="desc", limit="2"))
    assert _ids(result) == [104, 101]


# ─── purity ──────────────────────────────────────────────────────

def test_run_query_does_not_mutate_input(store):
    snapshot = store.all()
    ids_before = [r.id for r in snapshot]
    run_query(snapshot, _query(sort="name", order="desc", min_gpa="3.0", limit="1"))
    assert [r.id for r in snapshot] == ids_before
