"""
Tests for sort-based duplicate detection.

These tests verify:
    - Duplicate primitives are reported once each
    - Records sharing a field value are returned as contiguous runs
    - Exact duplicate records are filtered without touching the input
    - Unsupported shapes yield Unsupported, never an exception
"""

import copy
import math

import pytest
from seqalgo.duplicates import (
    find_duplicates,
    find_duplicated_objects,
    filter_duplicated_objects,
)
from seqalgo.examples import build_example_records
from seqalgo.model import Supported, Unsupported


class TestFindDuplicates:
    """Test duplicate detection on primitive sequences."""

    def test_reports_each_duplicate_once(self):
        """[3, 1, 2, 1, 3] has duplicates {1, 3}."""
        result = find_duplicates([3, 1, 2, 1, 3])
        assert result.is_supported
        assert sorted(result.value) == [1, 3]

    def test_no_duplicates(self):
        assert find_duplicates([1, 2, 3]) == Supported([])

    def test_high_multiplicity(self):
        """A value repeated many times is still reported once."""
        assert find_duplicates(["a", "a", "a", "a", "b"]) == Supported(["a"])

    def test_short_sequences_empty(self):
        assert find_duplicates([]) == Supported([])
        assert find_duplicates([7]) == Supported([])

    def test_unsupported_element(self):
        assert isinstance(find_duplicates(["a", {}, 1]), Unsupported)

    def test_non_sequence(self):
        assert isinstance(find_duplicates("aab"), Unsupported)
        assert isinstance(find_duplicates(None), Unsupported)

    def test_kinds_not_mixed(self):
        """True and 1 are different values."""
        assert find_duplicates([True, 1, "1"]) == Supported([])

    def test_mixed_kinds_with_duplicates(self):
        result = find_duplicates([True, "x", 2, True, "x", 2.0])
        assert len(result.value) == 3
        assert True in result.value and "x" in result.value and 2 in result.value

    def test_nan_does_not_split_equal_values(self):
        assert find_duplicates([1, math.nan, 1]) == Supported([1])
        assert find_duplicates([math.nan, "a", 2, math.nan, 2, "a"]).value == [2, "a"]

    def test_nan_never_equals_itself(self):
        assert find_duplicates([math.nan, math.nan]) == Supported([])

    def test_input_not_modified(self):
        data = [3, 1, 3]
        find_duplicates(data)
        assert data == [3, 1, 3]


class TestFindDuplicatedObjects:
    """Test duplicate detection by field."""

    def test_runs_in_sorted_order(self):
        records = [
            {"id": 3, "n": "c"},
            {"id": 1, "n": "a"},
            {"id": 3, "n": "d"},
            {"id": 2, "n": "b"},
            {"id": 1, "n": "e"},
        ]
        result = find_duplicated_objects(records, "id")
        assert [r["id"] for r in result.value] == [1, 1, 3, 3]

    def test_run_of_three_reported_once_each(self):
        records = [{"id": 5, "k": i} for i in range(3)] + [{"id": 6, "k": 9}]
        result = find_duplicated_objects(records, "id")
        assert [r["k"] for r in result.value] == [0, 1, 2]

    def test_stable_within_run(self):
        records = [{"id": 1, "k": "first"}, {"id": 0, "k": "x"}, {"id": 1, "k": "second"}]
        result = find_duplicated_objects(records, "id")
        assert [r["k"] for r in result.value] == ["first", "second"]

    def test_no_duplicates(self):
        assert find_duplicated_objects([{"id": 1}, {"id": 2}], "id") == Supported([])

    def test_string_field_with_default_comparator(self):
        records = [{"name": "b"}, {"name": "a"}, {"name": "b"}]
        result = find_duplicated_objects(records, "name")
        assert result.value == [{"name": "b"}, {"name": "b"}]

    def test_custom_comparator(self):
        """Comparator receives whole records."""
        records = [{"name": "bb"}, {"name": "a"}, {"name": "bb"}, {"name": "a"}]

        def by_length_desc(a, b):
            return len(b["name"]) - len(a["name"])

        result = find_duplicated_objects(records, "name", by_length_desc)
        assert [r["name"] for r in result.value] == ["bb", "bb", "a", "a"]

    def test_mixed_kind_field_values(self):
        records = [{"a": 1}, {"a": "x"}, {"a": 1}]
        assert find_duplicated_objects(records, "a") == Supported([{"a": 1}, {"a": 1}])

    def test_bool_and_number_runs_kept_apart(self):
        records = [{"a": 1, "k": 0}, {"a": True, "k": 1}, {"a": 1, "k": 2}, {"a": True, "k": 3}]
        result = find_duplicated_objects(records, "a")
        assert [r["k"] for r in result.value] == [1, 3, 0, 2]

    def test_none_field_values(self):
        """None sorts first and None values form a run of their own."""
        records = [{"a": 2}, {"a": None}, {"a": 2}, {"a": None}]
        result = find_duplicated_objects(records, "a")
        assert [r["a"] for r in result.value] == [None, None, 2, 2]

    def test_nested_field_value_unsupported(self):
        assert isinstance(find_duplicated_objects([{"a": [1]}, {"a": [1]}], "a"), Unsupported)

    def test_nan_field_value_sorted_last(self):
        records = [{"a": 1.5}, {"a": math.nan}, {"a": 1.5}]
        assert find_duplicated_objects(records, "a") == Supported([{"a": 1.5}, {"a": 1.5}])

    def test_first_record_lacks_field(self):
        assert isinstance(find_duplicated_objects([{"x": 1}, {"id": 1}], "id"), Unsupported)

    def test_later_record_lacks_field(self):
        assert isinstance(find_duplicated_objects([{"id": 1}, {"x": 1}], "id"), Unsupported)

    def test_non_record_element(self):
        assert isinstance(find_duplicated_objects([{"id": 1}, 1], "id"), Unsupported)

    def test_non_sequence(self):
        assert isinstance(find_duplicated_objects({"id": 1}, "id"), Unsupported)

    def test_short_sequences(self):
        assert find_duplicated_objects([], "id") == Supported([])
        assert find_duplicated_objects([{"id": 1}], "id") == Supported([])

    def test_input_not_modified(self):
        records = build_example_records()
        before = copy.deepcopy(records)
        find_duplicated_objects(records, "sku")
        assert records == before

    def test_example_records(self):
        result = find_duplicated_objects(build_example_records(), "sku")
        assert [r["sku"] for r in result.value] == [101, 101, 104, 104]


class TestFilterDuplicatedObjects:
    """Test exact duplicate filtering."""

    def test_keeps_first_occurrence(self):
        records = [{"a": 1}, {"a": 1}, {"a": 2}]
        assert filter_duplicated_objects(records) == Supported([{"a": 1}, {"a": 2}])

    def test_input_not_modified(self):
        records = [{"a": 1}, {"a": 1}, {"a": 2}]
        result = filter_duplicated_objects(records)
        assert records == [{"a": 1}, {"a": 1}, {"a": 2}]
        assert result.value is not records

    def test_keeps_identity_of_first(self):
        first, second = {"a": 1, "b": 2}, {"b": 2, "a": 1}
        result = filter_duplicated_objects([first, second])
        assert len(result.value) == 1
        assert result.value[0] is first

    def test_idempotent(self):
        records = build_example_records(copies=2)
        once = filter_duplicated_objects(records).value
        twice = filter_duplicated_objects(once).value
        assert once == twice

    def test_example_records(self):
        records = build_example_records(copies=3)
        assert len(filter_duplicated_objects(records).value) == 5

    def test_unsupported_pairs_kept(self):
        """Records that cannot be compared count as distinct."""
        records = [{"a": {"x": 1}}, {"a": {"x": 1}}]
        assert len(filter_duplicated_objects(records).value) == 2

    def test_short_sequences(self):
        assert filter_duplicated_objects([]) == Supported([])
        assert filter_duplicated_objects([{"a": 1}]) == Supported([{"a": 1}])

    def test_non_sequence(self):
        assert isinstance(filter_duplicated_objects({"a": 1}), Unsupported)

    @pytest.mark.parametrize("records", [
        [{"a": 1, "b": 2}, {"b": 2, "a": 1}],
        [{"a": "x"}, {"a": "x"}, {"a": "x"}],
    ])
    def test_collapses_to_one(self, records):
        assert len(filter_duplicated_objects(records).value) == 1
