"""Unit tests for tree flattening.

Covers the scalar, null, object (cross product) and array (union) rules,
empty containers, malformed nodes, and restartability.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from flattab.emit import ABSENT
from flattab.errors import MalformedTree
from flattab.nested.flatten import flatten, flatten_records, join_path
from flattab.nested.reader import JsonNumber, loads


def rows(node) -> list[dict]:
    """Flatten *node* and re-key rows by dotted name for readable assertions."""
    return [{join_path(key): value for key, value in record.items()} for record in flatten(node)]


# ===========================================================================
# Leaf tests
# ===========================================================================


class TestLeaves:

    def test_scalars(self):
        assert rows({"n": 123, "b": True, "s": "alpha"}) == [{"n": 123, "b": True, "s": "alpha"}]

    def test_scalar_at_prefix(self):
        assert list(flatten("x", ("a",))) == [{("a",): "x"}]

    def test_top_level_scalar(self):
        assert list(flatten(5)) == [{(): 5}]

    def test_null_is_absent(self):
        assert rows({"a": None}) == [{"a": ABSENT}]

    def test_numbers_keep_source_text(self):
        result = rows(loads('{"n": 1.50, "e": 1e3}'))
        assert result == [{"n": "1.50", "e": "1e3"}]
        assert isinstance(result[0]["n"], JsonNumber)


# ===========================================================================
# Object / array combination tests
# ===========================================================================


class TestCombination:

    def test_array_field_is_union(self):
        assert rows({"a": [1, 2], "b": "x"}) == [{"a": 1, "b": "x"}, {"a": 2, "b": "x"}]

    def test_nested_object_with_sibling_array(self):
        result = rows({"a": {"x": 1}, "b": [1, 2]})
        assert result == [{"a.x": 1, "b": 1}, {"a.x": 1, "b": 2}]

    def test_cross_product_of_two_arrays(self):
        result = rows({"a": ["foo", "bar"], "b": ["alpha", "bravo"]})
        assert result == [
            {"a": "foo", "b": "alpha"},
            {"a": "foo", "b": "bravo"},
            {"a": "bar", "b": "alpha"},
            {"a": "bar", "b": "bravo"},
        ]

    def test_list_of_objects(self):
        result = rows({"a": "foo", "b": [{"c": "alpha", "d": "bravo"}, {"c": "charlie", "d": "delta"}]})
        assert result == [
            {"a": "foo", "b.c": "alpha", "b.d": "bravo"},
            {"a": "foo", "b.c": "charlie", "b.d": "delta"},
        ]

    def test_nested_arrays_flatten_to_same_column(self):
        assert rows({"a": [[1, 2], [3]]}) == [{"a": 1}, {"a": 2}, {"a": 3}]

    def test_array_index_not_in_path(self):
        assert rows({"a": [{"b": 1}]}) == [{"a.b": 1}]

    def test_heterogeneous_array_elements(self):
        assert rows({"a": [1, {"b": 2}]}) == [{"a": 1}, {"a.b": 2}]


# ===========================================================================
# Empty containers and errors
# ===========================================================================


class TestEdgeCases:

    def test_empty_array_keeps_siblings(self):
        assert rows({"a": [], "b": "x"}) == [{"a": ABSENT, "b": "x"}]

    def test_empty_object(self):
        assert rows({}) == [{}]

    def test_malformed_node(self):
        with pytest.raises(MalformedTree) as exc_info:
            list(flatten({"a": {"b": {1, 2}}}))
        assert exc_info.value.path == "a.b"
        assert exc_info.value.node_type == "set"

    def test_restartable(self):
        tree = {"a": [1, 2], "b": {"c": [3, 4]}}
        assert list(flatten(tree)) == list(flatten(tree))
        assert len(list(flatten(tree))) == 4

    def test_keys_are_segment_tuples(self):
        assert list(flatten({"a.b": 1, "a": {"b": 2}})) == [{("a.b",): 1, ("a", "b"): 2}]


class TestFlattenRecords:

    def test_concatenates_rows(self):
        result = flatten_records([{"a": [1, 2]}, {"b": 3}])
        assert result == [{("a",): 1}, {("a",): 2}, {("b",): 3}]

    def test_no_records(self):
        assert flatten_records([]) == []
