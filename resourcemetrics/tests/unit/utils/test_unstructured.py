"""Tests for typed document accessors."""

from __future__ import annotations

import pytest

from resourcemetrics.utils.unstructured import (
    FieldShapeError,
    nested_count,
    nested_field,
    nested_int,
    nested_list,
    nested_map,
    nested_string,
)

DOC = {
    "spec": {
        "replicas": 3,
        "mode": "Cluster",
        "enabled": True,
        "shardTopology": None,
        "containers": [{"name": "db"}],
        "monitor": {"prometheus": {"resources": {}}},
    },
    "status": "Ready",
}


class TestNestedField:
    """Tests for nested_field function."""

    def test_found(self) -> None:
        assert nested_field(DOC, "spec", "replicas") == (3, True)

    def test_absent(self) -> None:
        """Test a missing key at any depth reports not found."""
        assert nested_field(DOC, "spec", "missing") == (None, False)
        assert nested_field(DOC, "missing", "deeper") == (None, False)

    def test_explicit_null_is_found(self) -> None:
        assert nested_field(DOC, "spec", "shardTopology") == (None, True)

    def test_no_fields_returns_document(self) -> None:
        assert nested_field(DOC) == (DOC, True)

    def test_intermediate_not_a_map(self) -> None:
        """Test traversing through a scalar raises a shape error with the path."""
        with pytest.raises(FieldShapeError) as exc_info:
            nested_field(DOC, "status", "phase")

        assert exc_info.value.path == "status"
        assert exc_info.value.value == "Ready"
        assert "accessor error" in str(exc_info.value)


class TestTypedAccessors:
    """Tests for nested_map, nested_list, nested_int and nested_string."""

    def test_nested_map(self) -> None:
        value, found = nested_map(DOC, "spec", "monitor")
        assert found
        assert value == {"prometheus": {"resources": {}}}

    def test_nested_map_null_is_absent(self) -> None:
        assert nested_map(DOC, "spec", "shardTopology") == (None, False)

    def test_nested_map_wrong_type(self) -> None:
        with pytest.raises(FieldShapeError):
            nested_map(DOC, "spec", "replicas")

    def test_nested_list(self) -> None:
        assert nested_list(DOC, "spec", "containers") == ([{"name": "db"}], True)

    def test_nested_list_wrong_type(self) -> None:
        with pytest.raises(FieldShapeError):
            nested_list(DOC, "spec", "monitor")

    def test_nested_int(self) -> None:
        assert nested_int(DOC, "spec", "replicas") == (3, True)
        assert nested_int(DOC, "spec", "missing") == (0, False)

    def test_nested_int_rejects_bool(self) -> None:
        """Test bool is not accepted as an integer count."""
        with pytest.raises(FieldShapeError):
            nested_int(DOC, "spec", "enabled")

    def test_nested_int_rejects_string(self) -> None:
        with pytest.raises(FieldShapeError):
            nested_int(DOC, "spec", "mode")

    def test_nested_count(self) -> None:
        assert nested_count(DOC, "spec", "replicas") == (3, True)
        assert nested_count(DOC, "spec", "missing") == (0, False)

    def test_nested_count_rejects_negative(self) -> None:
        with pytest.raises(FieldShapeError, match="non-negative int64") as exc_info:
            nested_count({"spec": {"replicas": -1}}, "spec", "replicas")
        assert exc_info.value.path == "spec.replicas"

    def test_nested_string(self) -> None:
        assert nested_string(DOC, "spec", "mode") == ("Cluster", True)
        assert nested_string(DOC, "spec", "missing") == ("", False)

    def test_nested_string_wrong_type(self) -> None:
        with pytest.raises(FieldShapeError):
            nested_string(DOC, "spec", "replicas")
