"""Utility functions for resourcemetrics."""

from resourcemetrics.utils.resource_parser import (
    format_quantity,
    format_resource_list,
    from_milli_value,
    milli_value,
    parse_quantity,
)
from resourcemetrics.utils.unstructured import (
    FieldShapeError,
    nested_count,
    nested_field,
    nested_int,
    nested_list,
    nested_map,
    nested_string,
)

__all__ = [
    # Document access
    "FieldShapeError",
    # Quantities
    "format_quantity",
    "format_resource_list",
    "from_milli_value",
    "milli_value",
    "nested_count",
    "nested_field",
    "nested_int",
    "nested_list",
    "nested_map",
    "nested_string",
    "parse_quantity",
]
