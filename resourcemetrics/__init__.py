"""Aggregate CPU, memory and storage requirements of multi-role workloads."""

from resourcemetrics import plugins
from resourcemetrics.calculator import (
    CalculatorNotFoundError,
    CalculatorRegistry,
    GroupVersionKind,
    ResourceCalculator,
    ResourceCalculatorFuncs,
    ResourceDecodeError,
    RoleConsistencyError,
    default_registry,
    gvk_from_object,
    lookup,
    register,
    summarize_resources,
)
from resourcemetrics.utils.unstructured import FieldShapeError

__version__ = "0.1.0"

__all__ = [
    "CalculatorNotFoundError",
    "CalculatorRegistry",
    "FieldShapeError",
    "GroupVersionKind",
    "ResourceCalculator",
    "ResourceCalculatorFuncs",
    "ResourceDecodeError",
    "RoleConsistencyError",
    "default_registry",
    "gvk_from_object",
    "lookup",
    "plugins",
    "register",
    "summarize_resources",
]
