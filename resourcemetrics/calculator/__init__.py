"""Resource calculator contract, arithmetic and registry."""

from resourcemetrics.calculator.calculator import (
    Document,
    ReplicaList,
    ResourceCalculator,
    ResourceCalculatorFuncs,
    RoleConsistencyError,
    RoleResourceList,
)
from resourcemetrics.calculator.extraction import (
    ResourceDecodeError,
    aggregate_container_resources,
    app_node_resources,
    container_resources,
    storage_resources,
)
from resourcemetrics.calculator.registry import (
    CalculatorNotFoundError,
    CalculatorRegistry,
    GroupVersionKind,
    default_registry,
    lookup,
    register,
)
from resourcemetrics.calculator.resource_list import (
    add_resource_list,
    is_zero_resource_list,
    max_resource_list,
    mul_resource_list,
    resource_limits,
    resource_list_for_roles,
    resource_requests,
)
from resourcemetrics.calculator.summary import gvk_from_object, summarize_resources

__all__ = [
    "CalculatorNotFoundError",
    "CalculatorRegistry",
    "Document",
    "GroupVersionKind",
    "ReplicaList",
    "ResourceCalculator",
    "ResourceCalculatorFuncs",
    "ResourceDecodeError",
    "RoleConsistencyError",
    "RoleResourceList",
    "add_resource_list",
    "aggregate_container_resources",
    "app_node_resources",
    "container_resources",
    "default_registry",
    "gvk_from_object",
    "is_zero_resource_list",
    "lookup",
    "max_resource_list",
    "mul_resource_list",
    "register",
    "resource_limits",
    "resource_list_for_roles",
    "resource_requests",
    "storage_resources",
    "summarize_resources",
]
