"""Entry points that size a workload document end to end."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from resourcemetrics.calculator.registry import (
    CalculatorRegistry,
    GroupVersionKind,
    default_registry,
)
from resourcemetrics.models.core.resource_summary import WorkloadResourceSummary
from resourcemetrics.utils.unstructured import FieldShapeError, nested_string


def gvk_from_object(obj: Mapping[str, Any]) -> GroupVersionKind:
    """Read the GroupVersionKind from a document's ``apiVersion`` and ``kind``.

    Raises:
        FieldShapeError: If either field is missing or not a string.
        ValueError: If ``apiVersion`` is malformed.
    """
    api_version, found = nested_string(obj, "apiVersion")
    if not found or not api_version:
        raise FieldShapeError(("apiVersion",), obj.get("apiVersion"), "string")
    kind, found = nested_string(obj, "kind")
    if not found or not kind:
        raise FieldShapeError(("kind",), obj.get("kind"), "string")
    return GroupVersionKind.from_api_version(api_version, kind)


def summarize_resources(
    obj: Mapping[str, Any], registry: CalculatorRegistry | None = None
) -> WorkloadResourceSummary:
    """Evaluate every calculator query for ``obj``.

    Args:
        obj: Workload document with apiVersion and kind
        registry: Registry to resolve the kind in (defaults to the process registry)

    Returns:
        WorkloadResourceSummary with replicas, mode and resource lists.
    """
    gvk = gvk_from_object(obj)
    calc = (registry if registry is not None else default_registry).lookup(gvk)

    name, _ = nested_string(obj, "metadata", "name")
    namespace, _ = nested_string(obj, "metadata", "namespace")

    return WorkloadResourceSummary(
        group=gvk.group,
        version=gvk.version,
        kind=gvk.kind,
        name=name,
        namespace=namespace,
        mode=calc.mode(obj),
        replicas=calc.replicas(obj),
        role_replicas=calc.role_replicas(obj),
        total_resource_limits=calc.total_resource_limits(obj),
        total_resource_requests=calc.total_resource_requests(obj),
        app_resource_limits=calc.app_resource_limits(obj),
        app_resource_requests=calc.app_resource_requests(obj),
        role_resource_limits=calc.role_resource_limits(obj),
        role_resource_requests=calc.role_resource_requests(obj),
    )
