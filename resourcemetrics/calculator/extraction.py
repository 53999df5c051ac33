"""Resource extraction from workload document nodes.

Each helper reads one sub-document by path, decodes it into a requirement
model and applies a selector (``resource_limits`` or ``resource_requests``).
An absent sub-document yields an empty resource list; a present but malformed
one raises ``ResourceDecodeError``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from resourcemetrics.calculator.resource_list import add_resource_list
from resourcemetrics.constants.values import APP_NODE_REPLICAS_DEFAULT, RESOURCE_STORAGE
from resourcemetrics.models.core.resource_requirements import (
    AppNode,
    Container,
    PersistentVolumeClaimSpec,
    ResourceList,
    ResourceRequirements,
)
from resourcemetrics.utils.unstructured import FieldShapeError, nested_field

logger = logging.getLogger(__name__)

ResourceSelector = Callable[[ResourceRequirements], ResourceList]
ResourceAggregator = Callable[[ResourceList, ResourceList], ResourceList]

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class ResourceDecodeError(FieldShapeError):
    """Raised when a sub-document does not decode into its expected shape."""

    def __init__(
        self, fields: tuple[str, ...], value: Any, expected: str, cause: ValidationError
    ) -> None:
        super().__init__(fields, value, expected)
        self.cause = cause
        self.args = (f"failed to parse {expected} at {self.path}: {cause}",)


def _decode(model: type[_ModelT], value: Any, fields: tuple[str, ...]) -> _ModelT:
    if not isinstance(value, Mapping):
        raise FieldShapeError(fields, value, "map[string]interface{}")
    try:
        return model.model_validate(value)
    except ValidationError as exc:
        raise ResourceDecodeError(fields, value, model.__name__, exc) from exc


def container_resources(
    obj: Mapping[str, Any], fn: ResourceSelector, *fields: str
) -> ResourceList:
    """Decode the container-like node at ``fields`` and select its resources."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return {}
    container = _decode(Container, val, fields)
    return fn(container.resources)


def aggregate_container_resources(
    obj: Mapping[str, Any],
    fn: ResourceSelector,
    *fields: str,
    aggregate: ResourceAggregator = add_resource_list,
) -> ResourceList:
    """Combine the resources of every container in the list at ``fields``.

    Entries that are not objects are skipped.
    """
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return {}
    if not isinstance(val, list):
        raise FieldShapeError(fields, val, "[]interface{}")

    result: ResourceList = {}
    for i, item in enumerate(val):
        if not isinstance(item, Mapping):
            logger.debug("Skipping non-object entry %d in %s: %r", i, ".".join(fields), item)
            continue
        container = _decode(Container, item, (*fields, str(i)))
        result = aggregate(result, fn(container.resources))
    return result


def storage_resources(
    obj: Mapping[str, Any], fn: ResourceSelector, *fields: str
) -> ResourceList:
    """Decode the storage claim at ``fields`` and select its resources."""
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return {}
    storage = _decode(PersistentVolumeClaimSpec, val, fields)
    return fn(storage.resources)


def app_node_resources(
    obj: Mapping[str, Any], fn: ResourceSelector, *fields: str
) -> tuple[ResourceList, int]:
    """Decode the app node at ``fields``.

    Args:
        obj: Workload document
        fn: Selector for limits or requests
        *fields: Path to the node

    Returns:
        Tuple of (per-replica resources, replicas). Storage comes from the
        storage claim only. An absent node returns ({}, 0).
    """
    val, found = nested_field(obj, *fields)
    if not found or val is None:
        return {}, 0
    node = _decode(AppNode, val, fields)

    replicas = node.replicas if node.replicas is not None else APP_NODE_REPLICAS_DEFAULT
    rl = dict(fn(node.pod_template.spec.resources))
    storage = fn(node.storage.resources).get(RESOURCE_STORAGE)
    if storage:
        rl[RESOURCE_STORAGE] = storage
    else:
        rl.pop(RESOURCE_STORAGE, None)
    return rl, replicas
