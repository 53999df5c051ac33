"""Kubernetes resource requirement models decoded from workload documents."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictInt

from resourcemetrics.utils.resource_parser import parse_quantity


def _empty_if_none(value: Any) -> Any:
    """Treat an explicit null sub-document like an omitted one."""
    return {} if value is None else value


Quantity = Annotated[Decimal, BeforeValidator(parse_quantity)]
ResourceList = dict[str, Decimal]


class ResourceRequirements(BaseModel):
    """Compute resource requirements (limits and requests) of a container."""

    limits: Annotated[dict[str, Quantity], BeforeValidator(_empty_if_none)] = Field(
        default_factory=dict
    )
    requests: Annotated[dict[str, Quantity], BeforeValidator(_empty_if_none)] = Field(
        default_factory=dict
    )


class Container(BaseModel):
    """Any sub-document carrying a ``resources`` field."""

    resources: Annotated[ResourceRequirements, BeforeValidator(_empty_if_none)] = Field(
        default_factory=ResourceRequirements
    )


class PersistentVolumeClaimSpec(BaseModel):
    """Storage claim of an app node; only ``resources`` is read."""

    resources: Annotated[ResourceRequirements, BeforeValidator(_empty_if_none)] = Field(
        default_factory=ResourceRequirements
    )


class PodSpec(BaseModel):
    """Pod-level spec of a pod template; only ``resources`` is read."""

    resources: Annotated[ResourceRequirements, BeforeValidator(_empty_if_none)] = Field(
        default_factory=ResourceRequirements
    )


class PodTemplateSpec(BaseModel):
    """Pod template of an app node."""

    spec: Annotated[PodSpec, BeforeValidator(_empty_if_none)] = Field(
        default_factory=PodSpec
    )


class AppNode(BaseModel):
    """One homogeneous group of pods: replicas, pod template and storage claim."""

    model_config = ConfigDict(populate_by_name=True)

    replicas: StrictInt | None = Field(default=None, ge=0)
    pod_template: Annotated[PodTemplateSpec, BeforeValidator(_empty_if_none)] = Field(
        default_factory=PodTemplateSpec, alias="podTemplate"
    )
    storage: Annotated[PersistentVolumeClaimSpec, BeforeValidator(_empty_if_none)] = Field(
        default_factory=PersistentVolumeClaimSpec
    )
