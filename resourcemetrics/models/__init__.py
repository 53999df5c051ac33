"""Data models for resourcemetrics."""

from resourcemetrics.models.core.resource_requirements import (
    AppNode,
    Container,
    PersistentVolumeClaimSpec,
    PodSpec,
    PodTemplateSpec,
    Quantity,
    ResourceList,
    ResourceRequirements,
)
from resourcemetrics.models.core.resource_summary import WorkloadResourceSummary
from resourcemetrics.models.state.settings import (
    CalculatorSettings,
    ConfigError,
    ConfigLoadError,
)

__all__ = [
    "AppNode",
    "CalculatorSettings",
    "ConfigError",
    "ConfigLoadError",
    "Container",
    "PersistentVolumeClaimSpec",
    "PodSpec",
    "PodTemplateSpec",
    "Quantity",
    "ResourceList",
    "ResourceRequirements",
    "WorkloadResourceSummary",
]
