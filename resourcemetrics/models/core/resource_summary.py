"""Workload resource summary models."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from resourcemetrics.utils.resource_parser import format_resource_list


class WorkloadResourceSummary(BaseModel):
    """All calculator queries evaluated for one workload document."""

    group: str
    version: str
    kind: str
    name: str = ""
    namespace: str = ""
    mode: str = ""
    replicas: int = 0
    role_replicas: dict[str, int] = Field(default_factory=dict)
    total_resource_limits: dict[str, Decimal] = Field(default_factory=dict)
    total_resource_requests: dict[str, Decimal] = Field(default_factory=dict)
    app_resource_limits: dict[str, Decimal] = Field(default_factory=dict)
    app_resource_requests: dict[str, Decimal] = Field(default_factory=dict)
    role_resource_limits: dict[str, dict[str, Decimal]] = Field(default_factory=dict)
    role_resource_requests: dict[str, dict[str, Decimal]] = Field(default_factory=dict)

    def to_quantity_strings(self) -> dict[str, dict[str, str]]:
        """Render the aggregate lists as Kubernetes quantity strings."""
        return {
            "totalResourceLimits": format_resource_list(self.total_resource_limits),
            "totalResourceRequests": format_resource_list(self.total_resource_requests),
            "appResourceLimits": format_resource_list(self.app_resource_limits),
            "appResourceRequests": format_resource_list(self.app_resource_requests),
        }
