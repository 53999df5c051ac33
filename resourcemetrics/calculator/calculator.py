"""Resource calculator contract and its default role-based adapter.

A workload kind plugs in by providing four role-keyed primitives: replicas per
role, the operating mode, and resource limits / requests per role. The
``ResourceCalculatorFuncs`` adapter derives every aggregate query from them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from resourcemetrics.calculator.resource_list import (
    is_zero_resource_list,
    max_resource_list,
    resource_list_for_roles,
)
from resourcemetrics.constants.enums import RoleConsistencyMode
from resourcemetrics.constants.values import INIT_POD_ROLE
from resourcemetrics.models.core.resource_requirements import ResourceList

logger = logging.getLogger(__name__)

Document = Mapping[str, Any]
ReplicaList = dict[str, int]
RoleResourceList = dict[str, ResourceList]


class RoleConsistencyError(ValueError):
    """Raised when an app role has resources but no replica count."""

    def __init__(self, roles: list[str]) -> None:
        self.roles = roles
        super().__init__(
            f"roles {', '.join(roles)} have resources but are missing from the replica list"
        )


class ResourceCalculator(ABC):
    """Computes replica and resource totals for one workload kind."""

    @abstractmethod
    def replicas(self, obj: Document) -> int:
        """Total replicas across app roles."""
        ...

    @abstractmethod
    def role_replicas(self, obj: Document) -> ReplicaList:
        """Replica count per pod role."""
        ...

    @abstractmethod
    def mode(self, obj: Document) -> str:
        """Operating mode of the workload, or an empty string."""
        ...

    @abstractmethod
    def total_resource_limits(self, obj: Document) -> ResourceList:
        """Peak limits across runtime and init phases."""
        ...

    @abstractmethod
    def total_resource_requests(self, obj: Document) -> ResourceList:
        """Peak requests across runtime and init phases."""
        ...

    @abstractmethod
    def app_resource_limits(self, obj: Document) -> ResourceList:
        """Limits of the app roles only."""
        ...

    @abstractmethod
    def app_resource_requests(self, obj: Document) -> ResourceList:
        """Requests of the app roles only."""
        ...

    @abstractmethod
    def role_resource_limits(self, obj: Document) -> RoleResourceList:
        """Limits per pod role."""
        ...

    @abstractmethod
    def role_resource_requests(self, obj: Document) -> RoleResourceList:
        """Requests per pod role."""
        ...


@dataclass(frozen=True)
class ResourceCalculatorFuncs(ResourceCalculator):
    """Default calculator built from role-keyed functions.

    ``app_roles`` are the roles of the main application (e.g., database)
    containers. ``runtime_roles`` are the app roles plus the exporter and any
    other sidecar running alongside them; they must not include the init role.
    """

    app_roles: tuple[str, ...]
    runtime_roles: tuple[str, ...]
    role_replicas_fn: Callable[[Document], ReplicaList]
    role_resource_limits_fn: Callable[[Document], RoleResourceList]
    role_resource_requests_fn: Callable[[Document], RoleResourceList]
    mode_fn: Callable[[Document], str] | None = None
    role_consistency: RoleConsistencyMode = RoleConsistencyMode.OFF

    def replicas(self, obj: Document) -> int:
        replicas = self.role_replicas(obj)
        return sum(replicas.get(role, 0) for role in self.app_roles)

    def role_replicas(self, obj: Document) -> ReplicaList:
        return self.role_replicas_fn(obj)

    def mode(self, obj: Document) -> str:
        if self.mode_fn is not None:
            return self.mode_fn(obj)
        return ""

    def total_resource_limits(self, obj: Document) -> ResourceList:
        return self._total(self.role_resource_limits(obj))

    def total_resource_requests(self, obj: Document) -> ResourceList:
        return self._total(self.role_resource_requests(obj))

    def app_resource_limits(self, obj: Document) -> ResourceList:
        return resource_list_for_roles(self.role_resource_limits(obj), self.app_roles)

    def app_resource_requests(self, obj: Document) -> ResourceList:
        return resource_list_for_roles(self.role_resource_requests(obj), self.app_roles)

    def role_resource_limits(self, obj: Document) -> RoleResourceList:
        rr = self.role_resource_limits_fn(obj)
        self._check_role_consistency(obj, rr)
        return rr

    def role_resource_requests(self, obj: Document) -> RoleResourceList:
        rr = self.role_resource_requests_fn(obj)
        self._check_role_consistency(obj, rr)
        return rr

    def _total(self, rr: RoleResourceList) -> ResourceList:
        # init containers run before the runtime containers, never alongside them
        return max_resource_list(
            resource_list_for_roles(rr, self.runtime_roles),
            resource_list_for_roles(rr, (INIT_POD_ROLE,)),
        )

    def _check_role_consistency(self, obj: Document, rr: RoleResourceList) -> None:
        if self.role_consistency is RoleConsistencyMode.OFF:
            return

        replicas = self.role_replicas(obj)
        missing = [
            role
            for role in self.app_roles
            if not is_zero_resource_list(rr.get(role)) and role not in replicas
        ]
        if not missing:
            return
        if self.role_consistency is RoleConsistencyMode.STRICT:
            raise RoleConsistencyError(missing)
        logger.warning(
            "Roles %s have resources but are missing from the replica list", ", ".join(missing)
        )
