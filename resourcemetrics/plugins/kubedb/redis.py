"""Resource calculator for KubeDB Redis (standalone, sentinel, cluster)."""

from __future__ import annotations

from collections.abc import Callable

from resourcemetrics.calculator.calculator import (
    Document,
    ReplicaList,
    ResourceCalculator,
    ResourceCalculatorFuncs,
    RoleResourceList,
)
from resourcemetrics.calculator.extraction import (
    ResourceSelector,
    app_node_resources,
    container_resources,
)
from resourcemetrics.calculator.resource_list import (
    mul_resource_list,
    resource_limits,
    resource_requests,
)
from resourcemetrics.constants.values import (
    APP_NODE_REPLICAS_DEFAULT,
    DB_MODE_CLUSTER,
    DB_MODE_STANDALONE,
    DEFAULT_POD_ROLE,
    EXPORTER_POD_ROLE,
    PER_SHARD_POD_ROLE,
    SHARD_POD_ROLE,
    TOTAL_SHARD_POD_ROLE,
)
from resourcemetrics.utils.unstructured import nested_count, nested_string

APP_ROLES: tuple[str, ...] = (DEFAULT_POD_ROLE,)
RUNTIME_ROLES: tuple[str, ...] = (DEFAULT_POD_ROLE, EXPORTER_POD_ROLE)


def _cluster_shape(obj: Document) -> tuple[int, int] | None:
    """Return (masters, replicas per master) in cluster mode, else None."""
    mode, found = nested_string(obj, "spec", "mode")
    if not found or mode != DB_MODE_CLUSTER:
        return None
    shards, _ = nested_count(obj, "spec", "cluster", "master")
    shard_replicas, _ = nested_count(obj, "spec", "cluster", "replicas")
    return shards, shard_replicas


class Redis:
    """Reads Redis documents; cluster mode multiplies masters by their replicas."""

    def resource_calculator(self) -> ResourceCalculator:
        return ResourceCalculatorFuncs(
            app_roles=APP_ROLES,
            runtime_roles=RUNTIME_ROLES,
            role_replicas_fn=self.role_replicas_fn,
            mode_fn=self.mode_fn,
            role_resource_limits_fn=self.role_resource_fn(resource_limits),
            role_resource_requests_fn=self.role_resource_fn(resource_requests),
        )

    def role_replicas_fn(self, obj: Document) -> ReplicaList:
        cluster = _cluster_shape(obj)
        if cluster is not None:
            shards, shard_replicas = cluster
            return {
                TOTAL_SHARD_POD_ROLE: shards * shard_replicas,
                DEFAULT_POD_ROLE: shards * shard_replicas,
                SHARD_POD_ROLE: shards,
                PER_SHARD_POD_ROLE: shard_replicas,
            }

        # Standalone or sentinel
        replicas, found = nested_count(obj, "spec", "replicas")
        if not found:
            return {DEFAULT_POD_ROLE: APP_NODE_REPLICAS_DEFAULT}
        return {DEFAULT_POD_ROLE: replicas}

    def mode_fn(self, obj: Document) -> str:
        mode, found = nested_string(obj, "spec", "mode")
        if found:
            return mode
        return DB_MODE_STANDALONE

    def role_resource_fn(
        self, fn: ResourceSelector
    ) -> Callable[[Document], RoleResourceList]:
        def role_resources(obj: Document) -> RoleResourceList:
            exporter = container_resources(obj, fn, "spec", "monitor", "prometheus")
            container, replicas = app_node_resources(obj, fn, "spec")

            cluster = _cluster_shape(obj)
            if cluster is not None:
                shards, shard_replicas = cluster
                replicas = shards * shard_replicas

            return {
                DEFAULT_POD_ROLE: mul_resource_list(container, replicas),
                EXPORTER_POD_ROLE: mul_resource_list(exporter, replicas),
            }

        return role_resources
