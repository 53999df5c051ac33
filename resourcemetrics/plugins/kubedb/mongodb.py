"""Resource calculator for KubeDB MongoDB (standalone, replica set, sharded)."""

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
    CONFIG_SERVER_POD_ROLE,
    DB_MODE_REPLICA_SET,
    DB_MODE_SHARDED,
    DB_MODE_STANDALONE,
    DEFAULT_POD_ROLE,
    EXPORTER_POD_ROLE,
    MONGOS_POD_ROLE,
    PER_SHARD_POD_ROLE,
    SHARD_POD_ROLE,
    TOTAL_SHARD_POD_ROLE,
)
from resourcemetrics.utils.unstructured import nested_count, nested_map

APP_ROLES: tuple[str, ...] = (
    DEFAULT_POD_ROLE,
    TOTAL_SHARD_POD_ROLE,
    CONFIG_SERVER_POD_ROLE,
    MONGOS_POD_ROLE,
)
RUNTIME_ROLES: tuple[str, ...] = (*APP_ROLES, EXPORTER_POD_ROLE)


def _node_replicas(topology: dict, node: str) -> int:
    """Replicas of a topology node; 0 if the node is absent, 1 if unset."""
    _, found = nested_map(topology, node)
    if not found:
        return 0
    replicas, found = nested_count(topology, node, "replicas")
    return replicas if found else APP_NODE_REPLICAS_DEFAULT


class MongoDB:
    """Reads MongoDB documents in any of their three topologies."""

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
        # Sharded MongoDB cluster
        shard_topology, found = nested_map(obj, "spec", "shardTopology")
        if found:
            shards, _ = nested_count(shard_topology, "shard", "shards")
            shard_replicas = _node_replicas(shard_topology, "shard")
            return {
                TOTAL_SHARD_POD_ROLE: shards * shard_replicas,
                SHARD_POD_ROLE: shards,
                PER_SHARD_POD_ROLE: shard_replicas,
                CONFIG_SERVER_POD_ROLE: _node_replicas(shard_topology, "configServer"),
                MONGOS_POD_ROLE: _node_replicas(shard_topology, "mongos"),
            }

        # MongoDB ReplicaSet or Standalone
        replicas, found = nested_count(obj, "spec", "replicas")
        if not found:
            return {DEFAULT_POD_ROLE: APP_NODE_REPLICAS_DEFAULT}
        return {DEFAULT_POD_ROLE: replicas}

    def mode_fn(self, obj: Document) -> str:
        _, found = nested_map(obj, "spec", "shardTopology")
        if found:
            return DB_MODE_SHARDED
        _, found = nested_map(obj, "spec", "replicaSet")
        if found:
            return DB_MODE_REPLICA_SET
        return DB_MODE_STANDALONE

    def role_resource_fn(
        self, fn: ResourceSelector
    ) -> Callable[[Document], RoleResourceList]:
        def role_resources(obj: Document) -> RoleResourceList:
            exporter = container_resources(obj, fn, "spec", "monitor", "prometheus")

            # Sharded MongoDB
            shard_topology, found = nested_map(obj, "spec", "shardTopology")
            if found:
                shards, _ = nested_count(shard_topology, "shard", "shards")
                shard, shard_replicas = app_node_resources(shard_topology, fn, "shard")
                config_server, config_server_replicas = app_node_resources(
                    shard_topology, fn, "configServer"
                )
                mongos, mongos_replicas = app_node_resources(shard_topology, fn, "mongos")

                total_shard_replicas = shards * shard_replicas
                return {
                    TOTAL_SHARD_POD_ROLE: mul_resource_list(shard, total_shard_replicas),
                    CONFIG_SERVER_POD_ROLE: mul_resource_list(
                        config_server, config_server_replicas
                    ),
                    MONGOS_POD_ROLE: mul_resource_list(mongos, mongos_replicas),
                    EXPORTER_POD_ROLE: mul_resource_list(
                        exporter, total_shard_replicas + config_server_replicas + mongos_replicas
                    ),
                }

            # MongoDB ReplicaSet or Standalone
            container, replicas = app_node_resources(obj, fn, "spec")
            return {
                DEFAULT_POD_ROLE: mul_resource_list(container, replicas),
                EXPORTER_POD_ROLE: mul_resource_list(exporter, replicas),
            }

        return role_resources
