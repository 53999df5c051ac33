"""Scalar constants for resource calculation.

All resource names, pod roles and database modes with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Resource names
# ============================================================================

RESOURCE_CPU: Final = "cpu"
RESOURCE_MEMORY: Final = "memory"
RESOURCE_STORAGE: Final = "storage"

# Order in which arithmetic helpers visit resources
RESOURCE_NAMES: Final = (RESOURCE_CPU, RESOURCE_MEMORY, RESOURCE_STORAGE)

# ============================================================================
# Pod roles
# ============================================================================

DEFAULT_POD_ROLE: Final = "default"
EXPORTER_POD_ROLE: Final = "exporter"
INIT_POD_ROLE: Final = "init"
SHARD_POD_ROLE: Final = "shard"
PER_SHARD_POD_ROLE: Final = "per-shard"
TOTAL_SHARD_POD_ROLE: Final = "total-shard"
CONFIG_SERVER_POD_ROLE: Final = "config-server"
MONGOS_POD_ROLE: Final = "mongos"

# ============================================================================
# Database modes
# ============================================================================

DB_MODE_STANDALONE: Final = "Standalone"
DB_MODE_REPLICA_SET: Final = "ReplicaSet"
DB_MODE_SHARDED: Final = "Sharded"
DB_MODE_CLUSTER: Final = "Cluster"
DB_MODE_SENTINEL: Final = "Sentinel"

# ============================================================================
# App node
# ============================================================================

APP_NODE_REPLICAS_DEFAULT: Final = 1

__all__ = [
    "APP_NODE_REPLICAS_DEFAULT",
    "CONFIG_SERVER_POD_ROLE",
    "DB_MODE_CLUSTER",
    "DB_MODE_REPLICA_SET",
    "DB_MODE_SENTINEL",
    "DB_MODE_SHARDED",
    "DB_MODE_STANDALONE",
    "DEFAULT_POD_ROLE",
    "EXPORTER_POD_ROLE",
    "INIT_POD_ROLE",
    "MONGOS_POD_ROLE",
    "PER_SHARD_POD_ROLE",
    "RESOURCE_CPU",
    "RESOURCE_MEMORY",
    "RESOURCE_NAMES",
    "RESOURCE_STORAGE",
    "SHARD_POD_ROLE",
    "TOTAL_SHARD_POD_ROLE",
]
