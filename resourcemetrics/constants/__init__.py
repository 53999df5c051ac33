"""Constants module for resourcemetrics.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Resource names, pod roles and database modes
- defaults.py: Default values for settings
"""

from resourcemetrics.constants.defaults import (
    ROLE_CONSISTENCY_DEFAULT,
    SETTINGS_FILE_ENCODING,
)
from resourcemetrics.constants.enums import (
    QuantityFormat,
    RoleConsistencyMode,
)
from resourcemetrics.constants.values import (
    APP_NODE_REPLICAS_DEFAULT,
    CONFIG_SERVER_POD_ROLE,
    DB_MODE_CLUSTER,
    DB_MODE_REPLICA_SET,
    DB_MODE_SENTINEL,
    DB_MODE_SHARDED,
    DB_MODE_STANDALONE,
    DEFAULT_POD_ROLE,
    EXPORTER_POD_ROLE,
    INIT_POD_ROLE,
    MONGOS_POD_ROLE,
    PER_SHARD_POD_ROLE,
    RESOURCE_CPU,
    RESOURCE_MEMORY,
    RESOURCE_NAMES,
    RESOURCE_STORAGE,
    SHARD_POD_ROLE,
    TOTAL_SHARD_POD_ROLE,
)

__all__ = [
    # App node
    "APP_NODE_REPLICAS_DEFAULT",
    # Pod roles
    "CONFIG_SERVER_POD_ROLE",
    # Database modes
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
    # Resources
    "RESOURCE_CPU",
    "RESOURCE_MEMORY",
    "RESOURCE_NAMES",
    "RESOURCE_STORAGE",
    # Defaults
    "ROLE_CONSISTENCY_DEFAULT",
    "SETTINGS_FILE_ENCODING",
    "SHARD_POD_ROLE",
    "TOTAL_SHARD_POD_ROLE",
    # Enums
    "QuantityFormat",
    "RoleConsistencyMode",
]
