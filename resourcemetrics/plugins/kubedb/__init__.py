"""Resource calculators for KubeDB database kinds."""

from resourcemetrics.plugins.kubedb.mongodb import MongoDB
from resourcemetrics.plugins.kubedb.redis import Redis

GROUP = "kubedb.com"
VERSION = "v1alpha2"

__all__ = [
    "GROUP",
    "VERSION",
    "MongoDB",
    "Redis",
]
