"""Tests for the Redis resource calculator."""

from __future__ import annotations

from decimal import Decimal

import pytest
import yaml

from resourcemetrics.calculator.calculator import ResourceCalculator
from resourcemetrics.plugins.kubedb.redis import Redis
from resourcemetrics.utils.unstructured import FieldShapeError

GI = 1024**3

CLUSTER = yaml.safe_load(
    """
apiVersion: kubedb.com/v1alpha2
kind: Redis
spec:
  mode: Cluster
  cluster:
    master: 3
    replicas: 2
  podTemplate:
    spec:
      resources:
        requests:
          cpu: 250m
          memory: 256Mi
        limits:
          memory: 512Mi
  storage:
    resources:
      requests:
        storage: 1Gi
  monitor:
    prometheus:
      resources:
        requests:
          cpu: 20m
"""
)


class TestRedis:
    """Tests for Redis calculator."""

    @pytest.fixture
    def calculator(self) -> ResourceCalculator:
        return Redis().resource_calculator()

    def test_standalone_defaults(self, calculator: ResourceCalculator) -> None:
        doc = {"spec": {"podTemplate": {"spec": {"resources": {"requests": {"cpu": "1"}}}}}}

        assert calculator.mode(doc) == "Standalone"
        assert calculator.role_replicas(doc) == {"default": 1}
        assert calculator.total_resource_requests(doc) == {"cpu": Decimal(1)}

    def test_sentinel_mode(self, calculator: ResourceCalculator) -> None:
        doc = {"spec": {"mode": "Sentinel", "replicas": 3}}
        assert calculator.mode(doc) == "Sentinel"
        assert calculator.replicas(doc) == 3

    def test_cluster_replicas(self, calculator: ResourceCalculator) -> None:
        assert calculator.mode(CLUSTER) == "Cluster"
        assert calculator.role_replicas(CLUSTER) == {
            "total-shard": 6,
            "default": 6,
            "shard": 3,
            "per-shard": 2,
        }
        assert calculator.replicas(CLUSTER) == 6

    def test_cluster_resources(self, calculator: ResourceCalculator) -> None:
        """Test cluster mode scales by masters x replicas."""
        assert calculator.app_resource_requests(CLUSTER) == {
            "cpu": Decimal("1.5"),
            "memory": Decimal(6 * 256 * 1024**2),
            "storage": Decimal(6 * GI),
        }
        assert calculator.role_resource_requests(CLUSTER)["exporter"] == {"cpu": Decimal("0.12")}
        assert calculator.total_resource_requests(CLUSTER)["cpu"] == Decimal("1.62")
        assert calculator.total_resource_limits(CLUSTER) == {"memory": Decimal(3 * GI)}

    def test_invalid_mode_type(self, calculator: ResourceCalculator) -> None:
        with pytest.raises(FieldShapeError):
            calculator.mode({"spec": {"mode": 1}})

    @pytest.mark.parametrize(
        "doc",
        [
            {"spec": {"mode": "Cluster", "cluster": {"master": -3, "replicas": 2}}},
            {"spec": {"mode": "Cluster", "cluster": {"master": 3, "replicas": -2}}},
            {"spec": {"mode": "Sentinel", "replicas": -1}},
        ],
    )
    def test_negative_counts(self, calculator: ResourceCalculator, doc: dict) -> None:
        with pytest.raises(FieldShapeError):
            calculator.role_replicas(doc)
        with pytest.raises(FieldShapeError):
            calculator.total_resource_requests(doc)
