"""
Registry of resource calculators keyed by workload kind.

Calculators are registered once per group/version/kind during start-up and
only looked up afterwards. The registry takes no locks: every ``register`` call
must complete before lookups start on other threads.

Example usage:
    .. code-block:: python

        from resourcemetrics.calculator.registry import GroupVersionKind, default_registry
        calc = default_registry.lookup(GroupVersionKind("kubedb.com", "v1alpha2", "MongoDB"))
        calc.total_resource_requests(obj)
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from resourcemetrics.calculator.calculator import ResourceCalculator

logger = logging.getLogger(__name__)


class GroupVersionKind(NamedTuple):
    """Identifies a workload kind."""

    group: str
    version: str
    kind: str

    @classmethod
    def from_api_version(cls, api_version: str, kind: str) -> GroupVersionKind:
        """
        Build a GroupVersionKind from an ``apiVersion`` string.

        Args:
            api_version (str): ``group/version`` or, for the core group, ``version``.
            kind (str): Kind name.

        Raises:
            ValueError: If ``api_version`` has more than one ``/``.
        """
        parts = api_version.split("/")
        if len(parts) == 1:
            return cls("", parts[0], kind)
        if len(parts) == 2:
            return cls(parts[0], parts[1], kind)
        raise ValueError(f"unexpected GroupVersion string: {api_version}")

    def __str__(self) -> str:
        return f"{self.group}/{self.version}, Kind={self.kind}"


class CalculatorNotFoundError(LookupError):
    """Raised when no calculator is registered for a workload kind."""

    def __init__(self, gvk: GroupVersionKind) -> None:
        self.gvk = gvk
        super().__init__(f"registry not found for {gvk}")


class CalculatorRegistry:
    """Mapping from GroupVersionKind to ResourceCalculator."""

    def __init__(self) -> None:
        self._calculators: dict[GroupVersionKind, ResourceCalculator] = {}

    def register(self, gvk: GroupVersionKind, calculator: ResourceCalculator) -> None:
        """
        Install the calculator for a kind, replacing any earlier one.

        Args:
            gvk (GroupVersionKind): Workload kind.
            calculator (ResourceCalculator): Calculator for documents of that kind.
        """
        if gvk in self._calculators:
            logger.debug("Replacing resource calculator for %s", gvk)
        else:
            logger.debug("Registered resource calculator for %s", gvk)
        self._calculators[gvk] = calculator

    def lookup(self, gvk: GroupVersionKind) -> ResourceCalculator:
        """
        Return the calculator registered for a kind.

        Raises:
            CalculatorNotFoundError: If the kind has no registered calculator.
        """
        calculator = self._calculators.get(gvk)
        if calculator is None:
            raise CalculatorNotFoundError(gvk)
        return calculator

    def unregister(self, gvk: GroupVersionKind) -> None:
        """Remove the calculator for a kind if one is registered."""
        self._calculators.pop(gvk, None)

    def clear(self) -> None:
        """Remove every registered calculator."""
        self._calculators.clear()

    def kinds(self) -> list[GroupVersionKind]:
        """Registered kinds, sorted."""
        return sorted(self._calculators)

    def __contains__(self, gvk: object) -> bool:
        return gvk in self._calculators

    def __len__(self) -> int:
        return len(self._calculators)


# Process-wide registry populated by the built-in plugins
default_registry = CalculatorRegistry()


def register(gvk: GroupVersionKind, calculator: ResourceCalculator) -> None:
    """Register a calculator in the default registry."""
    default_registry.register(gvk, calculator)


def lookup(gvk: GroupVersionKind) -> ResourceCalculator:
    """Look up a calculator in the default registry."""
    return default_registry.lookup(gvk)
