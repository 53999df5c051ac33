"""
Built-in resource calculator plugins.

Importing this package registers every built-in calculator in the default
registry. Use ``install_builtin_calculators`` to populate a separate registry,
for example in tests.
"""

from __future__ import annotations

from collections.abc import Callable

from resourcemetrics.calculator.calculator import ResourceCalculator
from resourcemetrics.calculator.registry import (
    CalculatorRegistry,
    GroupVersionKind,
    default_registry,
)
from resourcemetrics.plugins.kubedb import GROUP as KUBEDB_GROUP
from resourcemetrics.plugins.kubedb import VERSION as KUBEDB_VERSION
from resourcemetrics.plugins.kubedb import MongoDB, Redis

BUILTIN_CALCULATORS: dict[GroupVersionKind, Callable[[], ResourceCalculator]] = {
    GroupVersionKind(KUBEDB_GROUP, KUBEDB_VERSION, "MongoDB"): MongoDB().resource_calculator,
    GroupVersionKind(KUBEDB_GROUP, KUBEDB_VERSION, "Redis"): Redis().resource_calculator,
}


def install_builtin_calculators(registry: CalculatorRegistry | None = None) -> CalculatorRegistry:
    """
    Register every built-in calculator.

    Args:
        registry (CalculatorRegistry | None): Target registry, the default registry if omitted.

    Returns:
        CalculatorRegistry: The populated registry.
    """
    target = registry if registry is not None else default_registry
    for gvk, factory in BUILTIN_CALCULATORS.items():
        target.register(gvk, factory())
    return target


# Plugins register themselves when the package is loaded
install_builtin_calculators()
