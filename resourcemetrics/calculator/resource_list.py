"""Resource list arithmetic.

A resource list maps ``cpu``, ``memory`` and ``storage`` to a Decimal quantity.
Every helper here returns a new list and never materializes a zero entry; a
missing resource reads as zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

from resourcemetrics.constants.values import RESOURCE_NAMES
from resourcemetrics.models.core.resource_requirements import (
    ResourceList,
    ResourceRequirements,
)
from resourcemetrics.utils.resource_parser import from_milli_value, milli_value

_ZERO = Decimal(0)


def _quantity(rl: Mapping[str, Decimal] | None, name: str) -> Decimal:
    if not rl:
        return _ZERO
    return rl.get(name, _ZERO)


def add_resource_list(
    x: Mapping[str, Decimal] | None, y: Mapping[str, Decimal] | None
) -> ResourceList:
    """Add two resource lists resource by resource."""
    result: ResourceList = {}
    for name in RESOURCE_NAMES:
        total = _quantity(x, name) + _quantity(y, name)
        if total != _ZERO:
            result[name] = total
    return result


def mul_resource_list(x: Mapping[str, Decimal] | None, multiplier: int) -> ResourceList:
    """Scale a resource list by an integer replica count.

    Each quantity is rounded up to milli precision before scaling so that
    fractional CPU values multiply without rounding loss.

    Raises:
        ValueError: If ``multiplier`` is negative.
    """
    if multiplier < 0:
        raise ValueError(f"replica multiplier must be non-negative, got {multiplier}")
    result: ResourceList = {}
    for name in RESOURCE_NAMES:
        q = _quantity(x, name)
        if q == _ZERO:
            continue
        scaled = from_milli_value(milli_value(q) * multiplier)
        if scaled != _ZERO:
            result[name] = scaled
    return result


def max_resource_list(
    x: Mapping[str, Decimal] | None, y: Mapping[str, Decimal] | None
) -> ResourceList:
    """Take the larger quantity per resource; ``x`` wins ties."""
    result: ResourceList = {}
    for name in RESOURCE_NAMES:
        qx, qy = _quantity(x, name), _quantity(y, name)
        q = qx if qx >= qy else qy
        if q != _ZERO:
            result[name] = q
    return result


def resource_list_for_roles(
    rr: Mapping[str, Mapping[str, Decimal]] | None, roles: Iterable[str]
) -> ResourceList:
    """Sum the resource lists of ``roles``; roles missing from ``rr`` add nothing."""
    result: ResourceList = {}
    for role in roles:
        result = add_resource_list(result, (rr or {}).get(role))
    return result


def is_zero_resource_list(x: Mapping[str, Decimal] | None) -> bool:
    """Return True if no tracked resource in ``x`` is non-zero."""
    return all(_quantity(x, name) == _ZERO for name in RESOURCE_NAMES)


def resource_limits(rr: ResourceRequirements) -> ResourceList:
    """Select the limits of a resource requirement."""
    return dict(rr.limits)


def resource_requests(rr: ResourceRequirements) -> ResourceList:
    """Select the requests of a resource requirement."""
    return dict(rr.requests)
