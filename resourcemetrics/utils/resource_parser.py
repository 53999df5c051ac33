"""Resource parsing utilities for Kubernetes quantities.

Provides functions to parse Kubernetes quantity strings into exact values and back:
- Quantities: parsed to Decimal in base units (cores, bytes)
- Milli values: integer milli-units used for lossless scaling
- Formatting: DecimalSI for CPU, BinarySI for memory and storage
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation

from resourcemetrics.constants.enums import QuantityFormat
from resourcemetrics.constants.values import RESOURCE_CPU

# Module-level constants to avoid re-creating on every function call.
# Suffix multipliers for parse_quantity() to convert to base units.
_BINARY_MULTIPLIERS: dict[str, int] = {
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}
_DECIMAL_MULTIPLIERS: dict[str, Decimal] = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal(10) ** 3,
    "M": Decimal(10) ** 6,
    "G": Decimal(10) ** 9,
    "T": Decimal(10) ** 12,
    "P": Decimal(10) ** 15,
    "E": Decimal(10) ** 18,
}

# Largest suffix first so formatting picks the most compact representation.
_BINARY_FORMAT_SUFFIXES: tuple[tuple[str, int], ...] = tuple(
    sorted(_BINARY_MULTIPLIERS.items(), key=lambda item: item[1], reverse=True)
)

_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|n|u|m|k|M|G|T|P|E)?$"
)

_MILLI = Decimal(1000)


def parse_quantity(quantity: str | int | float | Decimal) -> Decimal:
    """Parse a Kubernetes quantity into a Decimal in base units.

    Handles the quantity formats accepted by the Kubernetes API:
    - Binary SI: "1Gi" -> 1073741824
    - Decimal SI: "500m" -> 0.5, "2k" -> 2000
    - Exponent: "1e3" -> 1000
    - Plain numbers: 2, 1.5, "128974848"

    Args:
        quantity: Quantity string or number

    Returns:
        Quantity value as Decimal.

    Raises:
        ValueError: If the value is not a valid non-negative quantity.
    """
    if isinstance(quantity, bool):
        raise ValueError(f"invalid quantity {quantity!r}: expected a string or number")

    if isinstance(quantity, Decimal):
        value = quantity
    elif isinstance(quantity, (int, float)):
        try:
            value = Decimal(str(quantity))
        except InvalidOperation as exc:
            raise ValueError(f"invalid quantity {quantity!r}") from exc
    elif isinstance(quantity, str):
        value = _parse_quantity_string(quantity)
    else:
        raise ValueError(
            f"invalid quantity {quantity!r}: expected a string or number, "
            f"got {type(quantity).__name__}"
        )

    if not value.is_finite():
        raise ValueError(f"invalid quantity {quantity!r}: must be finite")
    if value < 0:
        raise ValueError(f"invalid quantity {quantity!r}: must not be negative")
    return value


def _parse_quantity_string(quantity: str) -> Decimal:
    """Parse the string form of a quantity."""
    match = _QUANTITY_PATTERN.match(quantity.strip())
    if match is None:
        raise ValueError(f"invalid quantity {quantity!r}")

    number = Decimal(match.group("number"))
    suffix = match.group("suffix") or ""
    if suffix in _BINARY_MULTIPLIERS:
        return number * _BINARY_MULTIPLIERS[suffix]
    return number * _DECIMAL_MULTIPLIERS[suffix]


def milli_value(quantity: Decimal) -> int:
    """Return the quantity in milli-units, rounded up.

    Args:
        quantity: Quantity in base units

    Returns:
        Integer number of milli-units (e.g., 0.25 cores -> 250).
    """
    scaled = quantity * _MILLI
    integral = scaled.to_integral_value()
    if integral < scaled:
        integral += 1
    return int(integral)


def from_milli_value(milli: int) -> Decimal:
    """Convert an integer milli-unit count back to base units."""
    return Decimal(milli) / _MILLI


def format_quantity(
    quantity: Decimal, quantity_format: QuantityFormat = QuantityFormat.DECIMAL_SI
) -> str:
    """Format a quantity as a Kubernetes quantity string.

    Formats used:
    - DecimalSI: 1.5 -> "1500m", 2 -> "2"
    - BinarySI: 3221225472 -> "3Gi", 1000 -> "1000"

    Args:
        quantity: Quantity in base units
        quantity_format: Suffix family to render with

    Returns:
        Canonical quantity string.
    """
    if quantity == quantity.to_integral_value():
        whole = int(quantity)
        if quantity_format is QuantityFormat.BINARY_SI and whole != 0:
            for suffix, mult in _BINARY_FORMAT_SUFFIXES:
                if whole % mult == 0:
                    return f"{whole // mult}{suffix}"
        return str(whole)

    scaled = quantity * _MILLI
    if scaled == scaled.to_integral_value():
        return f"{int(scaled)}m"
    return format(quantity.normalize(), "f")


def format_resource_list(rl: Mapping[str, Decimal]) -> dict[str, str]:
    """Render a resource list as quantity strings; CPU in DecimalSI, the rest in BinarySI."""
    return {
        name: format_quantity(
            value,
            QuantityFormat.DECIMAL_SI if name == RESOURCE_CPU else QuantityFormat.BINARY_SI,
        )
        for name, value in rl.items()
    }
