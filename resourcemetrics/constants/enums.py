"""All enum definitions for resource calculation.

This module consolidates all enumerations used throughout the package.
"""

from enum import Enum

# =============================================================================
# Calculator behaviour
# =============================================================================


class RoleConsistencyMode(str, Enum):
    """How a calculator reacts to app roles missing from its replica list."""

    OFF = "off"
    WARN = "warn"
    STRICT = "strict"


# =============================================================================
# Quantity formats
# =============================================================================


class QuantityFormat(Enum):
    """Kubernetes quantity suffix families used when formatting values."""

    DECIMAL_SI = "DecimalSI"
    BINARY_SI = "BinarySI"
