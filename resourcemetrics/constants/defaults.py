"""Default values for settings.

All default values used in CalculatorSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Calculator defaults
# ============================================================================

ROLE_CONSISTENCY_DEFAULT: Final = "off"

# ============================================================================
# Settings file
# ============================================================================

SETTINGS_FILE_ENCODING: Final = "utf-8"

__all__ = [
    "ROLE_CONSISTENCY_DEFAULT",
    "SETTINGS_FILE_ENCODING",
]
