"""Calculator settings models."""

from pydantic import BaseModel, ConfigDict

from resourcemetrics.constants.defaults import ROLE_CONSISTENCY_DEFAULT
from resourcemetrics.constants.enums import RoleConsistencyMode


class CalculatorSettings(BaseModel):
    """Calculator settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Check app roles with resources against the replica list
    role_consistency: RoleConsistencyMode = RoleConsistencyMode(ROLE_CONSISTENCY_DEFAULT)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
