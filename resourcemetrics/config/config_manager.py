"""Settings loading for resource calculators.

Settings live in a YAML mapping, for example::

    role_consistency: warn
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from resourcemetrics.calculator.calculator import ResourceCalculator, ResourceCalculatorFuncs
from resourcemetrics.calculator.registry import CalculatorRegistry
from resourcemetrics.constants.defaults import SETTINGS_FILE_ENCODING
from resourcemetrics.models.state.settings import CalculatorSettings, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads CalculatorSettings and applies them to calculators."""

    @staticmethod
    def load(path: str | Path) -> CalculatorSettings:
        """Load settings from a YAML file.

        An empty file yields default settings.

        Args:
            path: Settings file path

        Returns:
            Validated CalculatorSettings.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        settings_path = Path(path).expanduser()
        try:
            raw = settings_path.read_text(encoding=SETTINGS_FILE_ENCODING)
            data = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Failed to load settings from {settings_path}: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Settings in {settings_path} must be a mapping, got {type(data).__name__}"
            )

        try:
            settings = CalculatorSettings.model_validate(data)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

        logger.debug("Loaded settings from %s", settings_path)
        return settings

    @staticmethod
    def apply(settings: CalculatorSettings, calculator: ResourceCalculator) -> ResourceCalculator:
        """Return ``calculator`` configured with ``settings``.

        Calculators other than ResourceCalculatorFuncs are returned unchanged.
        """
        if not isinstance(calculator, ResourceCalculatorFuncs):
            return calculator
        return dataclasses.replace(calculator, role_consistency=settings.role_consistency)

    @classmethod
    def apply_to_registry(cls, settings: CalculatorSettings, registry: CalculatorRegistry) -> None:
        """Re-register every calculator in ``registry`` with ``settings`` applied."""
        for gvk in registry.kinds():
            registry.register(gvk, cls.apply(settings, registry.lookup(gvk)))
