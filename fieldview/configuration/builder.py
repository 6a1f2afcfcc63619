"""
Fluent builder and YAML loading for TemplateConfiguration.

Usage:
    config = (
        TemplateConfigurationBuilder()
        .with_status_mapping({"on_hold": "warning"})
        .with_currency_defaults(currency_code="EUR", compact=True)
        .with_smart_detection(auto_apply_threshold=0.9)
        .build()
    )
    configure_templates(config)
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from ..enums import Variant
from .schemas import TemplateConfiguration

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FIELDVIEW_CONFIG"

SECTIONS = ("badge", "currency", "stack", "smart_detection")


class ConfigurationError(ValueError):
    """Raised when a configuration source cannot be turned into a TemplateConfiguration."""


class TemplateConfigurationBuilder:
    """Accumulates section overrides, then validates them once in build()."""

    def __init__(self, base: Optional[TemplateConfiguration] = None):
        base = base or TemplateConfiguration()
        self._sections: dict[str, dict[str, Any]] = {
            name: getattr(base, name).model_dump() for name in SECTIONS
        }

    def _update(self, section: str, overrides: dict[str, Any]) -> "TemplateConfigurationBuilder":
        self._sections[section].update(overrides)
        return self

    def with_badge_defaults(self, **overrides: Any) -> "TemplateConfigurationBuilder":
        return self._update("badge", overrides)

    def with_status_mapping(
        self,
        mapping: dict[str, Union[Variant, str]],
        replace: bool = False,
    ) -> "TemplateConfigurationBuilder":
        """Merge (or replace) status text -> variant entries. Keys are matched lower-cased."""
        current = {} if replace else dict(self._sections["badge"]["status_mapping"])
        current.update({str(k).lower(): v for k, v in mapping.items()})
        return self._update("badge", {"status_mapping": current})

    def with_currency_defaults(self, **overrides: Any) -> "TemplateConfigurationBuilder":
        return self._update("currency", overrides)

    def with_stack_defaults(self, **overrides: Any) -> "TemplateConfigurationBuilder":
        return self._update("stack", overrides)

    def with_smart_detection(self, **overrides: Any) -> "TemplateConfigurationBuilder":
        return self._update("smart_detection", overrides)

    def build(self) -> TemplateConfiguration:
        return TemplateConfiguration.model_validate(self._sections)


def configuration_from_dict(data: Optional[dict[str, Any]]) -> TemplateConfiguration:
    """Build a configuration from a plain mapping of section overrides."""
    if data is None:
        return TemplateConfiguration()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    unknown = set(data) - set(SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {sorted(unknown)}")

    builder = TemplateConfigurationBuilder()
    for section in SECTIONS:
        overrides = data.get(section) or {}
        if not isinstance(overrides, dict):
            raise ConfigurationError(f"Section '{section}' must be a mapping")
        builder._update(section, overrides)

    try:
        return builder.build()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid template configuration: {e}") from e


def load_configuration(path: Union[str, Path]) -> TemplateConfiguration:
    """Load configuration from a YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Template configuration not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    config = configuration_from_dict(data)
    logger.info(f"Loaded template configuration from {path}")
    return config


def configuration_from_env() -> TemplateConfiguration:
    """Load from the file named by FIELDVIEW_CONFIG, or fall back to defaults."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return TemplateConfiguration()
    return load_configuration(path)
