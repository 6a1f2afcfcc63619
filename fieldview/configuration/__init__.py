"""
Global template configuration: per-kind defaults and detection thresholds.
"""

from .schemas import (
    BadgeDefaults,
    CurrencyDefaults,
    StackDefaults,
    SmartDetectionSettings,
    TemplateConfiguration,
    DEFAULT_STATUS_MAPPING,
)
from .builder import (
    ConfigurationError,
    TemplateConfigurationBuilder,
    configuration_from_dict,
    configuration_from_env,
    load_configuration,
)
from .registry import (
    configure_templates,
    get_template_configuration,
    reset_template_configuration,
    resolve_configuration,
)

__all__ = [
    "BadgeDefaults",
    "CurrencyDefaults",
    "StackDefaults",
    "SmartDetectionSettings",
    "TemplateConfiguration",
    "DEFAULT_STATUS_MAPPING",
    "ConfigurationError",
    "TemplateConfigurationBuilder",
    "configuration_from_dict",
    "configuration_from_env",
    "load_configuration",
    "configure_templates",
    "get_template_configuration",
    "reset_template_configuration",
    "resolve_configuration",
]
