"""
Process-wide template configuration.

The host installs one configuration at start-up; every template factory reads
it for fields the caller leaves unset unless an explicit configuration is
passed in.
"""

import logging
from typing import Optional

from .schemas import TemplateConfiguration

logger = logging.getLogger(__name__)


# Global configuration instance
_configuration: Optional[TemplateConfiguration] = None


def configure_templates(config: TemplateConfiguration) -> TemplateConfiguration:
    """Install the global configuration."""
    global _configuration
    if _configuration is not None and _configuration != config:
        logger.warning("Template configuration replaced after it was installed")
    _configuration = config
    return _configuration


def get_template_configuration() -> TemplateConfiguration:
    """Get the global configuration, installing defaults on first use."""
    global _configuration
    if _configuration is None:
        _configuration = TemplateConfiguration()
    return _configuration


def resolve_configuration(config: Optional[TemplateConfiguration] = None) -> TemplateConfiguration:
    """Explicit configuration wins over the installed one."""
    return config if config is not None else get_template_configuration()


def reset_template_configuration() -> None:
    """Drop the installed configuration (used by tests)."""
    global _configuration
    _configuration = None
