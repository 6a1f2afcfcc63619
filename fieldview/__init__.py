"""fieldview - field template detection and rendering.

Picks a presentation template (badge, currency, stack, avatar, progress,
rating) for an arbitrary data field and renders items through it into an
abstract node tree the host UI materializes.
"""

__version__ = "0.1.0"

from .configuration import (
    TemplateConfiguration,
    TemplateConfigurationBuilder,
    configure_templates,
    get_template_configuration,
)
from .detection import FieldDescriptor, TemplateKind, TemplateSuggestion, classify, create_suggestion
from .nodes import Node
from .templates import auto_template, create_definition

__all__ = [
    "TemplateConfiguration",
    "TemplateConfigurationBuilder",
    "configure_templates",
    "get_template_configuration",
    "FieldDescriptor",
    "TemplateKind",
    "TemplateSuggestion",
    "classify",
    "create_suggestion",
    "Node",
    "auto_template",
    "create_definition",
]
