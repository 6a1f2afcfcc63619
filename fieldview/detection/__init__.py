"""
Field classification and template suggestions.
"""

from .schemas import (
    Classification,
    FieldDescriptor,
    MatchSource,
    TemplateKind,
    TemplateSuggestion,
)
from .patterns import NAME_PATTERNS, is_currency_field
from .detector import calculate_confidence, classify
from .suggestions import create_suggestion, suggest_templates

__all__ = [
    "Classification",
    "FieldDescriptor",
    "MatchSource",
    "TemplateKind",
    "TemplateSuggestion",
    "NAME_PATTERNS",
    "is_currency_field",
    "calculate_confidence",
    "classify",
    "create_suggestion",
    "suggest_templates",
]
