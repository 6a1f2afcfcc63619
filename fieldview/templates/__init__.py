"""
Template definitions, context builders and renderers for each template kind.
"""

from .schemas import Accessor, BaseTemplate, RenderContext, field_accessor
from .badge import BadgeTemplate
from .currency import CurrencyTemplate
from .stack import StackTemplate
from .avatar import AvatarShape, AvatarStatus, AvatarTemplate
from .progress import ProgressSegment, ProgressStep, ProgressTemplate, ProgressType, StepStatus
from .rating import RatingInteractionState, RatingTemplate, RatingType
from .registry import (
    AutoTemplate,
    TemplateRegistry,
    auto_template,
    create_definition,
    get_template_registry,
)

__all__ = [
    "Accessor",
    "BaseTemplate",
    "RenderContext",
    "field_accessor",
    "BadgeTemplate",
    "CurrencyTemplate",
    "StackTemplate",
    "AvatarShape",
    "AvatarStatus",
    "AvatarTemplate",
    "ProgressSegment",
    "ProgressStep",
    "ProgressTemplate",
    "ProgressType",
    "StepStatus",
    "RatingInteractionState",
    "RatingTemplate",
    "RatingType",
    "AutoTemplate",
    "TemplateRegistry",
    "auto_template",
    "create_definition",
    "get_template_registry",
]
