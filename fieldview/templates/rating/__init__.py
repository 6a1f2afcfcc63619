"""Rating template: icon rows, thumbs, numeric, bar and emoji ratings."""

from .schemas import (
    DEFAULT_TOOLTIPS,
    EMOJI_MAPPING,
    RatingContext,
    RatingIcons,
    RatingInteractionState,
    RatingType,
    color_by_value,
    default_emoji,
    icons_for_type,
)
from .template import RatingTemplate
from .renderer import render_rating

__all__ = [
    "DEFAULT_TOOLTIPS",
    "EMOJI_MAPPING",
    "RatingContext",
    "RatingIcons",
    "RatingInteractionState",
    "RatingType",
    "color_by_value",
    "default_emoji",
    "icons_for_type",
    "RatingTemplate",
    "render_rating",
]
