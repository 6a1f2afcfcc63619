"""
Rating schemas: display types, icon sets, hover state and the render context.
"""

from enum import Enum
from typing import Any, Callable, Hashable, Optional

from pydantic import Field

from ...enums import Variant
from ..schemas import RenderContext


class RatingType(str, Enum):
    STARS = "stars"
    HEARTS = "hearts"
    THUMBS = "thumbs"
    NUMERIC = "numeric"
    CUSTOM = "custom"
    BAR = "bar"
    EMOJI = "emoji"


class RatingIcons:
    """Icon names per rating type."""

    STAR_FILLED = "star"
    STAR_EMPTY = "star_outline"
    STAR_HALF = "star_half"

    HEART_FILLED = "favorite"
    HEART_EMPTY = "favorite_border"

    THUMB_UP = "thumb_up"
    THUMB_DOWN = "thumb_down"
    THUMB_UP_OUTLINE = "thumb_up_off_alt"
    THUMB_DOWN_OUTLINE = "thumb_down_off_alt"

    EMOJI_VERY_BAD = "sentiment_very_dissatisfied"
    EMOJI_BAD = "sentiment_dissatisfied"
    EMOJI_NEUTRAL = "sentiment_neutral"
    EMOJI_GOOD = "sentiment_satisfied"
    EMOJI_VERY_GOOD = "sentiment_very_satisfied"


# (filled, empty, half) per icon-row type
ICON_SETS: dict[RatingType, tuple[str, str, str]] = {
    RatingType.STARS: (RatingIcons.STAR_FILLED, RatingIcons.STAR_EMPTY, RatingIcons.STAR_HALF),
    RatingType.HEARTS: (RatingIcons.HEART_FILLED, RatingIcons.HEART_EMPTY, RatingIcons.HEART_FILLED),
    RatingType.THUMBS: (RatingIcons.THUMB_UP, RatingIcons.THUMB_UP_OUTLINE, RatingIcons.THUMB_UP),
}

DEFAULT_TOOLTIPS: dict[int, str] = {
    1: "Poor",
    2: "Fair",
    3: "Good",
    4: "Very Good",
    5: "Excellent",
}

EMOJI_MAPPING: dict[int, str] = {
    1: RatingIcons.EMOJI_VERY_BAD,
    2: RatingIcons.EMOJI_BAD,
    3: RatingIcons.EMOJI_NEUTRAL,
    4: RatingIcons.EMOJI_GOOD,
    5: RatingIcons.EMOJI_VERY_GOOD,
}


def icons_for_type(rating_type: RatingType) -> tuple[str, str, str]:
    return ICON_SETS.get(rating_type, ICON_SETS[RatingType.STARS])


def default_emoji(position: int, max_rating: int) -> str:
    """Emoji for a position, chosen by position / max only."""
    percentage = position / max_rating * 100 if max_rating > 0 else 0
    if percentage <= 20:
        return RatingIcons.EMOJI_VERY_BAD
    if percentage <= 40:
        return RatingIcons.EMOJI_BAD
    if percentage <= 60:
        return RatingIcons.EMOJI_NEUTRAL
    if percentage <= 80:
        return RatingIcons.EMOJI_GOOD
    return RatingIcons.EMOJI_VERY_GOOD


def color_by_value(value: float, max_rating: int) -> Variant:
    percentage = value / max_rating * 100 if max_rating > 0 else 0
    if percentage < 20:
        return Variant.ERROR
    if percentage < 40:
        return Variant.WARNING
    if percentage < 60:
        return Variant.INFO
    if percentage < 80:
        return Variant.PRIMARY
    return Variant.SUCCESS


class RatingInteractionState:
    """Host-owned hover state for interactive ratings.

    Keyed by (item key, template id) so one template can be rendered for many
    rows, concurrently, without rows sharing a hover value.
    """

    def __init__(self):
        self._hover: dict[tuple[Hashable, str], int] = {}

    def hover_value(self, item_key: Hashable, template_id: str) -> Optional[int]:
        return self._hover.get((item_key, template_id))

    def set_hover(self, item_key: Hashable, template_id: str, value: int) -> None:
        self._hover[(item_key, template_id)] = value

    def clear_hover(self, item_key: Hashable, template_id: str) -> None:
        self._hover.pop((item_key, template_id), None)

    def __len__(self) -> int:
        return len(self._hover)


class RatingContext(RenderContext):
    """Resolved rating values for one item and one render pass."""

    value: float = 0.0
    max_rating: int = 5
    count: int = 0
    label: Optional[str] = None
    type: RatingType = RatingType.STARS
    color: Variant = Variant.WARNING
    allow_half: bool = False
    interactive: bool = False
    show_value: bool = False
    show_count: bool = False
    filled_icon: str = RatingIcons.STAR_FILLED
    empty_icon: str = RatingIcons.STAR_EMPTY
    half_icon: str = RatingIcons.STAR_HALF
    tooltips: dict[int, str] = Field(default_factory=dict)
    custom_icons: dict[int, str] = Field(default_factory=dict)
    hover_value: Optional[int] = None
    on_select: Optional[Callable[[float], Any]] = None
    on_hover: Optional[Callable[[Optional[int]], Any]] = None
