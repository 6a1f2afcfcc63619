"""
Rating template definition.

The color is derived from the value when the static color is left at its
default (warning) and the type is not stars. The emoji type always uses the
five-level emoji map as its custom icons.
"""

from typing import Any, Callable, ClassVar, Hashable, Optional

from pydantic import Field

from ...detection.schemas import TemplateKind
from ...enums import Variant
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, text_of, to_float
from .renderer import render_rating
from .schemas import (
    DEFAULT_TOOLTIPS,
    EMOJI_MAPPING,
    RatingContext,
    RatingInteractionState,
    RatingType,
    color_by_value,
    icons_for_type,
)

DEFAULT_COLOR = Variant.WARNING


class RatingTemplate(BaseTemplate):
    """Stars, hearts, thumbs, numeric, bar, emoji or custom-icon rating."""

    kind: ClassVar[TemplateKind] = TemplateKind.RATING

    value: Optional[Accessor] = None
    count: Optional[Accessor] = None
    label: Optional[Accessor] = None
    item_key: Optional[Accessor] = Field(
        default=None, description="Stable row identity; required to render with hover state"
    )

    type: RatingType = RatingType.STARS
    max_rating: int = Field(default=5, ge=1)
    color_variant: Variant = DEFAULT_COLOR
    allow_half: bool = False
    interactive: bool = False
    show_value: bool = False
    show_count: bool = False
    on_value_changed: Optional[Callable[[Any, float], Any]] = None
    filled_icon: Optional[str] = None
    empty_icon: Optional[str] = None
    half_icon: Optional[str] = None
    tooltips: dict[int, str] = Field(default_factory=lambda: dict(DEFAULT_TOOLTIPS))
    custom_icons: dict[int, str] = Field(default_factory=dict)
    emoji_mapping: dict[int, str] = Field(default_factory=lambda: dict(EMOJI_MAPPING))

    def resolve_color(self, value: float) -> Variant:
        if self.color_variant == DEFAULT_COLOR and self.type != RatingType.STARS:
            return color_by_value(value, self.max_rating)
        return self.color_variant

    def key_for(self, item: Any) -> Hashable:
        # Object identity is not stable across rebuilt rows
        if self.item_key is None:
            raise ValueError("Rendering with hover state needs an item_key accessor")
        return self.item_key(item)

    def build_context(
        self,
        item: Any,
        hover_value: Optional[int] = None,
        on_hover: Optional[Callable[[Optional[int]], Any]] = None,
    ) -> RatingContext:
        value = to_float(call(self.value, item))
        filled, empty, half = icons_for_type(self.type)

        on_select = None
        if self.interactive and self.on_value_changed is not None:
            callback = self.on_value_changed

            def on_select(rating: float) -> Any:
                return callback(item, rating)

        custom_icons = self.custom_icons
        if self.type == RatingType.EMOJI:
            custom_icons = self.emoji_mapping

        return RatingContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            value=value,
            max_rating=self.max_rating,
            count=int(to_float(call(self.count, item))),
            label=text_of(call(self.label, item)) or None,
            type=self.type,
            color=self.resolve_color(value),
            allow_half=self.allow_half,
            interactive=self.interactive,
            show_value=self.show_value,
            show_count=self.show_count,
            filled_icon=self.filled_icon or filled,
            empty_icon=self.empty_icon or empty,
            half_icon=self.half_icon or half,
            tooltips=dict(self.tooltips),
            custom_icons=dict(custom_icons),
            hover_value=hover_value if self.interactive else None,
            on_select=on_select,
            on_hover=on_hover if self.interactive else None,
        )

    def render_context(self, context: RatingContext) -> Node:
        return render_rating(context)

    def render(
        self,
        item: Any,
        hover_value: Optional[int] = None,
        state: Optional[RatingInteractionState] = None,
    ) -> Optional[Node]:
        """Render one item.

        Args:
            item: The row to render
            hover_value: Explicit transient hover position
            state: Host-owned hover store; when given, the hover value is read
                from it and mouse events write back to it

        Raises:
            ValueError: state is given but the definition has no item_key
        """
        if item is None:
            return None

        on_hover = None
        if state is not None:
            key = self.key_for(item)
            template_id = self.id
            if hover_value is None:
                hover_value = state.hover_value(key, template_id)

            def on_hover(position: Optional[int]) -> None:
                if position is None:
                    state.clear_hover(key, template_id)
                else:
                    state.set_hover(key, template_id, position)

        return self.render_context(self.build_context(item, hover_value, on_hover))
