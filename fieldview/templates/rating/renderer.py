"""
Rating renderer.

Stars, hearts and custom render an icon row; thumbs, numeric, bar and emoji
have their own layouts. Every mode is followed by the optional value / count /
label block.
"""

import math
from typing import Any, Callable, Optional

from ...enums import Size
from ...nodes import EventHandler, Node, classes, element
from ..schemas import format_number
from .schemas import RatingContext, RatingIcons, RatingType, default_emoji

TEXT_SIZES = {
    Size.EXTRA_SMALL: "text-xs",
    Size.SMALL: "text-sm",
    Size.MEDIUM: "text-base",
    Size.LARGE: "text-lg",
    Size.EXTRA_LARGE: "text-xl",
}


def _events(context: RatingContext, rating: float, hover: Optional[int] = None) -> dict[str, EventHandler]:
    """Click selects ``rating``; mouseover/mouseout set and clear hover when ``hover`` is given."""
    if not context.interactive:
        return {}
    events: dict[str, EventHandler] = {}
    if context.on_select is not None:
        on_select = context.on_select
        events["click"] = lambda: on_select(rating)
    if hover is not None and context.on_hover is not None:
        on_hover = context.on_hover
        events["mouseover"] = lambda: on_hover(hover)
        events["mouseout"] = lambda: on_hover(None)
    return events


def _control(
    context: RatingContext,
    css: str,
    data_rating: Any,
    icon: str,
    events: dict[str, EventHandler],
    title: Optional[str] = None,
) -> Node:
    tag = "button" if context.interactive else "span"
    return element(
        tag,
        {
            "class": css,
            "data-rating": data_rating,
            "type": "button" if context.interactive else None,
            "title": title,
        },
        element("i", {"class": "icon"}, icon),
        events=events,
    )


def _hovered(context: RatingContext, position: int) -> bool:
    return context.interactive and context.hover_value is not None and position <= context.hover_value


def render_icon_row(context: RatingContext) -> Node:
    whole = math.floor(context.value)
    icons = []
    for position in range(1, context.max_rating + 1):
        filled = position <= whole or _hovered(context, position)
        half = context.allow_half and not filled and context.value - (position - 1) >= 0.5

        if position in context.custom_icons:
            icon = context.custom_icons[position]
        elif half:
            icon = context.half_icon
        else:
            icon = context.filled_icon if filled else context.empty_icon

        css = classes(
            "rating-icon",
            TEXT_SIZES[context.size],
            f"text-{context.color.value}" if filled or half else "text-muted opacity-25",
            "rating-icon-interactive" if context.interactive else None,
        )
        icons.append(
            _control(
                context,
                css,
                position,
                icon,
                _events(context, position, hover=position),
                title=context.tooltips.get(position),
            )
        )
    return element("div", {"class": "rating-icons"}, *icons)


def render_thumbs(context: RatingContext) -> Node:
    positive = context.value > 0
    negative = context.value < 0

    def thumb_class(up: bool, active: bool) -> str:
        if active:
            color = "text-success" if up else "text-error"
        else:
            color = "text-muted opacity-50"
        return classes(
            "rating-thumb",
            TEXT_SIZES[context.size],
            color,
            "rating-thumb-interactive" if context.interactive else None,
        )

    return element(
        "div",
        {"class": "rating-thumbs"},
        _control(
            context,
            thumb_class(True, positive),
            "up",
            RatingIcons.THUMB_UP if positive else RatingIcons.THUMB_UP_OUTLINE,
            _events(context, 1),
        ),
        _control(
            context,
            thumb_class(False, negative),
            "down",
            RatingIcons.THUMB_DOWN if negative else RatingIcons.THUMB_DOWN_OUTLINE,
            _events(context, 0),
        ),
    )


def render_numeric(context: RatingContext) -> Node:
    shown = format_number(context.value, 1 if context.show_value else 0)
    return element(
        "div",
        {"class": "rating-numeric"},
        element("span", {"class": f"rating-numeric-value text-{context.color.value}"}, shown),
        element("span", {"class": "rating-numeric-separator text-muted"}, " / "),
        element("span", {"class": "rating-numeric-max text-muted"}, str(context.max_rating)),
    )


def render_bar(context: RatingContext) -> Node:
    percentage = max(0.0, min(100.0, context.value / context.max_rating * 100))
    overlay = None
    if context.show_value:
        overlay = element(
            "span",
            {"class": "rating-bar-value"},
            f"{format_number(context.value, 1)}/{context.max_rating}",
        )
    return element(
        "div",
        {"class": "rating-bar-wrapper"},
        element(
            "div",
            {"class": "rating-bar"},
            element(
                "div",
                {
                    "class": f"rating-bar-fill bg-{context.color.value}",
                    "style": f"width: {format_number(percentage)}%;",
                },
            ),
        ),
        overlay,
    )


def render_emoji(context: RatingContext) -> Node:
    selected_position = round(context.value)
    faces = []
    for position in range(1, context.max_rating + 1):
        selected = selected_position == position
        hovered = context.interactive and context.hover_value == position
        icon = context.custom_icons.get(position) or default_emoji(position, context.max_rating)
        css = classes(
            "rating-emoji-icon",
            TEXT_SIZES[context.size],
            "text-primary" if selected or hovered else "text-muted opacity-25",
            "rating-emoji-interactive" if context.interactive else None,
        )
        faces.append(
            _control(
                context,
                css,
                position,
                icon,
                _events(context, position, hover=position),
                title=context.tooltips.get(position),
            )
        )
    return element("div", {"class": "rating-emoji"}, *faces)


def render_additional_info(context: RatingContext) -> Optional[Node]:
    if not context.show_value and not context.show_count and not context.label:
        return None

    value = None
    if context.show_value:
        value = element("span", {"class": "rating-value text-muted"}, format_number(context.value, 1))
    count = None
    if context.show_count and context.count > 0:
        count = element("span", {"class": "rating-count text-muted ms-1"}, f"({context.count})")
    label = None
    if context.label:
        label = element("span", {"class": "rating-label text-muted ms-1"}, context.label)

    return element("div", {"class": "rating-info ms-2"}, value, count, label)


_RENDERERS: dict[RatingType, Callable[[RatingContext], Node]] = {
    RatingType.STARS: render_icon_row,
    RatingType.HEARTS: render_icon_row,
    RatingType.CUSTOM: render_icon_row,
    RatingType.THUMBS: render_thumbs,
    RatingType.NUMERIC: render_numeric,
    RatingType.BAR: render_bar,
    RatingType.EMOJI: render_emoji,
}


def render_rating(context: RatingContext) -> Node:
    return element(
        "div",
        {
            "class": classes("rating-container d-flex align-center gap-1", context.css_class),
            "data-template": "rating",
            "data-type": context.type.value,
            "disabled": True if context.disabled else None,
        },
        _RENDERERS[context.type](context),
        render_additional_info(context),
    )
