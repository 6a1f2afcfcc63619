"""
Badge renderer.
"""

from ...enums import SIZE_SUFFIXES
from ...nodes import Node, classes, element
from .schemas import BadgeContext


def render_badge(context: BadgeContext) -> Node:
    icon = None
    if context.icon:
        icon = element("i", {"class": "icon badge-icon"}, context.icon)

    events = {}
    if context.clickable and context.on_click is not None and not context.disabled:
        events["click"] = context.on_click

    return element(
        "span",
        {
            "class": classes(
                "badge",
                f"badge-{context.variant.value}",
                f"badge-{SIZE_SUFFIXES[context.size]}",
                "badge-clickable" if context.clickable else None,
                "badge-selected" if context.selected else None,
                context.css_class,
            ),
            "data-template": "badge",
            "aria-disabled": "true" if context.disabled else None,
            "role": "button" if context.clickable else None,
        },
        icon,
        element("span", {"class": "badge-text"}, context.text),
        events=events,
    )
