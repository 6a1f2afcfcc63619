"""
Stack renderer.
"""

from ...enums import Orientation
from ...nodes import Node, classes, element
from .schemas import StackContext

CONTAINER_CLASSES = {
    Orientation.VERTICAL: "d-flex flex-col",
    Orientation.HORIZONTAL: "d-flex align-center gap-2",
}

LINE_CLASSES = {
    "primary": "stack-primary font-medium",
    "secondary": "stack-secondary text-sm text-muted",
    "tertiary": "stack-tertiary text-xs text-muted",
}


def render_stack(context: StackContext) -> Node:
    icon = None
    if context.icon:
        icon = element("i", {"class": "icon mr-2", "data-icon": context.icon}, context.icon)

    lines = []
    for level, text in (
        ("primary", context.primary_text),
        ("secondary", context.secondary_text),
        ("tertiary", context.tertiary_text),
    ):
        if text:
            lines.append(element("div", {"class": LINE_CLASSES[level], "data-level": level}, text))

    return element(
        "div",
        {
            "class": classes(CONTAINER_CLASSES[context.orientation], context.css_class),
            "data-template": "stack",
            "data-orientation": context.orientation.value,
            "disabled": True if context.disabled else None,
            "data-selected": "true" if context.selected else None,
        },
        icon,
        element("div", {"class": "stack-content"}, *lines),
    )
