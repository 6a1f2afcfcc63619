"""
Avatar renderer.
"""

from typing import Optional

from ...enums import SIZE_SUFFIXES, Size
from ...nodes import Node, classes, element
from .schemas import AvatarContext, AvatarStatus

STATUS_COLORS = {
    AvatarStatus.ONLINE: "var(--color-success)",
    AvatarStatus.AWAY: "var(--color-warning)",
    AvatarStatus.BUSY: "var(--color-error)",
    AvatarStatus.OFFLINE: "var(--color-secondary)",
}


def _size_class(size: Size) -> str:
    return f"avatar-{SIZE_SUFFIXES[size]}"


def _content(context: AvatarContext, lazy: bool = True) -> Node:
    if context.image_url:
        return element(
            "img",
            {
                "src": context.image_url,
                "alt": context.name or "Avatar",
                "class": "avatar-image",
                "loading": "lazy" if lazy else None,
            },
        )
    if context.initials:
        return element("span", {"class": "avatar-initials"}, context.initials)
    return element("i", {"class": "icon avatar-icon"}, "person")


def _status_indicator(status: AvatarStatus) -> Optional[Node]:
    if status == AvatarStatus.NONE:
        return None
    return element(
        "span",
        {
            "class": f"avatar-status status-{status.value}",
            "data-status": status.value,
            "style": f"background-color: {STATUS_COLORS[status]};",
            "title": status.value.capitalize(),
        },
    )


def render_avatar(context: AvatarContext) -> Node:
    clickable = context.clickable and context.on_click is not None
    avatar = element(
        "div",
        {
            "class": classes(
                "avatar",
                _size_class(context.size),
                f"avatar-{context.shape.value}",
                f"avatar-{context.color.value}",
                context.css_class,
            ),
            "disabled": True if context.disabled else None,
            "data-selected": "true" if context.selected else None,
            "data-border": "true" if context.show_border else None,
            "data-clickable": "true" if clickable else None,
            "style": "cursor: pointer;" if clickable else None,
        },
        _content(context),
        events={"click": context.on_click} if clickable else None,
    )

    badge = None
    if context.badge:
        badge = element("span", {"class": "avatar-badge"}, context.badge)

    return element(
        "div",
        {"class": "avatar-wrapper", "data-template": "avatar"},
        avatar,
        _status_indicator(context.status),
        badge,
    )


def render_avatar_group(contexts: list[AvatarContext], size: Size, overflow: int = 0) -> Node:
    children = [
        element(
            "div",
            {
                "class": classes(
                    "avatar avatar-circle",
                    _size_class(size),
                    f"avatar-{context.color.value}",
                    "avatar-stacked",
                ),
                "title": context.name,
            },
            _content(context, lazy=False),
        )
        for context in contexts
    ]
    if overflow > 0:
        children.append(
            element(
                "div",
                {"class": f"avatar avatar-circle {_size_class(size)} avatar-secondary avatar-stacked"},
                element("span", {"class": "avatar-initials"}, f"+{overflow}"),
            )
        )
    return element("div", {"class": "avatar-group", "data-template": "avatar-group"}, *children)
