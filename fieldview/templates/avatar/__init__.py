"""Avatar template: images, initials and presence indicators."""

from .schemas import AvatarContext, AvatarShape, AvatarStatus
from .template import AvatarTemplate, consistent_color, generate_initials
from .renderer import render_avatar, render_avatar_group

__all__ = [
    "AvatarContext",
    "AvatarShape",
    "AvatarStatus",
    "AvatarTemplate",
    "consistent_color",
    "generate_initials",
    "render_avatar",
    "render_avatar_group",
]
