"""
Avatar schemas: shape/status enums and the render context.
"""

from enum import Enum
from typing import Any, Callable, Optional

from ...enums import Variant
from ..schemas import RenderContext


class AvatarShape(str, Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    ROUNDED = "rounded"


class AvatarStatus(str, Enum):
    """Presence indicator shown next to the avatar."""

    NONE = "none"
    ONLINE = "online"
    AWAY = "away"
    BUSY = "busy"
    OFFLINE = "offline"


class AvatarContext(RenderContext):
    """Resolved avatar values for one item."""

    name: str = ""
    initials: str = "?"
    image_url: Optional[str] = None
    status: AvatarStatus = AvatarStatus.NONE
    badge: Optional[str] = None
    color: Variant = Variant.PRIMARY
    shape: AvatarShape = AvatarShape.CIRCLE
    show_border: bool = False
    clickable: bool = False
    on_click: Optional[Callable[[], Any]] = None
