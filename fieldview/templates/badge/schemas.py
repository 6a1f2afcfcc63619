"""
Badge render context.
"""

from typing import Any, Callable, Optional

from ...enums import Density, Size, Variant
from ..schemas import RenderContext


class BadgeContext(RenderContext):
    """Resolved badge values for one item."""

    size: Size = Size.SMALL
    density: Density = Density.COMPACT
    text: str = ""
    variant: Variant = Variant.DEFAULT
    icon: Optional[str] = None
    clickable: bool = False
    on_click: Optional[Callable[[], Any]] = None
