"""
Stack render context.
"""

from typing import Optional

from ...enums import Orientation
from ..schemas import RenderContext


class StackContext(RenderContext):
    """Resolved primary/secondary/tertiary lines for one item."""

    primary_text: str = ""
    secondary_text: Optional[str] = None
    tertiary_text: Optional[str] = None
    icon: Optional[str] = None
    orientation: Orientation = Orientation.VERTICAL
