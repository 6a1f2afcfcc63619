"""
Avatar template definition.

Initials are derived from the name unless an initials accessor is given.
Color precedence: color accessor, then the color mapping (a miss hashes the
name), then the static color, then a hash of the name.
"""

import zlib
from functools import partial
from typing import Any, Callable, ClassVar, Iterable, Optional

from pydantic import Field

from ...detection.schemas import TemplateKind
from ...enums import Variant
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, coerce_variant, text_of
from .renderer import render_avatar, render_avatar_group
from .schemas import AvatarContext, AvatarShape, AvatarStatus

CONSISTENT_COLORS = [
    Variant.PRIMARY,
    Variant.SECONDARY,
    Variant.SUCCESS,
    Variant.INFO,
    Variant.WARNING,
    Variant.ERROR,
]


def generate_initials(name: Optional[str]) -> str:
    """'' -> '?', 'Ada' -> 'AD', 'Ada Lovelace' -> 'AL'."""
    parts = (name or "").split()
    if not parts:
        return "?"
    if len(parts) == 1:
        return parts[0][:2].upper()
    return f"{parts[0][0]}{parts[-1][0]}".upper()


def consistent_color(name: Optional[str]) -> Variant:
    """Stable color for a name, identical across processes."""
    if not name or not name.strip():
        return Variant.PRIMARY
    index = zlib.crc32(name.encode("utf-8")) % len(CONSISTENT_COLORS)
    return CONSISTENT_COLORS[index]


def _coerce_status(value: Any) -> AvatarStatus:
    if isinstance(value, AvatarStatus):
        return value
    try:
        return AvatarStatus(text_of(value).strip().lower() or "none")
    except ValueError:
        return AvatarStatus.NONE


class AvatarTemplate(BaseTemplate):
    """User/profile avatar with image, initials or a default icon."""

    kind: ClassVar[TemplateKind] = TemplateKind.AVATAR

    value: Optional[Accessor] = None
    display_name: Optional[Accessor] = None
    initials: Optional[Accessor] = None
    image: Optional[Accessor] = None
    status: Optional[Accessor] = None
    badge: Optional[Accessor] = None
    color: Optional[Accessor] = None

    color_variant: Optional[Variant] = Field(
        default=None, description="Static color; unset means derived from the name"
    )
    color_mapping: dict[str, Variant] = Field(
        default_factory=dict, description="Lower-cased name -> color"
    )
    shape: AvatarShape = AvatarShape.CIRCLE
    show_border: bool = False
    clickable: bool = False
    on_click: Optional[Callable[[Any], Any]] = None

    def resolve_name(self, item: Any) -> str:
        if self.display_name is not None:
            return text_of(self.display_name(item))
        return text_of(call(self.value, item))

    def resolve_color(self, item: Any, name: str) -> Variant:
        if self.color_mapping and name:
            fallback = self.color_mapping.get(name.lower(), consistent_color(name))
        else:
            fallback = self.color_variant or consistent_color(name)
        if self.color is not None:
            return coerce_variant(self.color(item), fallback)
        return fallback

    def build_context(self, item: Any) -> AvatarContext:
        name = self.resolve_name(item)
        if self.initials is not None:
            initials = text_of(self.initials(item)) or generate_initials(name)
        else:
            initials = generate_initials(name)

        return AvatarContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            name=name,
            initials=initials,
            image_url=call(self.image, item) or None,
            status=_coerce_status(call(self.status, item)),
            badge=text_of(call(self.badge, item)) or None,
            color=self.resolve_color(item, name),
            shape=self.shape,
            show_border=self.show_border,
            clickable=self.clickable,
            on_click=partial(self.on_click, item) if self.on_click else None,
        )

    def render_context(self, context: AvatarContext) -> Node:
        return render_avatar(context)

    def render_group(
        self,
        items: Iterable[Any],
        max_display: int = 5,
        show_overflow: bool = True,
    ) -> Optional[Node]:
        """Render stacked avatars for several items plus a '+N' overflow marker."""
        items = [item for item in items if item is not None]
        if not items:
            return None
        contexts = [self.build_context(item) for item in items[:max_display]]
        overflow = len(items) - max_display if show_overflow else 0
        return render_avatar_group(contexts, self.size, overflow)
