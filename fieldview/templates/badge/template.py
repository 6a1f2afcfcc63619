"""
Badge template definition.

Text comes from the text accessor, else the stringified value. The variant
comes from the variant accessor, else the status mapping keyed by the
lower-cased text, else the definition's static variant.
"""

from functools import partial
from typing import Any, Callable, ClassVar, Optional

from pydantic import Field

from ...configuration import TemplateConfiguration
from ...detection.schemas import TemplateKind
from ...enums import Density, Size, Variant
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, coerce_variant, text_of
from .renderer import render_badge
from .schemas import BadgeContext


class BadgeTemplate(BaseTemplate):
    """Status/category badge."""

    kind: ClassVar[TemplateKind] = TemplateKind.BADGE

    value: Optional[Accessor] = None
    text: Optional[Accessor] = None
    icon: Optional[Accessor] = None
    variant_selector: Optional[Accessor] = None

    variant: Optional[Variant] = None
    size: Optional[Size] = None
    density: Optional[Density] = None
    clickable: Optional[bool] = None
    on_click: Optional[Callable[[Any], Any]] = None
    status_mapping: Optional[dict[str, Variant]] = Field(
        default=None, description="Lower-cased text -> variant"
    )

    @classmethod
    def configuration_defaults(cls, config: TemplateConfiguration) -> dict[str, Any]:
        badge = config.badge
        return {
            "variant": badge.default_variant,
            "size": badge.default_size,
            "density": badge.default_density,
            "clickable": badge.default_clickable,
            "status_mapping": dict(badge.status_mapping),
        }

    def resolve_variant(self, text: str) -> Variant:
        key = text.lower()
        if key and self.status_mapping and key in self.status_mapping:
            return self.status_mapping[key]
        return self.variant

    def build_context(self, item: Any) -> BadgeContext:
        if self.text is not None:
            text = text_of(self.text(item))
        else:
            text = text_of(call(self.value, item))

        if self.variant_selector is not None:
            variant = coerce_variant(self.variant_selector(item), self.variant)
        else:
            variant = self.resolve_variant(text)

        return BadgeContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            text=text,
            variant=variant,
            icon=call(self.icon, item) or None,
            clickable=self.clickable,
            on_click=partial(self.on_click, item) if self.on_click else None,
        )

    def render_context(self, context: BadgeContext) -> Node:
        return render_badge(context)
