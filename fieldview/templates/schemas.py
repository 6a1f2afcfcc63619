"""
Shared template definition machinery.

A template definition is a frozen recipe: accessor functions bound over an
item type plus static style knobs. ``render(item)`` resolves every accessor
once against the item into a fresh context, applies the kind's fallback
rules, and hands the context to the kind's renderer.
"""

import math
import uuid
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..configuration import TemplateConfiguration, resolve_configuration
from ..detection.schemas import TemplateKind
from ..enums import Density, Size, Variant
from ..nodes import Node

Accessor = Callable[[Any], Any]


def field_accessor(path: str) -> Accessor:
    """Build an accessor reading a dotted key/attribute path.

    Works on mappings and plain objects; a missing segment resolves to None.
    """
    keys = [key for key in path.split(".") if key]

    def access(item: Any) -> Any:
        value = item
        for key in keys:
            if value is None:
                return None
            if isinstance(value, Mapping):
                value = value.get(key)
            else:
                value = getattr(value, key, None)
        return value

    access.__name__ = f"field_accessor({path})"
    return access


def call(accessor: Optional[Accessor], item: Any) -> Any:
    """Invoke an optional accessor."""
    return accessor(item) if accessor is not None else None


def text_of(value: Any) -> str:
    return "" if value is None else str(value)


def format_number(value: float, places: int = 2) -> str:
    """Format with at most ``places`` decimals and no trailing zeros ('0.##')."""
    if places <= 0:
        quantum = Decimal(1)
    else:
        quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce an accessor result to a finite float; None or junk gives ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


_VARIANT_ALIASES = {"danger": Variant.ERROR}


def coerce_variant(value: Any, fallback: Variant) -> Variant:
    """Turn an accessor result into a Variant, falling back on anything unknown."""
    if isinstance(value, Variant):
        return value
    key = text_of(value).strip().lower()
    if key in _VARIANT_ALIASES:
        return _VARIANT_ALIASES[key]
    try:
        return Variant(key)
    except ValueError:
        return fallback


class RenderContext(BaseModel):
    """Fields every per-item context carries."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    size: Size = Size.MEDIUM
    density: Density = Density.NORMAL
    css_class: Optional[str] = None
    disabled: bool = False
    selected: bool = False


class BaseTemplate(BaseModel):
    """Base class for all template definitions.

    Unset fields fall back to the configuration passed as ``config=`` or,
    failing that, the globally installed one. Subclasses list those fields in
    ``configuration_defaults``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    kind: ClassVar[TemplateKind] = TemplateKind.NONE

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    template_name: Optional[str] = None
    css_class: Optional[str] = None
    size: Size = Size.MEDIUM
    density: Density = Density.NORMAL

    @classmethod
    def configuration_defaults(cls, config: TemplateConfiguration) -> dict[str, Any]:
        return {}

    @model_validator(mode="before")
    @classmethod
    def _apply_configuration(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        config = resolve_configuration(data.pop("config", None))
        for key, value in cls.configuration_defaults(config).items():
            if data.get(key) is None:
                data[key] = value
        return data

    def build_context(self, item: Any) -> RenderContext:
        raise NotImplementedError

    def render_context(self, context: RenderContext) -> Node:
        raise NotImplementedError

    def render(self, item: Any) -> Optional[Node]:
        """Render one item. Returns None for a missing item."""
        if item is None:
            return None
        return self.render_context(self.build_context(item))
