"""
Stack template definition.

Every text line is truncated to ``max_length - 3`` characters plus "..."
when truncation is on and the text is longer than ``max_length``.
"""

from typing import Any, ClassVar, Optional

from pydantic import field_validator

from ...configuration import TemplateConfiguration
from ...configuration.schemas import MIN_STACK_LENGTH
from ...detection.schemas import TemplateKind
from ...enums import Density, Orientation, Size
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, text_of
from .renderer import render_stack
from .schemas import StackContext

ELLIPSIS = "..."


def truncate_text(text: Optional[str], enabled: bool, max_length: int) -> Optional[str]:
    if text is None or not enabled or len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


class StackTemplate(BaseTemplate):
    """Multi-line text: a primary line with optional secondary/tertiary lines."""

    kind: ClassVar[TemplateKind] = TemplateKind.STACK

    primary: Optional[Accessor] = None
    secondary: Optional[Accessor] = None
    tertiary: Optional[Accessor] = None
    icon: Optional[Accessor] = None

    orientation: Optional[Orientation] = None
    truncate_text: Optional[bool] = None
    max_length: Optional[int] = None
    size: Optional[Size] = None
    density: Optional[Density] = None

    @classmethod
    def configuration_defaults(cls, config: TemplateConfiguration) -> dict[str, Any]:
        stack = config.stack
        return {
            "orientation": stack.orientation,
            "truncate_text": stack.truncate_text,
            "max_length": stack.max_length,
            "size": stack.size,
            "density": stack.density,
        }

    @field_validator("max_length", mode="after")
    @classmethod
    def _floor_max_length(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        return max(MIN_STACK_LENGTH, value)

    def _line(self, accessor: Optional[Accessor], item: Any) -> Optional[str]:
        if accessor is None:
            return None
        value = accessor(item)
        if value is None:
            return None
        return truncate_text(text_of(value), self.truncate_text, self.max_length)

    def build_context(self, item: Any) -> StackContext:
        return StackContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            primary_text=self._line(self.primary, item) or "",
            secondary_text=self._line(self.secondary, item),
            tertiary_text=self._line(self.tertiary, item),
            icon=call(self.icon, item) or None,
            orientation=self.orientation,
        )

    def render_context(self, context: StackContext) -> Node:
        return render_stack(context)
