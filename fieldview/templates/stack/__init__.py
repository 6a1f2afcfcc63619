"""Stack template: primary/secondary/tertiary text lines."""

from .schemas import StackContext
from .template import StackTemplate, truncate_text
from .renderer import render_stack

__all__ = ["StackContext", "StackTemplate", "truncate_text", "render_stack"]
