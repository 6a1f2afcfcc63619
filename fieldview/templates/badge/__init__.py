"""Badge template: status/category values with variant color mapping."""

from .schemas import BadgeContext
from .template import BadgeTemplate
from .renderer import render_badge

__all__ = ["BadgeContext", "BadgeTemplate", "render_badge"]
