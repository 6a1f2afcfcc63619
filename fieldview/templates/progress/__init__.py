"""Progress template: linear, circular, ring, stepped and multi-segment indicators."""

from .schemas import (
    ProgressContext,
    ProgressSegment,
    ProgressStep,
    ProgressType,
    StepStatus,
    compute_percentage,
    get_dimensions,
)
from .template import ProgressTemplate
from .renderer import CircleGeometry, circle_geometry, render_progress

__all__ = [
    "ProgressContext",
    "ProgressSegment",
    "ProgressStep",
    "ProgressType",
    "StepStatus",
    "compute_percentage",
    "get_dimensions",
    "ProgressTemplate",
    "CircleGeometry",
    "circle_geometry",
    "render_progress",
]
