"""
Progress schemas: display types, segments, steps and the render context.
"""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from ...enums import Size, Variant
from ..schemas import RenderContext


class ProgressType(str, Enum):
    LINEAR = "linear"
    CIRCULAR = "circular"
    RING = "ring"
    STEPS = "steps"
    MULTI_SEGMENT = "multi_segment"


class StepStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ERROR = "error"
    SKIPPED = "skipped"


class ProgressSegment(BaseModel):
    """One slice of a multi-segment bar."""

    value: float = 0.0
    variant: Variant = Variant.PRIMARY
    label: Optional[str] = None
    tooltip: Optional[str] = None


class ProgressStep(BaseModel):
    """One step of a stepped progress indicator."""

    title: str = ""
    description: Optional[str] = None
    status: StepStatus = StepStatus.PENDING
    icon: Optional[str] = None


DEFAULT_THRESHOLDS: dict[float, Variant] = {
    0: Variant.ERROR,
    25: Variant.WARNING,
    50: Variant.INFO,
    75: Variant.PRIMARY,
    100: Variant.SUCCESS,
}

# Bar height in px for linear bars
LINEAR_HEIGHTS: dict[Size, int] = {
    Size.EXTRA_SMALL: 4,
    Size.SMALL: 8,
    Size.MEDIUM: 16,
    Size.LARGE: 24,
    Size.EXTRA_LARGE: 32,
}

# (diameter, stroke width) in px for circular and ring indicators
CIRCLE_DIMENSIONS: dict[Size, tuple[int, int]] = {
    Size.EXTRA_SMALL: (32, 3),
    Size.SMALL: (48, 4),
    Size.MEDIUM: (64, 5),
    Size.LARGE: (96, 6),
    Size.EXTRA_LARGE: (128, 8),
}


def get_dimensions(size: Size, progress_type: ProgressType) -> tuple[int, int, int]:
    """(height, diameter, stroke) defaults for a size and display type."""
    if progress_type == ProgressType.LINEAR:
        return LINEAR_HEIGHTS[size], 0, 0
    if progress_type in (ProgressType.CIRCULAR, ProgressType.RING):
        diameter, stroke = CIRCLE_DIMENSIONS[size]
        return 0, diameter, stroke
    return 16, 64, 5


def compute_percentage(value: float, maximum: float) -> float:
    """value / max as a percentage, clamped to [0, 100]."""
    if maximum == 0:
        return 0.0 if value <= 0 else 100.0
    ratio = value / maximum * 100
    if math.isnan(ratio):
        return 0.0
    return max(0.0, min(100.0, ratio))


class ProgressContext(RenderContext):
    """Resolved progress values for one item."""

    value: float = 0.0
    max: float = 100.0
    type: ProgressType = ProgressType.LINEAR
    variant: Variant = Variant.PRIMARY
    show_percentage: bool = True
    show_value: bool = False
    label: Optional[str] = None
    striped: bool = False
    animated: bool = False
    indeterminate: bool = False
    segments: list[ProgressSegment] = Field(default_factory=list)
    steps: list[ProgressStep] = Field(default_factory=list)
    current_step: int = 0
    height: int = 0
    diameter: int = 0
    stroke_width: int = 0

    @property
    def percentage(self) -> float:
        return compute_percentage(self.value, self.max)
