"""
Progress template definition.

The variant follows the threshold table (largest key not above the
percentage) unless a variant accessor is given. Non-empty segments switch the
type to multi-segment and non-empty steps switch it to steps; steps are
applied last and win.
"""

import logging
import math
from typing import Any, ClassVar, Optional

from pydantic import Field

from ...detection.schemas import TemplateKind
from ...enums import Variant
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, coerce_variant, text_of, to_float
from .renderer import render_progress
from .schemas import (
    DEFAULT_THRESHOLDS,
    ProgressContext,
    ProgressSegment,
    ProgressStep,
    ProgressType,
    compute_percentage,
    get_dimensions,
)

logger = logging.getLogger(__name__)


def _parse_value(raw: Any) -> float:
    if raw is None:
        return 0.0
    value = to_float(raw, default=math.nan)
    if math.isnan(value):
        logger.debug(f"Progress value {raw!r} is not a finite number, using 0")
        return 0.0
    return value


def _as_segments(raw: Any) -> list[ProgressSegment]:
    return [ProgressSegment.model_validate(s) for s in raw or []]


def _as_steps(raw: Any) -> list[ProgressStep]:
    return [ProgressStep.model_validate(s) for s in raw or []]


class ProgressTemplate(BaseTemplate):
    """Progress bar, circle, ring, steps or multi-segment bar."""

    kind: ClassVar[TemplateKind] = TemplateKind.PROGRESS

    value: Optional[Accessor] = None
    max_value: Optional[Accessor] = None
    label: Optional[Accessor] = None
    variant_selector: Optional[Accessor] = None
    segments: Optional[Accessor] = None
    steps: Optional[Accessor] = None
    current_step: Optional[Accessor] = None

    type: ProgressType = ProgressType.LINEAR
    variant: Variant = Variant.PRIMARY
    show_percentage: bool = True
    show_value: bool = False
    striped: bool = False
    animated: bool = False
    indeterminate: bool = False
    default_max: float = 100.0
    height: int = 0
    diameter: int = 0
    stroke_width: int = 0
    threshold_mapping: dict[float, Variant] = Field(
        default_factory=lambda: dict(DEFAULT_THRESHOLDS),
        description="Percentage floor -> variant",
    )

    def variant_for_percentage(self, percentage: float) -> Variant:
        applicable = [key for key in self.threshold_mapping if percentage >= key]
        if not applicable:
            return self.variant
        return self.threshold_mapping[max(applicable)]

    def build_context(self, item: Any) -> ProgressContext:
        value = _parse_value(call(self.value, item))

        maximum = self.default_max
        if self.max_value is not None:
            maximum = to_float(self.max_value(item), self.default_max)

        percentage = compute_percentage(value, maximum)
        if self.variant_selector is not None:
            variant = coerce_variant(self.variant_selector(item), self.variant)
        elif self.threshold_mapping:
            variant = self.variant_for_percentage(percentage)
        else:
            variant = self.variant

        progress_type = self.type
        segments: list[ProgressSegment] = []
        if self.segments is not None:
            segments = _as_segments(self.segments(item))
            if segments:
                progress_type = ProgressType.MULTI_SEGMENT

        steps: list[ProgressStep] = []
        if self.steps is not None:
            steps = _as_steps(self.steps(item))
            if steps:
                progress_type = ProgressType.STEPS

        current_step = 0
        if self.current_step is not None:
            current_step = int(to_float(self.current_step(item)))

        # dimensions follow the configured type, not the forced one
        height, diameter, stroke = get_dimensions(self.size, self.type)

        label = call(self.label, item)
        return ProgressContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            value=value,
            max=maximum,
            type=progress_type,
            variant=variant,
            show_percentage=self.show_percentage,
            show_value=self.show_value,
            label=text_of(label) or None,
            striped=self.striped,
            animated=self.animated,
            indeterminate=self.indeterminate,
            segments=segments,
            steps=steps,
            current_step=current_step,
            height=self.height if self.height > 0 else height,
            diameter=self.diameter if self.diameter > 0 else diameter,
            stroke_width=self.stroke_width if self.stroke_width > 0 else stroke,
        )

    def render_context(self, context: ProgressContext) -> Node:
        return render_progress(context)
