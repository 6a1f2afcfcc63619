"""
Progress renderer.

Dispatches on the context's type: linear bar, circular arc, ring, steps, or
multi-segment bar (which falls back to linear when there are no segments).
"""

import math
from typing import Callable, Union

from pydantic import BaseModel

from ...enums import Variant
from ...nodes import Node, classes, element
from ..schemas import format_number
from .schemas import ProgressContext, ProgressType, StepStatus

TRACK_COLOR = "var(--color-gray-300)"
RING_TRACK_COLOR = "var(--color-gray-200)"

# share of the circumference drawn by the indeterminate spinner
SPINNER_ARC = 0.25

# segments narrower than this (in %) hide their label
MIN_LABELLED_SEGMENT = 5


class CircleGeometry(BaseModel):
    """SVG geometry of a circular or ring indicator."""

    center: float
    radius: float
    circumference: float
    dash_offset: float
    stroke_width: float


def circle_geometry(
    diameter: float, stroke_width: float, percentage: float, ring: bool = False
) -> CircleGeometry:
    """Radius is (D - S) / 2 for circles and (D - 2S) / 2 for rings, whose stroke is doubled."""
    if ring:
        radius = (diameter - 2 * stroke_width) / 2
        drawn_stroke = stroke_width * 2
    else:
        radius = (diameter - stroke_width) / 2
        drawn_stroke = stroke_width
    radius = max(radius, 0.0)
    circumference = 2 * math.pi * radius
    return CircleGeometry(
        center=diameter / 2,
        radius=radius,
        circumference=circumference,
        dash_offset=circumference * (1 - percentage / 100),
        stroke_width=drawn_stroke,
    )


def variant_color(variant: Variant) -> str:
    if variant == Variant.DEFAULT:
        return "var(--color-primary)"
    return f"var(--color-{variant.value})"


def _bar_classes(context: ProgressContext) -> str:
    return classes(
        "progress-bar",
        f"bg-{context.variant.value}",
        "progress-bar-striped" if context.striped else None,
        "progress-bar-animated" if context.animated else None,
        "progress-bar-indeterminate" if context.indeterminate else None,
    )


def render_linear(context: ProgressContext) -> list[Node]:
    label = None
    if context.label:
        label = element("div", {"class": "progress-label mb-1"}, context.label)

    text = None
    if (context.show_percentage or context.show_value) and not context.indeterminate:
        if context.show_value:
            text = f"{format_number(context.value)}/{format_number(context.max)}"
        else:
            text = f"{format_number(context.percentage, 1)}%"

    width = "100" if context.indeterminate else format_number(context.percentage)
    bar = element(
        "div",
        {
            "class": _bar_classes(context),
            "style": f"width: {width}%;",
            "role": "progressbar",
            "aria-valuenow": format_number(context.value),
            "aria-valuemin": "0",
            "aria-valuemax": format_number(context.max),
        },
        text,
    )
    track = element(
        "div",
        {
            "class": "progress",
            "style": f"height: {context.height}px;" if context.height > 0 else None,
        },
        bar,
    )
    return [node for node in (label, track) if node is not None]


def _circle(geometry: CircleGeometry, stroke: str, **extra) -> Node:
    attributes = {
        "cx": geometry.center,
        "cy": geometry.center,
        "r": geometry.radius,
        "fill": "none",
        "stroke": stroke,
        "stroke-width": geometry.stroke_width,
    }
    attributes.update(extra)
    return element("circle", attributes)


def _arc(context: ProgressContext, geometry: CircleGeometry) -> Node:
    color = variant_color(context.variant)
    if context.indeterminate:
        spin = geometry.circumference * SPINNER_ARC
        return _circle(
            geometry,
            color,
            **{
                "stroke-dasharray": f"{spin} {geometry.circumference - spin}",
                "stroke-linecap": "round",
                "class": "progress-circular-indeterminate",
                "data-spin": "true",
            },
        )
    return _circle(
        geometry,
        color,
        **{
            "stroke-dasharray": geometry.circumference,
            "stroke-dashoffset": geometry.dash_offset,
            "stroke-linecap": "round",
            "transform": f"rotate(-90 {geometry.center} {geometry.center})",
            "class": "progress-circular-animated" if context.animated else None,
        },
    )


def _svg(context: ProgressContext, geometry: CircleGeometry, track_color: str) -> Node:
    diameter = context.diameter
    return element(
        "svg",
        {"width": diameter, "height": diameter, "viewBox": f"0 0 {diameter} {diameter}"},
        _circle(geometry, track_color),
        _arc(context, geometry),
    )


def render_circular(context: ProgressContext) -> list[Node]:
    geometry = circle_geometry(context.diameter, context.stroke_width, context.percentage)

    center = None
    if not context.indeterminate:
        if context.label:
            center = context.label
        elif context.show_value:
            center = format_number(context.value)
        elif context.show_percentage:
            center = f"{format_number(context.percentage, 0)}%"

    return [
        element(
            "div",
            {
                "class": "progress-circular",
                "style": f"width: {context.diameter}px; height: {context.diameter}px;",
            },
            _svg(context, geometry, TRACK_COLOR),
            element("div", {"class": "progress-circular-text"}, center) if center else None,
        )
    ]


def render_ring(context: ProgressContext) -> list[Node]:
    geometry = circle_geometry(context.diameter, context.stroke_width, context.percentage, ring=True)

    percentage = None
    if context.show_percentage and not context.indeterminate:
        percentage = element(
            "div", {"class": "progress-ring-percentage"}, f"{format_number(context.percentage, 0)}%"
        )
    label = None
    if context.label:
        label = element("div", {"class": "progress-ring-label"}, context.label)

    return [
        element(
            "div",
            {
                "class": "progress-ring",
                "style": f"width: {context.diameter}px; height: {context.diameter}px;",
            },
            _svg(context, geometry, RING_TRACK_COLOR),
            element("div", {"class": "progress-ring-content"}, percentage, label),
        )
    ]


def render_steps(context: ProgressContext) -> list[Node]:
    if not context.steps:
        return []

    items = []
    last = len(context.steps) - 1
    for index, step in enumerate(context.steps):
        active = index == context.current_step
        completed = index < context.current_step or step.status == StepStatus.COMPLETED
        error = step.status == StepStatus.ERROR

        if step.icon:
            indicator: Union[Node, str] = element("i", {"class": "icon"}, step.icon)
        elif completed:
            indicator = element("i", {"class": "icon"}, "check")
        elif error:
            indicator = element("i", {"class": "icon"}, "close")
        else:
            indicator = str(index + 1)

        description = None
        if step.description:
            description = element("div", {"class": "step-description"}, step.description)

        connector = None
        if index < last:
            connector = element(
                "div", {"class": classes("step-connector", "completed" if completed else None)}
            )

        items.append(
            element(
                "div",
                {
                    "class": classes(
                        "step-item",
                        "active" if active else None,
                        "completed" if completed else None,
                        "error" if error else None,
                    ),
                    "data-step": index,
                },
                element("div", {"class": "step-indicator"}, indicator),
                element(
                    "div",
                    {"class": "step-content"},
                    element("div", {"class": "step-title"}, step.title),
                    description,
                ),
                connector,
            )
        )
    return [element("div", {"class": "progress-steps"}, *items)]


def render_multi_segment(context: ProgressContext) -> list[Node]:
    if not context.segments:
        return render_linear(context)

    total = sum(segment.value for segment in context.segments)
    bars = []
    for segment in context.segments:
        width = segment.value / total * 100 if total > 0 else 0.0
        show_label = bool(segment.label) and width > MIN_LABELLED_SEGMENT
        bars.append(
            element(
                "div",
                {
                    "class": f"progress-bar bg-{segment.variant.value}",
                    "style": f"width: {format_number(width)}%;",
                    "role": "progressbar",
                    "title": segment.tooltip or None,
                },
                segment.label if show_label else None,
            )
        )
    return [
        element(
            "div",
            {
                "class": "progress progress-multi",
                "style": f"height: {context.height}px;" if context.height > 0 else None,
            },
            *bars,
        )
    ]


_RENDERERS: dict[ProgressType, Callable[[ProgressContext], list[Node]]] = {
    ProgressType.LINEAR: render_linear,
    ProgressType.CIRCULAR: render_circular,
    ProgressType.RING: render_ring,
    ProgressType.STEPS: render_steps,
    ProgressType.MULTI_SEGMENT: render_multi_segment,
}


def render_progress(context: ProgressContext) -> Node:
    return element(
        "div",
        {
            "class": classes("progress-container", context.css_class),
            "data-template": "progress",
            "data-type": context.type.value,
            "disabled": True if context.disabled else None,
        },
        *_RENDERERS[context.type](context),
    )
