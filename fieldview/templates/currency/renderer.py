"""
Currency renderer.
"""

from ...nodes import Node, classes, element
from .formatting import format_currency, format_standard, value_color
from .schemas import CurrencyContext


def render_currency(context: CurrencyContext) -> Node:
    text = format_currency(context.value, context.currency_code, context.compact, context.format)
    color = f"text-{value_color(context.value)}" if context.show_colors else None

    return element(
        "span",
        {
            "class": classes("currency-value", color, context.css_class),
            "data-template": "currency",
            "data-value": str(context.value),
            "data-currency": context.currency_code,
            "data-compact": "true" if context.compact else None,
            "data-selected": "true" if context.selected else None,
            "disabled": True if context.disabled else None,
            # full amount on hover when the visible text is abbreviated
            "title": format_standard(context.value, context.currency_code) if context.compact else None,
        },
        text,
    )
