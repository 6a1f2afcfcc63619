"""Currency template: monetary values with compact magnitude formatting."""

from .formatting import CULTURES, culture_for, format_compact, format_currency, format_standard
from .schemas import CurrencyContext
from .template import CurrencyTemplate, parse_amount
from .renderer import render_currency

__all__ = [
    "CULTURES",
    "culture_for",
    "format_compact",
    "format_currency",
    "format_standard",
    "CurrencyContext",
    "CurrencyTemplate",
    "parse_amount",
    "render_currency",
]
