"""
Currency render context.
"""

from decimal import Decimal

from ..schemas import RenderContext


class CurrencyContext(RenderContext):
    """Resolved currency values for one item."""

    value: Decimal = Decimal(0)
    currency_code: str = "USD"
    format: str = "C"
    compact: bool = False
    show_colors: bool = True
