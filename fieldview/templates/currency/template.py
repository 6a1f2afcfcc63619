"""
Currency template definition.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Optional

from ...configuration import TemplateConfiguration
from ...detection.schemas import TemplateKind
from ...nodes import Node
from ..schemas import Accessor, BaseTemplate, call, text_of
from .renderer import render_currency
from .schemas import CurrencyContext

logger = logging.getLogger(__name__)


def parse_amount(raw: Any) -> Decimal:
    """Parse a value as a decimal amount; anything unparseable is zero."""
    if raw is None or isinstance(raw, bool):
        return Decimal(0)
    try:
        value = Decimal(text_of(raw).strip().replace(",", ""))
    except InvalidOperation:
        logger.debug(f"Currency value {raw!r} is not a number, using 0")
        return Decimal(0)
    if not value.is_finite():
        logger.debug(f"Currency value {raw!r} is not finite, using 0")
        return Decimal(0)
    return value


class CurrencyTemplate(BaseTemplate):
    """Monetary amount with culture-aware formatting."""

    kind: ClassVar[TemplateKind] = TemplateKind.CURRENCY

    value: Optional[Accessor] = None
    currency_code_selector: Optional[Accessor] = None

    currency_code: Optional[str] = None
    format: Optional[str] = None
    compact: Optional[bool] = None
    show_colors: Optional[bool] = None
    auto_compact_threshold: Optional[float] = None

    @classmethod
    def configuration_defaults(cls, config: TemplateConfiguration) -> dict[str, Any]:
        currency = config.currency
        return {
            "currency_code": currency.currency_code,
            "format": currency.format,
            "compact": currency.compact,
            "show_colors": currency.show_colors,
            "auto_compact_threshold": currency.auto_compact_threshold,
        }

    def build_context(self, item: Any) -> CurrencyContext:
        value = parse_amount(call(self.value, item))

        code = self.currency_code
        if self.currency_code_selector is not None:
            selected = text_of(self.currency_code_selector(item)).strip()
            if selected:
                code = selected.upper()

        compact = self.compact
        if compact is None:
            compact = abs(value) >= Decimal(str(self.auto_compact_threshold))

        return CurrencyContext(
            size=self.size,
            density=self.density,
            css_class=self.css_class,
            value=value,
            currency_code=code,
            format=self.format,
            compact=compact,
            show_colors=self.show_colors,
        )

    def render_context(self, context: CurrencyContext) -> Node:
        return render_currency(context)
