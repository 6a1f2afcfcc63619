"""Tests for the currency template and formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from fieldview.configuration import TemplateConfigurationBuilder
from fieldview.templates import CurrencyTemplate, field_accessor
from fieldview.templates.currency import format_compact, format_standard, parse_amount


@pytest.mark.parametrize(
    "value, code, expected",
    [
        (Decimal("1234.5"), "USD", "$1,234.50"),
        (Decimal("-1234.5"), "USD", "-$1,234.50"),
        (Decimal("1234.5"), "EUR", "1.234,50 €"),
        (Decimal("1234.5"), "GBP", "£1,234.50"),
        (Decimal("1234.5"), "JPY", "¥1,235"),
        (Decimal("10"), "CHF", "CHF 10.00"),
    ],
)
def test_format_standard(value: Decimal, code: str, expected: str) -> None:
    assert format_standard(value, code) == expected


def test_format_specifiers() -> None:
    assert format_standard(Decimal("1234.567"), "USD", "C0") == "$1,235"
    assert format_standard(Decimal("1234.567"), "USD", "N1") == "1,234.6"
    assert format_standard(Decimal("1234.567"), "USD", "N") == "1,234.57"


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1500000"), "$1.5M"),
        (Decimal("2000000000"), "$2B"),
        (Decimal("1250"), "$1.3K"),
        (Decimal("-45000"), "-$45K"),
        (Decimal("999"), "$999.00"),
    ],
)
def test_format_compact(value: Decimal, expected: str) -> None:
    assert format_compact(value, "USD") == expected


def test_parse_amount() -> None:
    assert parse_amount("1,234.50") == Decimal("1234.50")
    assert parse_amount(12) == Decimal(12)
    assert parse_amount("abc") == Decimal(0)
    assert parse_amount(None) == Decimal(0)
    assert parse_amount(float("nan")) == Decimal(0)


def test_compact_render_with_title(orders) -> None:
    template = CurrencyTemplate(value=field_accessor("total"), compact=True)

    node = template.render(orders[0])

    assert node.text() == "$1.5M"
    assert node.has_class("currency-value")
    assert node.has_class("text-success")
    assert node.attributes["title"] == "$1,500,000.00"
    assert node.attributes["data-compact"] == "true"


def test_currency_code_selector_overrides_static_code(orders) -> None:
    template = CurrencyTemplate(
        value=field_accessor("total"),
        currency_code_selector=field_accessor("currency"),
        currency_code="GBP",
    )

    negative = template.render(orders[1])
    zero = template.render(orders[2])

    assert negative.text() == "-42,50 €"
    assert negative.has_class("text-error")
    assert negative.attributes["data-currency"] == "EUR"
    assert zero.text() == "£0.00"
    assert zero.has_class("text-muted")


def test_unparseable_value_renders_zero() -> None:
    node = CurrencyTemplate(value=field_accessor("total")).render({"total": "n/a"})

    assert node.text() == "$0.00"


def test_colors_can_be_disabled(orders) -> None:
    node = CurrencyTemplate(value=field_accessor("total"), show_colors=False).render(orders[0])

    assert not any(name.startswith("text-") for name in node.css_classes)


def test_auto_compact_by_threshold() -> None:
    config = (
        TemplateConfigurationBuilder()
        .with_currency_defaults(compact=None, auto_compact_threshold=10000)
        .build()
    )
    template = CurrencyTemplate(value=field_accessor("total"), config=config)

    assert template.render({"total": 25000}).text() == "$25K"
    assert template.render({"total": 2500}).text() == "$2,500.00"


def test_configured_currency_code() -> None:
    config = TemplateConfigurationBuilder().with_currency_defaults(currency_code="jpy").build()

    node = CurrencyTemplate(value=field_accessor("total"), config=config).render({"total": 1234.4})

    assert node.text() == "¥1,234"
