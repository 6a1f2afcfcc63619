"""
Currency formatting.

Each supported code maps to a fixed culture (symbol placement, separators,
decimal digits). Rounding is half away from zero throughout.
"""

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CurrencyCulture(BaseModel):
    """Number formatting rules for one currency."""

    model_config = ConfigDict(frozen=True)

    culture: str
    symbol: str
    decimals: int = 2
    group_separator: str = ","
    decimal_separator: str = "."
    symbol_after: bool = False


CULTURES: dict[str, CurrencyCulture] = {
    "USD": CurrencyCulture(culture="en-US", symbol="$"),
    "EUR": CurrencyCulture(
        culture="en-DE",
        symbol="€",
        group_separator=".",
        decimal_separator=",",
        symbol_after=True,
    ),
    "GBP": CurrencyCulture(culture="en-GB", symbol="£"),
    "JPY": CurrencyCulture(culture="ja-JP", symbol="¥", decimals=0),
    "CAD": CurrencyCulture(culture="en-CA", symbol="$"),
    "AUD": CurrencyCulture(culture="en-AU", symbol="$"),
}

# Compact magnitude steps, largest first.
COMPACT_SCALES: list[tuple[Decimal, str]] = [
    (Decimal(1_000_000_000), "B"),
    (Decimal(1_000_000), "M"),
    (Decimal(1_000), "K"),
]

_FORMAT_PATTERN = re.compile(r"^(?P<kind>[CN])(?P<digits>\d{1,2})?$", re.IGNORECASE)


def culture_for(currency_code: Optional[str]) -> CurrencyCulture:
    """Culture for a code; unknown codes use the code itself as a prefix."""
    code = (currency_code or "").strip().upper()
    if code in CULTURES:
        return CULTURES[code]
    return CurrencyCulture(culture="en-US", symbol=f"{code} " if code else "")


def _group(value: Decimal, decimals: int, culture: CurrencyCulture) -> str:
    quantum = Decimal(1).scaleb(-decimals)
    rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
    text = f"{rounded:,.{decimals}f}"
    if culture.group_separator == "," and culture.decimal_separator == ".":
        return text
    return (
        text.replace(",", "\0")
        .replace(".", culture.decimal_separator)
        .replace("\0", culture.group_separator)
    )


def _with_symbol(number: str, culture: CurrencyCulture) -> str:
    if culture.symbol_after:
        return f"{number} {culture.symbol}"
    return f"{culture.symbol}{number}"


def format_standard(value: Decimal, currency_code: Optional[str], fmt: str = "C") -> str:
    """Full formatting, e.g. 1234.5 USD -> '$1,234.50'.

    ``fmt`` is 'C' (currency, culture digits), 'C<n>' (n digits), or
    'N'/'N<n>' (grouped number without symbol).
    """
    culture = culture_for(currency_code)
    match = _FORMAT_PATTERN.match(fmt or "C")
    kind = match.group("kind").upper() if match else "C"
    digits = match.group("digits") if match else None
    decimals = int(digits) if digits is not None else culture.decimals

    number = _group(abs(value), decimals, culture)
    sign = "-" if value < 0 and number.strip("0.,") else ""
    if kind == "N":
        return f"{sign}{number}"
    return f"{sign}{_with_symbol(number, culture)}"


def _one_decimal(value: Decimal) -> str:
    """Render like a '0.#' pattern: at most one decimal, no trailing zero."""
    rounded = value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if rounded == rounded.to_integral_value():
        return str(rounded.to_integral_value())
    return str(rounded)


def format_compact(value: Decimal, currency_code: Optional[str], fmt: str = "C") -> str:
    """Magnitude-collapsed formatting, e.g. 1500000 -> '$1.5M'.

    Values under one thousand use the standard format.
    """
    culture = culture_for(currency_code)
    magnitude = abs(value)
    sign = "-" if value < 0 else ""
    for scale, suffix in COMPACT_SCALES:
        if magnitude >= scale:
            return f"{sign}{culture.symbol}{_one_decimal(magnitude / scale)}{suffix}"
    return format_standard(value, currency_code, fmt)


def format_currency(
    value: Decimal,
    currency_code: Optional[str],
    compact: bool = False,
    fmt: str = "C",
) -> str:
    if compact:
        return format_compact(value, currency_code, fmt)
    return format_standard(value, currency_code, fmt)


def value_color(value: Decimal) -> str:
    """Semantic color for a signed amount."""
    if value > 0:
        return "success"
    if value < 0:
        return "error"
    return "muted"
