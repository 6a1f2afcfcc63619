"""
Keyword and type tables used by the field classifier.

NAME_PATTERNS is order-sensitive: substring matching walks it in declaration
order and the first hit wins, so "user_status" is a badge (via "status") and
"total_amount" a currency (via "amount").
"""

import re
from typing import Optional

from .schemas import TemplateKind


NAME_PATTERNS: dict[str, TemplateKind] = {
    # Badge
    "status": TemplateKind.BADGE,
    "state": TemplateKind.BADGE,
    "priority": TemplateKind.BADGE,
    "type": TemplateKind.BADGE,
    "category": TemplateKind.BADGE,
    "level": TemplateKind.BADGE,
    # Currency
    "amount": TemplateKind.CURRENCY,
    "price": TemplateKind.CURRENCY,
    "cost": TemplateKind.CURRENCY,
    "salary": TemplateKind.CURRENCY,
    "wage": TemplateKind.CURRENCY,
    "total": TemplateKind.CURRENCY,
    "balance": TemplateKind.CURRENCY,
    "value": TemplateKind.CURRENCY,
    # Stack
    "name": TemplateKind.STACK,
    "title": TemplateKind.STACK,
    "description": TemplateKind.STACK,
    "address": TemplateKind.STACK,
    "profile": TemplateKind.STACK,
    # Avatar
    "avatar": TemplateKind.AVATAR,
    "user": TemplateKind.AVATAR,
    "employee": TemplateKind.AVATAR,
    "owner": TemplateKind.AVATAR,
    "manager": TemplateKind.AVATAR,
    "assignee": TemplateKind.AVATAR,
    # Progress
    "progress": TemplateKind.PROGRESS,
    "completion": TemplateKind.PROGRESS,
    "percentage": TemplateKind.PROGRESS,
    "utilization": TemplateKind.PROGRESS,
    "capacity": TemplateKind.PROGRESS,
    # Rating
    "rating": TemplateKind.RATING,
    "score": TemplateKind.RATING,
    "stars": TemplateKind.RATING,
    "review": TemplateKind.RATING,
    "feedback": TemplateKind.RATING,
    "satisfaction": TemplateKind.RATING,
}

# Fallback keyword groups, tried in this order after the name table.
KEYWORD_PATTERNS: list[tuple[re.Pattern, TemplateKind]] = [
    (re.compile(r"(price|cost|amount|salary|wage)"), TemplateKind.CURRENCY),
    (re.compile(r"(status|state|priority|level|type)"), TemplateKind.BADGE),
    (re.compile(r"(avatar|user|employee|owner|manager)"), TemplateKind.AVATAR),
    (re.compile(r"(progress|completion|percentage|utilization)"), TemplateKind.PROGRESS),
    (re.compile(r"(rating|score|stars|review|feedback)"), TemplateKind.RATING),
]

# Extra keywords that mark a monetary field outside classification (exports,
# currency formatting decisions). Kept next to NAME_PATTERNS so both stay in sync.
CURRENCY_EXTRA_KEYWORDS = ("payment", "currency")

CURRENCY_TYPES = frozenset({"decimal", "double", "float"})

STATUS_WORDS = (
    "active",
    "inactive",
    "pending",
    "completed",
    "cancelled",
    "approved",
    "rejected",
    "success",
    "error",
    "warning",
    "info",
)

SHORT_STATUS_LENGTH = 20
LONG_TEXT_LENGTH = 30
CURRENCY_MIN = 0.01
CURRENCY_MAX = 10_000_000

_NULLABLE_WRAPPERS = [
    re.compile(r"^optional\[(?P<inner>.+)\]$"),
    re.compile(r"^nullable<(?P<inner>.+)>$"),
    re.compile(r"^(?P<inner>.+?)\s*\|\s*none$"),
    re.compile(r"^none\s*\|\s*(?P<inner>.+)$"),
    re.compile(r"^(?P<inner>.+)\?$"),
]


def normalize_type(declared_type: Optional[str]) -> str:
    return (declared_type or "").strip().lower()


def unwrap_nullable(declared_type: Optional[str]) -> str:
    """Strip nullable wrappers: 'Optional[float]', 'float?', 'float | None' -> 'float'."""
    type_name = normalize_type(declared_type)
    for pattern in _NULLABLE_WRAPPERS:
        match = pattern.match(type_name)
        if match:
            return match.group("inner").strip()
    return type_name


def is_currency_type(declared_type: Optional[str]) -> bool:
    return unwrap_nullable(declared_type) in CURRENCY_TYPES


def is_enum_type(declared_type: Optional[str]) -> bool:
    type_name = unwrap_nullable(declared_type)
    return type_name == "enum" or type_name.endswith("enum")


def is_currency_field(name: Optional[str]) -> bool:
    """Whether a field name reads as monetary, using the classifier's own keywords."""
    lowered = (name or "").lower()
    if not lowered:
        return False
    keywords = [k for k, kind in NAME_PATTERNS.items() if kind == TemplateKind.CURRENCY]
    keywords.extend(CURRENCY_EXTRA_KEYWORDS)
    return any(keyword in lowered for keyword in keywords)
