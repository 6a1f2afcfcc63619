"""
Field classifier.

Heuristic, deterministic classification of a field into a template kind with
a confidence score. Rules are tried in a fixed order and the first match
wins:

1. exact lower-cased name in NAME_PATTERNS
2. substring of the name, walking NAME_PATTERNS in declaration order
3. regex keyword groups (currency, badge, avatar, progress, rating)
4. declared type (decimal/double/float -> currency, enum -> badge)
5. sample values (numeric in range -> currency, short/status strings ->
   badge, long strings -> stack)
"""

import logging
from decimal import Decimal
from numbers import Real
from typing import Any, Optional, Sequence

from ..configuration import TemplateConfiguration, resolve_configuration
from .patterns import (
    CURRENCY_MAX,
    CURRENCY_MIN,
    KEYWORD_PATTERNS,
    LONG_TEXT_LENGTH,
    NAME_PATTERNS,
    SHORT_STATUS_LENGTH,
    STATUS_WORDS,
    is_currency_type,
    is_enum_type,
    unwrap_nullable,
)
from .schemas import Classification, FieldDescriptor, MatchSource, TemplateKind

logger = logging.getLogger(__name__)

# Confidence weights
BASE_CONFIDENCE = 0.5
EXACT_NAME_BONUS = 0.3
TYPE_MATCH_BONUS = 0.2
NO_SAMPLES_PENALTY = 0.1


def _from_name(name: str) -> Optional[tuple[TemplateKind, MatchSource, str]]:
    lowered = name.strip().lower()
    if not lowered:
        return None

    if lowered in NAME_PATTERNS:
        return NAME_PATTERNS[lowered], MatchSource.EXACT_NAME, lowered

    for keyword, kind in NAME_PATTERNS.items():
        if keyword in lowered:
            return kind, MatchSource.NAME_CONTAINS, keyword

    for pattern, kind in KEYWORD_PATTERNS:
        match = pattern.search(lowered)
        if match:
            return kind, MatchSource.NAME_REGEX, match.group(0)

    return None


def _from_type(field: FieldDescriptor) -> Optional[tuple[TemplateKind, MatchSource, str]]:
    if is_currency_type(field.declared_type):
        return TemplateKind.CURRENCY, MatchSource.DECLARED_TYPE, unwrap_nullable(field.declared_type)
    if field.is_enum or is_enum_type(field.declared_type):
        return TemplateKind.BADGE, MatchSource.ENUM_TYPE, field.declared_type or "enum"
    return None


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _is_likely_currency(value: Any) -> bool:
    try:
        magnitude = abs(Decimal(str(value)))
        return Decimal(str(CURRENCY_MIN)) <= magnitude <= CURRENCY_MAX
    except ArithmeticError:
        return False


def _is_likely_status(value: str) -> bool:
    if not value.strip():
        return False
    lowered = value.lower()
    return any(word in lowered for word in STATUS_WORDS) or len(value) < SHORT_STATUS_LENGTH


def _from_samples(samples: Sequence[Any]) -> Optional[tuple[TemplateKind, MatchSource, str]]:
    values = [v for v in samples if v is not None]
    if not values:
        return None

    if all(_is_numeric(v) and _is_likely_currency(v) for v in values):
        return TemplateKind.CURRENCY, MatchSource.SAMPLE_DATA, "numeric_range"
    if all(isinstance(v, str) and _is_likely_status(v) for v in values):
        return TemplateKind.BADGE, MatchSource.SAMPLE_DATA, "status_strings"
    if all(isinstance(v, str) and len(v) > LONG_TEXT_LENGTH for v in values):
        return TemplateKind.STACK, MatchSource.SAMPLE_DATA, "long_strings"
    return None


def calculate_confidence(
    field: FieldDescriptor,
    kind: TemplateKind,
    samples: Optional[Sequence[Any]],
) -> float:
    """Score a classification. Zero exactly when nothing matched."""
    if kind == TemplateKind.NONE:
        return 0.0

    confidence = BASE_CONFIDENCE
    if field.name.strip().lower() in NAME_PATTERNS:
        confidence += EXACT_NAME_BONUS
    if is_currency_type(field.declared_type):
        confidence += TYPE_MATCH_BONUS
    if not samples:
        confidence -= NO_SAMPLES_PENALTY

    return round(min(1.0, max(0.0, confidence)), 4)


def classify(
    field: FieldDescriptor,
    samples: Optional[Sequence[Any]] = None,
    config: Optional[TemplateConfiguration] = None,
) -> Classification:
    """Classify a field into a template kind.

    Args:
        field: The field to classify
        samples: Sample values; overrides field.samples when given
        config: Configuration (default: the installed global one)

    Returns:
        Classification with kind, confidence and the rule that matched
    """
    settings = resolve_configuration(config).smart_detection
    if samples is None:
        samples = field.samples
    limited = list(samples)[: settings.sample_data_limit] if samples else []

    match = _from_name(field.name or "") or _from_type(field)
    if match is None and settings.analyze_sample_data and limited:
        match = _from_samples(limited)

    if match is None:
        logger.debug(f"No template detected for field '{field.name}'")
        return Classification(kind=TemplateKind.NONE, confidence=0.0)

    kind, source, matched = match
    confidence = calculate_confidence(field, kind, limited)
    logger.debug(
        f"Field '{field.name}' classified as {kind.value} via {source.value} "
        f"('{matched}'), confidence {confidence}"
    )
    return Classification(kind=kind, confidence=confidence, source=source, matched=matched)
