"""Suggestion aggregator using Jinja2 templates.

Wraps a Classification into a TemplateSuggestion: a rationale sentence, a
configuration hint, and auto-apply / confirm tiers derived from the
configured thresholds.
"""

import logging
from typing import Any, Iterable, Optional, Sequence

from jinja2 import BaseLoader, Environment, TemplateError

from ..configuration import TemplateConfiguration, resolve_configuration
from .detector import classify
from .schemas import FieldDescriptor, TemplateKind, TemplateSuggestion

logger = logging.getLogger(__name__)


RATIONALE_TEMPLATES: dict[TemplateKind, str] = {
    TemplateKind.BADGE: (
        "Field '{{ name }}' appears to be a status/category field based on name pattern"
    ),
    TemplateKind.CURRENCY: (
        "Field '{{ name }}' of type '{{ type_name }}' appears to be a monetary value"
    ),
    TemplateKind.STACK: (
        "Field '{{ name }}' appears to contain multi-line or detailed text content"
    ),
    TemplateKind.AVATAR: (
        "Field '{{ name }}' appears to be a user/profile field suitable for avatar display"
    ),
    TemplateKind.PROGRESS: "Field '{{ name }}' appears to be a progress/percentage field",
    TemplateKind.RATING: "Field '{{ name }}' appears to be a rating/score field",
    TemplateKind.NONE: "No specific template pattern detected for '{{ name }}'",
}

HINT_TEMPLATES: dict[TemplateKind, str] = {
    TemplateKind.BADGE: (
        "Consider configuring status-to-variant mapping for automatic color coding"
        "{% if distinct %} ({{ distinct | join(', ') }}){% endif %}"
    ),
    TemplateKind.CURRENCY: "Configure currency code and compact formatting based on your data scale",
    TemplateKind.STACK: (
        "Consider using primary/secondary text selectors for better information hierarchy"
    ),
    TemplateKind.AVATAR: "Configure image and name selectors, consider adding status indicators",
    TemplateKind.PROGRESS: "Set appropriate max value and consider using different progress types",
    TemplateKind.RATING: "Choose rating type (stars, thumbs, emoji) and configure max rating",
}


class SuggestionComposer:
    """Renders rationale and hint text for classifications."""

    def __init__(self):
        self.env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def _render(self, source: Optional[str], label: str, context: dict[str, Any]) -> str:
        if source is None:
            raise ValueError(f"No {label} template for context: {context.get('kind')}")
        try:
            return self.env.from_string(source).render(**context).strip()
        except TemplateError as e:
            raise ValueError(f"Template rendering error for {label}: {e}")

    def rationale(self, kind: TemplateKind, context: dict[str, Any]) -> str:
        return self._render(RATIONALE_TEMPLATES.get(kind), "rationale", context)

    def hint(self, kind: TemplateKind, context: dict[str, Any]) -> Optional[str]:
        if kind == TemplateKind.NONE:
            return None
        return self._render(HINT_TEMPLATES.get(kind), "hint", context)


_composer: Optional[SuggestionComposer] = None


def get_suggestion_composer() -> SuggestionComposer:
    global _composer
    if _composer is None:
        _composer = SuggestionComposer()
    return _composer


def _distinct_strings(samples: Sequence[Any], limit: int = 5) -> list[str]:
    seen: list[str] = []
    for value in samples:
        if isinstance(value, str) and value.strip() and value not in seen:
            seen.append(value)
        if len(seen) >= limit:
            break
    return seen


def create_suggestion(
    field: FieldDescriptor,
    samples: Optional[Sequence[Any]] = None,
    config: Optional[TemplateConfiguration] = None,
) -> TemplateSuggestion:
    """Classify a field and describe the result for the host UI."""
    config = resolve_configuration(config)
    settings = config.smart_detection
    if samples is None:
        samples = field.samples or []
    samples = list(samples)[: settings.sample_data_limit]

    classification = classify(field, samples, config)
    context = {
        "name": field.name,
        "type_name": field.declared_type or "unknown",
        "kind": classification.kind.value,
        "distinct": _distinct_strings(samples),
    }
    composer = get_suggestion_composer()

    return TemplateSuggestion(
        field_name=field.name,
        kind=classification.kind,
        confidence=classification.confidence,
        source=classification.source,
        rationale=composer.rationale(classification.kind, context),
        configuration_hint=composer.hint(classification.kind, context),
        auto_apply_threshold=settings.auto_apply_threshold,
        suggestion_threshold=settings.suggestion_threshold,
        detection_enabled=settings.enabled,
    )


def suggest_templates(
    fields: Iterable[FieldDescriptor],
    config: Optional[TemplateConfiguration] = None,
) -> list[TemplateSuggestion]:
    """Suggest templates for many fields, most confident first.

    Ties keep input order.
    """
    suggestions = [create_suggestion(field, config=config) for field in fields]
    ranked = sorted(suggestions, key=lambda s: s.confidence, reverse=True)
    logger.debug(
        f"Suggested templates for {len(ranked)} fields, "
        f"{sum(1 for s in ranked if s.auto_apply)} auto-apply"
    )
    return ranked
