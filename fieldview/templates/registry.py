"""
Template factory and named template registry.

``create_definition`` builds any kind of template definition from accessor
bindings; ``auto_template`` classifies a field first and only builds a
definition when detection is confident enough. ``TemplateRegistry`` keeps
definitions under names so hosts can render by key.
"""

import logging
from typing import Any, Optional, Sequence, Union

from ..configuration import TemplateConfiguration, resolve_configuration
from ..detection import FieldDescriptor, TemplateKind, TemplateSuggestion, create_suggestion
from ..nodes import Node, element
from .avatar import AvatarTemplate
from .badge import BadgeTemplate
from .currency import CurrencyTemplate
from .progress import ProgressTemplate
from .rating import RatingTemplate
from .schemas import Accessor, BaseTemplate, field_accessor, text_of
from .stack import StackTemplate

logger = logging.getLogger(__name__)


TEMPLATE_CLASSES: dict[TemplateKind, type[BaseTemplate]] = {
    TemplateKind.BADGE: BadgeTemplate,
    TemplateKind.CURRENCY: CurrencyTemplate,
    TemplateKind.STACK: StackTemplate,
    TemplateKind.AVATAR: AvatarTemplate,
    TemplateKind.PROGRESS: ProgressTemplate,
    TemplateKind.RATING: RatingTemplate,
}

# Binding that receives the field accessor when a template is built automatically
PRIMARY_BINDINGS: dict[TemplateKind, str] = {
    TemplateKind.BADGE: "value",
    TemplateKind.CURRENCY: "value",
    TemplateKind.STACK: "primary",
    TemplateKind.AVATAR: "display_name",
    TemplateKind.PROGRESS: "value",
    TemplateKind.RATING: "value",
}

KIND_DESCRIPTIONS: dict[TemplateKind, str] = {
    TemplateKind.BADGE: "Status/category badge with variant color mapping",
    TemplateKind.CURRENCY: "Monetary amount with culture formatting and compact B/M/K output",
    TemplateKind.STACK: "Primary/secondary/tertiary text lines with truncation",
    TemplateKind.AVATAR: "User avatar with image, initials, status and badge",
    TemplateKind.PROGRESS: "Linear, circular, ring, stepped or multi-segment progress",
    TemplateKind.RATING: "Stars, hearts, thumbs, numeric, bar, emoji or custom rating",
}


def _as_kind(kind: Union[TemplateKind, str]) -> TemplateKind:
    if isinstance(kind, TemplateKind):
        return kind
    try:
        return TemplateKind(str(kind).lower())
    except ValueError:
        raise ValueError(f"Unknown template kind: {kind}")


def create_definition(
    kind: Union[TemplateKind, str],
    config: Optional[TemplateConfiguration] = None,
    **bindings: Any,
) -> BaseTemplate:
    """Build a template definition.

    Args:
        kind: Template kind (or its string value)
        config: Configuration for unset fields (default: the installed one)
        **bindings: Accessors and static options of the kind's template class

    Raises:
        ValueError: kind is NONE or unknown
    """
    kind = _as_kind(kind)
    template_class = TEMPLATE_CLASSES.get(kind)
    if template_class is None:
        raise ValueError(f"No template definition for kind: {kind.value}")
    return template_class(config=config, **bindings)


def render_raw(value: Any) -> Node:
    """Plain text fallback when no template applies."""
    return element("span", {"class": "template-raw", "data-template": "none"}, text_of(value))


class AutoTemplate:
    """Template chosen by field detection.

    Renders through the detected definition when the suggestion cleared the
    suggestion threshold, otherwise as plain text.
    """

    def __init__(
        self,
        field_name: str,
        suggestion: TemplateSuggestion,
        definition: Optional[BaseTemplate],
        accessor: Accessor,
    ):
        self.field_name = field_name
        self.suggestion = suggestion
        self.definition = definition
        self._accessor = accessor

    @property
    def kind(self) -> TemplateKind:
        if self.definition is None:
            return TemplateKind.NONE
        return self.definition.kind

    def render(self, item: Any) -> Optional[Node]:
        if item is None:
            return None
        if self.definition is None:
            return render_raw(self._accessor(item))
        return self.definition.render(item)


def auto_template(
    field_name: str,
    samples: Optional[Sequence[Any]] = None,
    declared_type: Optional[str] = None,
    config: Optional[TemplateConfiguration] = None,
    **bindings: Any,
) -> AutoTemplate:
    """Detect a template for ``field_name`` and bind it to that field.

    Extra ``bindings`` are passed to the detected template class.
    """
    config = resolve_configuration(config)
    settings = config.smart_detection
    accessor = field_accessor(field_name)
    field = FieldDescriptor(name=field_name, declared_type=declared_type)
    suggestion = create_suggestion(field, samples, config)

    definition = None
    if (
        settings.enabled
        and suggestion.kind != TemplateKind.NONE
        and suggestion.confidence >= settings.suggestion_threshold
    ):
        bound = {PRIMARY_BINDINGS[suggestion.kind]: accessor}
        bound.update(bindings)
        definition = create_definition(suggestion.kind, config=config, **bound)
        logger.debug(
            f"Auto template for '{field_name}': {suggestion.kind.value} "
            f"({suggestion.confidence})"
        )
    else:
        logger.debug(
            f"Auto template for '{field_name}' falls back to plain text "
            f"({suggestion.kind.value}, {suggestion.confidence})"
        )

    return AutoTemplate(field_name, suggestion, definition, accessor)


class TemplateRegistry:
    """Named template definitions."""

    def __init__(self):
        self._templates: dict[str, Union[BaseTemplate, AutoTemplate]] = {}

    def register(self, key: str, definition: Union[BaseTemplate, AutoTemplate]) -> None:
        if key in self._templates:
            logger.warning(f"Replacing registered template: {key}")
        self._templates[key] = definition

    def unregister(self, key: str) -> bool:
        return self._templates.pop(key, None) is not None

    def get(self, key: str) -> Optional[Union[BaseTemplate, AutoTemplate]]:
        return self._templates.get(key)

    def list_keys(self) -> list[str]:
        return sorted(self._templates.keys())

    def count(self) -> int:
        return len(self._templates)

    def render(self, key: str, item: Any) -> Optional[Node]:
        """Render an item with a registered template; None when the key is unknown."""
        definition = self.get(key)
        if definition is None:
            logger.warning(f"No template registered under '{key}'")
            return None
        return definition.render(item)

    def clear(self) -> None:
        self._templates.clear()


# Global registry instance
_registry: Optional[TemplateRegistry] = None


def get_template_registry() -> TemplateRegistry:
    """Get the global template registry instance."""
    global _registry
    if _registry is None:
        _registry = TemplateRegistry()
    return _registry
