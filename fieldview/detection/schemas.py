"""
Detection schemas for fieldview.

A FieldDescriptor describes one column to classify; the classifier turns it
into a Classification, and the suggestion layer wraps that into a
TemplateSuggestion with auto-apply / confirm / ignore tiers.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class TemplateKind(str, Enum):
    """Closed set of presentation strategies."""

    NONE = "none"
    BADGE = "badge"
    CURRENCY = "currency"
    STACK = "stack"
    AVATAR = "avatar"
    PROGRESS = "progress"
    RATING = "rating"


class MatchSource(str, Enum):
    """Which classification rule produced the kind."""

    EXACT_NAME = "exact_name"
    NAME_CONTAINS = "name_contains"
    NAME_REGEX = "name_regex"
    DECLARED_TYPE = "declared_type"
    ENUM_TYPE = "enum_type"
    SAMPLE_DATA = "sample_data"
    NONE = "none"


class FieldDescriptor(BaseModel):
    """One column/property to classify."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Field or property name as declared by the host")
    declared_type: Optional[str] = Field(
        default=None,
        description="Declared type name, e.g. 'str', 'decimal', 'Optional[float]', 'float?'",
    )
    is_enum: bool = Field(default=False, description="Field is typed as an enumeration")
    samples: Optional[list[Any]] = Field(
        default=None,
        description="Sample values pre-fetched by the host; only the first few are inspected",
    )


class Classification(BaseModel):
    """Raw classifier output."""

    model_config = ConfigDict(frozen=True)

    kind: TemplateKind
    confidence: float = Field(ge=0.0, le=1.0)
    source: MatchSource = MatchSource.NONE
    matched: Optional[str] = Field(
        default=None, description="Keyword, type name or heuristic that matched"
    )


class TemplateSuggestion(BaseModel):
    """Classifier result wrapped for presentation to the host."""

    model_config = ConfigDict(frozen=True)

    field_name: str
    kind: TemplateKind
    confidence: float = Field(ge=0.0, le=1.0)
    source: MatchSource = MatchSource.NONE
    rationale: str
    configuration_hint: Optional[str] = None
    auto_apply_threshold: float = 0.8
    suggestion_threshold: float = 0.6
    detection_enabled: bool = True

    @computed_field
    @property
    def auto_apply(self) -> bool:
        return (
            self.detection_enabled
            and self.kind != TemplateKind.NONE
            and self.confidence >= self.auto_apply_threshold
        )

    @computed_field
    @property
    def requires_confirmation(self) -> bool:
        return (
            self.detection_enabled
            and self.kind != TemplateKind.NONE
            and self.suggestion_threshold <= self.confidence < self.auto_apply_threshold
        )

    @computed_field
    @property
    def tier(self) -> str:
        if self.auto_apply:
            return "auto_apply"
        if self.requires_confirmation:
            return "confirm"
        return "ignore"
