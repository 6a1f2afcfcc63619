"""
Configuration schemas for fieldview.

Process-wide defaults consulted by every template definition for fields the
caller leaves unset. Sections are frozen once built; out-of-range cosmetic
values are clamped on construction instead of being rejected.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_serializer,
    field_validator,
    model_validator,
)

from ..enums import Density, Orientation, Size, Variant

logger = logging.getLogger(__name__)


DEFAULT_STATUS_MAPPING: dict[str, Variant] = {
    "active": Variant.SUCCESS,
    "inactive": Variant.SECONDARY,
    "pending": Variant.WARNING,
    "error": Variant.ERROR,
    "success": Variant.SUCCESS,
    "warning": Variant.WARNING,
    "info": Variant.INFO,
    "approved": Variant.SUCCESS,
    "rejected": Variant.ERROR,
    "cancelled": Variant.SECONDARY,
}

MIN_STACK_LENGTH = 4
MIN_SAMPLE_LIMIT = 1
MAX_SAMPLE_LIMIT = 100


def _clamp(section: str, name: str, value: Any, low: float, high: float) -> Any:
    """Clamp an already coerced numeric setting into [low, high], logging when it moves."""
    clamped = min(high, max(low, value))
    if clamped != value:
        logger.warning(f"{section}.{name}={value} out of range, clamped to {clamped}")
    return clamped


class BadgeDefaults(BaseModel):
    """Defaults for badge templates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_variant: Variant = Field(
        default=Variant.PRIMARY,
        description="Variant used when neither an accessor nor the status mapping applies",
    )
    default_size: Size = Size.SMALL
    default_density: Density = Density.COMPACT
    default_clickable: bool = False
    status_mapping: Mapping[str, Variant] = Field(
        default_factory=lambda: dict(DEFAULT_STATUS_MAPPING),
        description="Lower-cased badge text -> variant (read-only once built)",
    )

    @model_validator(mode="before")
    @classmethod
    def _lowercase_status_keys(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("status_mapping"), Mapping):
            data = dict(data)
            data["status_mapping"] = {
                str(k).lower(): v for k, v in data["status_mapping"].items()
            }
        return data

    @field_validator("status_mapping", mode="after")
    @classmethod
    def _freeze_status_mapping(cls, value: Mapping[str, Variant]) -> Mapping[str, Variant]:
        return MappingProxyType(dict(value))

    @field_serializer("status_mapping")
    def _dump_status_mapping(self, value: Mapping[str, Variant]) -> dict[str, Variant]:
        return dict(value)


class CurrencyDefaults(BaseModel):
    """Defaults for currency templates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    currency_code: str = Field(default="USD", description="ISO 4217 code")
    format: str = Field(default="C", description="Format specifier for non-compact output")
    compact: Optional[bool] = Field(
        default=False,
        description="Compact B/M/K output; None switches by auto_compact_threshold",
    )
    show_colors: bool = True
    auto_compact_threshold: float = Field(
        default=100000,
        description="Magnitude at which an unset 'compact' switches to compact output",
    )

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("currency_code"), str):
            data = dict(data)
            data["currency_code"] = data["currency_code"].strip().upper() or "USD"
        return data

    @field_validator("auto_compact_threshold", mode="after")
    @classmethod
    def _clamp_threshold(cls, value: float) -> float:
        return _clamp("currency", "auto_compact_threshold", value, 0, float("inf"))


class StackDefaults(BaseModel):
    """Defaults for multi-line stack templates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    orientation: Orientation = Orientation.VERTICAL
    truncate_text: bool = True
    max_length: int = Field(default=50, description="Longest text shown before truncation")
    size: Size = Size.MEDIUM
    density: Density = Density.NORMAL

    @field_validator("max_length", mode="after")
    @classmethod
    def _clamp_length(cls, value: int) -> int:
        return _clamp("stack", "max_length", value, MIN_STACK_LENGTH, float("inf"))


class SmartDetectionSettings(BaseModel):
    """Thresholds and limits for automatic template detection."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    auto_apply_threshold: float = Field(
        default=0.8, description="Confidence at or above which a suggestion is applied"
    )
    suggestion_threshold: float = Field(
        default=0.6, description="Confidence at or above which a suggestion is offered"
    )
    analyze_sample_data: bool = True
    sample_data_limit: int = Field(default=10, description="Samples inspected per field")

    # Runs after coercion so strings from YAML or dicts are clamped too
    @field_validator("auto_apply_threshold", "suggestion_threshold", mode="after")
    @classmethod
    def _clamp_thresholds(cls, value: float, info: ValidationInfo) -> float:
        return _clamp("smart_detection", info.field_name, value, 0.0, 1.0)

    @field_validator("sample_data_limit", mode="after")
    @classmethod
    def _clamp_sample_limit(cls, value: int) -> int:
        return _clamp(
            "smart_detection", "sample_data_limit", value, MIN_SAMPLE_LIMIT, MAX_SAMPLE_LIMIT
        )


class TemplateConfiguration(BaseModel):
    """Complete process-wide template configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    badge: BadgeDefaults = Field(default_factory=BadgeDefaults)
    currency: CurrencyDefaults = Field(default_factory=CurrencyDefaults)
    stack: StackDefaults = Field(default_factory=StackDefaults)
    smart_detection: SmartDetectionSettings = Field(default_factory=SmartDetectionSettings)
