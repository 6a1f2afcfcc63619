"""Tests for fieldview.configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from fieldview.configuration import (
    ConfigurationError,
    TemplateConfiguration,
    TemplateConfigurationBuilder,
    configuration_from_dict,
    configuration_from_env,
    configure_templates,
    get_template_configuration,
    load_configuration,
    resolve_configuration,
)
from fieldview.configuration.builder import CONFIG_ENV_VAR
from fieldview.detection import FieldDescriptor, TemplateKind, create_suggestion
from fieldview.enums import Density, Orientation, Size, Variant


def test_defaults() -> None:
    config = TemplateConfiguration()

    assert config.badge.default_variant == Variant.PRIMARY
    assert config.badge.default_size == Size.SMALL
    assert config.badge.default_density == Density.COMPACT
    assert config.badge.status_mapping["active"] == Variant.SUCCESS
    assert config.badge.status_mapping["cancelled"] == Variant.SECONDARY
    assert config.currency.currency_code == "USD"
    assert config.currency.compact is False
    assert config.stack.max_length == 50
    assert config.stack.orientation == Orientation.VERTICAL
    assert config.smart_detection.auto_apply_threshold == 0.8
    assert config.smart_detection.suggestion_threshold == 0.6
    assert config.smart_detection.sample_data_limit == 10


def test_builder_chains_section_overrides() -> None:
    config = (
        TemplateConfigurationBuilder()
        .with_badge_defaults(default_variant="info")
        .with_status_mapping({"On_Hold": "warning"})
        .with_currency_defaults(currency_code="eur", compact=True)
        .with_stack_defaults(max_length=20)
        .with_smart_detection(auto_apply_threshold=0.9)
        .build()
    )

    assert config.badge.default_variant == Variant.INFO
    assert config.badge.status_mapping["on_hold"] == Variant.WARNING
    assert config.badge.status_mapping["active"] == Variant.SUCCESS
    assert config.currency.currency_code == "EUR"
    assert config.currency.compact is True
    assert config.stack.max_length == 20
    assert config.smart_detection.auto_apply_threshold == 0.9


def test_with_status_mapping_replace_drops_defaults() -> None:
    config = TemplateConfigurationBuilder().with_status_mapping({"open": "success"}, replace=True).build()

    assert config.badge.status_mapping == {"open": Variant.SUCCESS}


def test_builder_starts_from_base() -> None:
    base = TemplateConfigurationBuilder().with_currency_defaults(currency_code="GBP").build()
    config = TemplateConfigurationBuilder(base).with_stack_defaults(truncate_text=False).build()

    assert config.currency.currency_code == "GBP"
    assert config.stack.truncate_text is False


def test_out_of_range_values_are_clamped(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        config = (
            TemplateConfigurationBuilder()
            .with_smart_detection(auto_apply_threshold=1.5, suggestion_threshold=-1, sample_data_limit=500)
            .with_stack_defaults(max_length=1)
            .build()
        )

    assert config.smart_detection.auto_apply_threshold == 1.0
    assert config.smart_detection.suggestion_threshold == 0.0
    assert config.smart_detection.sample_data_limit == 100
    assert config.stack.max_length == 4
    assert "clamped" in caplog.text


def test_builder_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        TemplateConfigurationBuilder().with_badge_defaults(colour="red").build()


def test_configuration_is_frozen() -> None:
    config = TemplateConfiguration()
    with pytest.raises(ValidationError):
        config.stack.max_length = 10  # type: ignore[misc]


def test_configuration_from_dict() -> None:
    config = configuration_from_dict({"currency": {"currency_code": "JPY"}, "stack": None})

    assert config.currency.currency_code == "JPY"
    assert config.stack.max_length == 50
    assert configuration_from_dict(None) == TemplateConfiguration()


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "mapping"],
        {"tables": {}},
        {"badge": "primary"},
        {"stack": {"orientation": "diagonal"}},
    ],
)
def test_configuration_from_dict_errors(data) -> None:
    with pytest.raises(ConfigurationError):
        configuration_from_dict(data)


def test_load_configuration_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "fieldview.yaml"
    path.write_text(
        """
badge:
  default_variant: secondary
  status_mapping:
    Shipped: success
smart_detection:
  enabled: false
""",
        encoding="utf-8",
    )

    config = load_configuration(path)

    assert config.badge.default_variant == Variant.SECONDARY
    assert config.badge.status_mapping == {"shipped": Variant.SUCCESS}
    assert config.smart_detection.enabled is False


def test_load_configuration_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_configuration(tmp_path / "missing.yaml")


def test_configuration_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert configuration_from_env() == TemplateConfiguration()

    path = tmp_path / "config.yml"
    path.write_text("currency:\n  currency_code: cad\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert configuration_from_env().currency.currency_code == "CAD"


def test_global_configuration(caplog: pytest.LogCaptureFixture) -> None:
    assert get_template_configuration() == TemplateConfiguration()

    custom = TemplateConfigurationBuilder().with_currency_defaults(currency_code="EUR").build()
    with caplog.at_level(logging.WARNING):
        configure_templates(custom)

    assert get_template_configuration() is custom
    assert "replaced" in caplog.text

    explicit = TemplateConfiguration()
    assert resolve_configuration(explicit) is explicit
    assert resolve_configuration() is custom


def test_string_and_negative_values_are_clamped_after_coercion() -> None:
    config = configuration_from_dict(
        {
            "smart_detection": {"sample_data_limit": "-2", "auto_apply_threshold": "1.5"},
            "stack": {"max_length": "2"},
            "currency": {"auto_compact_threshold": "-10"},
        }
    )

    assert config.smart_detection.sample_data_limit == 1
    assert config.smart_detection.auto_apply_threshold == 1.0
    assert config.stack.max_length == 4
    assert config.currency.auto_compact_threshold == 0


def test_negative_sample_limit_still_classifies_from_first_sample() -> None:
    config = TemplateConfigurationBuilder().with_smart_detection(sample_data_limit=-2).build()

    assert config.smart_detection.sample_data_limit == 1
    suggestion = create_suggestion(FieldDescriptor(name="notes"), ["x" * 40, "y" * 40], config)
    assert suggestion.kind == TemplateKind.STACK


def test_status_mapping_is_read_only() -> None:
    config = TemplateConfiguration()

    with pytest.raises(TypeError):
        config.badge.status_mapping["xyz"] = Variant.ERROR  # type: ignore[index]

    assert "xyz" not in config.badge.status_mapping
    assert config.badge.model_dump()["status_mapping"]["active"] == Variant.SUCCESS
