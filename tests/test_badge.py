"""Tests for the badge template."""

from __future__ import annotations

from fieldview.configuration import TemplateConfigurationBuilder, configure_templates
from fieldview.enums import Size, Variant
from fieldview.templates import BadgeTemplate, field_accessor


def test_status_mapping_picks_variant(orders) -> None:
    badge = BadgeTemplate(value=field_accessor("status"))

    node = badge.render(orders[0])

    assert node.tag == "span"
    assert node.has_class("badge")
    assert node.has_class("badge-success")
    assert node.has_class("badge-sm")
    assert node.attributes["data-template"] == "badge"
    assert node.first_by_class("badge-text").text() == "Active"


def test_unmapped_text_uses_static_variant(orders) -> None:
    assert BadgeTemplate(value=field_accessor("status")).render(orders[2]).has_class("badge-primary")
    badge = BadgeTemplate(value=field_accessor("status"), variant=Variant.INFO)
    assert badge.render(orders[2]).has_class("badge-info")


def test_variant_selector_overrides_mapping(orders) -> None:
    badge = BadgeTemplate(value=field_accessor("status"), variant_selector=lambda item: "danger")

    assert badge.render(orders[0]).has_class("badge-error")


def test_text_accessor_and_icon() -> None:
    badge = BadgeTemplate(
        value=lambda item: item["code"],
        text=lambda item: item["label"],
        icon=lambda item: "flag",
    )

    node = badge.render({"code": "P1", "label": "Pending"})

    assert node.has_class("badge-warning")
    assert node.first_by_class("badge-icon").text() == "flag"
    assert node.text() == "flagPending"


def test_configured_defaults_apply_to_unset_fields() -> None:
    configure_templates(
        TemplateConfigurationBuilder()
        .with_badge_defaults(default_variant="secondary", default_size="large", default_clickable=True)
        .with_status_mapping({"Shipped": "info"})
        .build()
    )

    badge = BadgeTemplate(value=field_accessor("status"))

    assert badge.size == Size.LARGE
    node = badge.render({"status": "SHIPPED"})
    assert node.has_class("badge-info")
    assert node.has_class("badge-lg")
    assert node.attributes["role"] == "button"
    assert BadgeTemplate(value=field_accessor("status")).render({"status": "x"}).has_class("badge-secondary")


def test_click_passes_item() -> None:
    clicked = []
    badge = BadgeTemplate(value=field_accessor("status"), clickable=True, on_click=clicked.append)
    item = {"status": "active"}

    badge.render(item).trigger("click")

    assert clicked == [item]


def test_none_item_renders_nothing() -> None:
    assert BadgeTemplate(value=field_accessor("status")).render(None) is None
