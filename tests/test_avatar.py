"""Tests for the avatar template."""

from __future__ import annotations

import pytest

from fieldview.enums import Variant
from fieldview.templates import AvatarTemplate, field_accessor
from fieldview.templates.avatar import consistent_color, generate_initials


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", "?"),
        (None, "?"),
        ("   ", "?"),
        ("Ada", "AD"),
        ("Ada Lovelace", "AL"),
        ("ada  king lovelace", "AL"),
        ("J", "J"),
    ],
)
def test_generate_initials(name, expected: str) -> None:
    assert generate_initials(name) == expected


def test_consistent_color_is_stable() -> None:
    assert consistent_color("Ada Lovelace") == consistent_color("Ada Lovelace")
    assert consistent_color("") == Variant.PRIMARY
    assert consistent_color("Grace Hopper") in list(Variant)


def test_renders_initials_without_image(orders) -> None:
    avatar = AvatarTemplate(display_name=field_accessor("customer.name"))

    node = avatar.render(orders[0])

    assert node.attributes["data-template"] == "avatar"
    assert node.first_by_class("avatar-initials").text() == "AL"
    assert node.first_by_class("avatar").has_class(f"avatar-{consistent_color('Ada Lovelace').value}")


def test_image_takes_precedence() -> None:
    avatar = AvatarTemplate(display_name=field_accessor("name"), image=field_accessor("photo"))

    node = avatar.render({"name": "Ada", "photo": "https://example.com/ada.png"})

    image = node.first_by_class("avatar-image")
    assert image.tag == "img"
    assert image.attributes["src"] == "https://example.com/ada.png"
    assert image.attributes["alt"] == "Ada"
    assert node.first_by_class("avatar-initials") is None


def test_empty_name_shows_question_mark(orders) -> None:
    node = AvatarTemplate(display_name=field_accessor("customer.name")).render(orders[2])

    assert node.first_by_class("avatar-initials").text() == "?"


def test_color_precedence() -> None:
    item = {"name": "Ada", "color": "info"}

    with_accessor = AvatarTemplate(display_name=field_accessor("name"), color=field_accessor("color"))
    with_mapping = AvatarTemplate(display_name=field_accessor("name"), color_mapping={"ada": Variant.ERROR})
    static = AvatarTemplate(display_name=field_accessor("name"), color_variant=Variant.SUCCESS)

    assert with_accessor.build_context(item).color == Variant.INFO
    assert with_mapping.build_context(item).color == Variant.ERROR
    assert with_mapping.build_context({"name": "Bob"}).color == consistent_color("Bob")
    assert static.build_context(item).color == Variant.SUCCESS


def test_unknown_color_falls_back_to_mapping_then_static() -> None:
    item = {"name": "Ada", "color": "bogus"}

    mapped = AvatarTemplate(
        display_name=field_accessor("name"),
        color=field_accessor("color"),
        color_mapping={"ada": Variant.SUCCESS},
    )
    static = AvatarTemplate(
        display_name=field_accessor("name"),
        color=field_accessor("color"),
        color_variant=Variant.INFO,
    )
    derived = AvatarTemplate(display_name=field_accessor("name"), color=field_accessor("color"))

    assert mapped.build_context(item).color == Variant.SUCCESS
    assert static.build_context(item).color == Variant.INFO
    assert derived.build_context(item).color == consistent_color("Ada")


def test_status_and_badge() -> None:
    avatar = AvatarTemplate(
        display_name=field_accessor("name"),
        status=field_accessor("presence"),
        badge=field_accessor("unread"),
    )

    node = avatar.render({"name": "Ada", "presence": "Online", "unread": 3})

    status = node.first_by_class("avatar-status")
    assert status.attributes["data-status"] == "online"
    assert status.attributes["title"] == "Online"
    assert node.first_by_class("avatar-badge").text() == "3"
    assert avatar.render({"name": "Ada", "presence": "dancing"}).first_by_class("avatar-status") is None


def test_click_passes_item() -> None:
    clicked = []
    avatar = AvatarTemplate(display_name=field_accessor("name"), clickable=True, on_click=clicked.append)
    item = {"name": "Ada"}

    avatar.render(item).first_by_class("avatar").trigger("click")

    assert clicked == [item]


def test_group_overflow() -> None:
    avatar = AvatarTemplate(display_name=field_accessor("name"))
    people = [{"name": f"Person {i}"} for i in range(7)]

    group = avatar.render_group(people, max_display=3)

    stacked = group.find_by_class("avatar-stacked")
    assert len(stacked) == 4
    assert stacked[-1].text() == "+4"
    assert group.attributes["data-template"] == "avatar-group"
    assert len(avatar.render_group(people, max_display=3, show_overflow=False).children) == 3
    assert avatar.render_group([]) is None
