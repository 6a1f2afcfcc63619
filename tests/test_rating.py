"""Tests for the rating template."""

from __future__ import annotations

import pytest

from fieldview.enums import Variant
from fieldview.templates import RatingInteractionState, RatingTemplate, RatingType, field_accessor
from fieldview.templates.rating import RatingContext, RatingIcons, color_by_value, default_emoji, render_rating


def _icons(node):
    return [child for child in node.walk() if "data-rating" in child.attributes]


def test_stars_with_half() -> None:
    template = RatingTemplate(value=field_accessor("stars"), allow_half=True)

    node = template.render({"stars": 3.5})

    icons = _icons(node)
    assert [icon.text() for icon in icons] == [
        RatingIcons.STAR_FILLED,
        RatingIcons.STAR_FILLED,
        RatingIcons.STAR_FILLED,
        RatingIcons.STAR_HALF,
        RatingIcons.STAR_EMPTY,
    ]
    assert icons[0].has_class("text-warning")
    assert icons[4].has_class("opacity-25")
    assert icons[0].tag == "span"
    assert icons[4].attributes["title"] == "Excellent"
    assert node.attributes["data-type"] == "stars"


def test_without_half_rounds_down() -> None:
    icons = _icons(RatingTemplate(value=field_accessor("stars")).render({"stars": 3.5}))

    assert icons[3].text() == RatingIcons.STAR_EMPTY


def test_custom_icons_by_position() -> None:
    template = RatingTemplate(
        value=field_accessor("v"),
        type=RatingType.CUSTOM,
        custom_icons={1: "bolt", 3: "rocket"},
    )

    icons = _icons(template.render({"v": 2}))

    assert icons[0].text() == "bolt"
    assert icons[1].text() == RatingIcons.STAR_FILLED
    assert icons[2].text() == "rocket"


def test_color_derived_from_value_for_non_star_types() -> None:
    hearts = RatingTemplate(value=field_accessor("v"), type=RatingType.HEARTS)

    assert hearts.build_context({"v": 4}).color == Variant.SUCCESS
    assert hearts.build_context({"v": 0.5}).color == Variant.ERROR
    assert RatingTemplate(value=field_accessor("v")).build_context({"v": 1}).color == Variant.WARNING
    explicit = RatingTemplate(value=field_accessor("v"), type=RatingType.BAR, color_variant=Variant.INFO)
    assert explicit.build_context({"v": 5}).color == Variant.INFO


@pytest.mark.parametrize(
    "value, variant",
    [(0, Variant.ERROR), (1.5, Variant.WARNING), (2.5, Variant.INFO), (3.5, Variant.PRIMARY), (4, Variant.SUCCESS)],
)
def test_color_by_value(value, variant: Variant) -> None:
    assert color_by_value(value, 5) == variant


def test_emoji_defaults_depend_on_position_only() -> None:
    assert [default_emoji(i, 5) for i in range(1, 6)] == [
        RatingIcons.EMOJI_VERY_BAD,
        RatingIcons.EMOJI_BAD,
        RatingIcons.EMOJI_NEUTRAL,
        RatingIcons.EMOJI_GOOD,
        RatingIcons.EMOJI_VERY_GOOD,
    ]
    template = RatingTemplate(value=field_accessor("v"), type=RatingType.EMOJI)

    low = [icon.text() for icon in _icons(template.render({"v": 1}))]
    high = [icon.text() for icon in _icons(template.render({"v": 5}))]

    assert low == high == [default_emoji(i, 5) for i in range(1, 6)]


def test_emoji_highlights_rounded_value() -> None:
    template = RatingTemplate(value=field_accessor("v"), type=RatingType.EMOJI)

    icons = _icons(template.render({"v": 3.4}))

    assert [icon.has_class("text-primary") for icon in icons] == [False, False, True, False, False]


def test_thumbs_emit_one_and_zero() -> None:
    changes = []
    template = RatingTemplate(
        value=field_accessor("v"),
        type=RatingType.THUMBS,
        interactive=True,
        on_value_changed=lambda item, value: changes.append((item["id"], value)),
    )

    node = template.render({"id": 7, "v": 1})
    up, down = _icons(node)

    assert up.tag == "button"
    assert up.has_class("text-success")
    assert up.text() == RatingIcons.THUMB_UP
    assert down.text() == RatingIcons.THUMB_DOWN_OUTLINE
    up.trigger("click")
    down.trigger("click")
    assert changes == [(7, 1), (7, 0)]


def test_interactive_stars_report_position() -> None:
    changes = []
    template = RatingTemplate(
        value=field_accessor("v"),
        interactive=True,
        on_value_changed=lambda item, value: changes.append(value),
    )

    _icons(template.render({"v": 0}))[3].trigger("click")

    assert changes == [4]


def test_non_interactive_has_no_events() -> None:
    template = RatingTemplate(value=field_accessor("v"), on_value_changed=lambda item, value: None)

    assert all(not icon.events for icon in _icons(template.render({"v": 2})))


def test_hover_state_is_kept_per_item() -> None:
    state = RatingInteractionState()
    template = RatingTemplate(value=field_accessor("v"), item_key=field_accessor("id"), interactive=True)
    first = {"id": 1, "v": 1}
    second = {"id": 2, "v": 1}

    _icons(template.render(first, state=state))[3].trigger("mouseover")

    hovered = _icons(template.render(first, state=state))
    other = _icons(template.render(second, state=state))
    assert [icon.text() for icon in hovered].count(RatingIcons.STAR_FILLED) == 4
    assert [icon.text() for icon in other].count(RatingIcons.STAR_FILLED) == 1
    assert len(state) == 1

    hovered[0].trigger("mouseout")
    assert len(state) == 0
    assert [icon.text() for icon in _icons(template.render(first, state=state))].count(RatingIcons.STAR_FILLED) == 1


def test_hover_state_needs_item_key() -> None:
    template = RatingTemplate(value=field_accessor("v"), interactive=True)

    with pytest.raises(ValueError, match="item_key"):
        template.render({"v": 1}, state=RatingInteractionState())


def test_hover_ignored_when_not_interactive() -> None:
    template = RatingTemplate(value=field_accessor("v"))

    icons = _icons(template.render({"v": 1}, hover_value=5))

    assert [icon.text() for icon in icons].count(RatingIcons.STAR_FILLED) == 1


def test_numeric_and_bar() -> None:
    numeric = RatingTemplate(value=field_accessor("v"), type=RatingType.NUMERIC).render({"v": 3.7})
    bar = RatingTemplate(value=field_accessor("v"), type=RatingType.BAR, show_value=True).render({"v": 2.5})

    assert numeric.first_by_class("rating-numeric").text() == "4 / 5"
    assert bar.first_by_class("rating-bar-fill").attributes["style"] == "width: 50%;"
    assert bar.first_by_class("rating-bar-value").text() == "2.5/5"


def test_additional_info() -> None:
    template = RatingTemplate(
        value=field_accessor("v"),
        count=field_accessor("reviews"),
        label=lambda item: "Overall",
        show_value=True,
        show_count=True,
    )

    info = template.render({"v": 4.25, "reviews": 12}).first_by_class("rating-info")

    assert info.first_by_class("rating-value").text() == "4.3"
    assert info.first_by_class("rating-count").text() == "(12)"
    assert info.first_by_class("rating-label").text() == "Overall"
    assert RatingTemplate(value=field_accessor("v")).render({"v": 1}).first_by_class("rating-info") is None


def test_emoji_renderer_without_custom_icons_uses_position_defaults() -> None:
    context = RatingContext(type=RatingType.EMOJI, value=2, max_rating=5, custom_icons={})

    icons = _icons(render_rating(context))

    assert [icon.text() for icon in icons] == [default_emoji(i, 5) for i in range(1, 6)]
