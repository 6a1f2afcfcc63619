"""Tests for the stack template."""

from __future__ import annotations

from fieldview.configuration import TemplateConfigurationBuilder
from fieldview.enums import Orientation
from fieldview.templates import StackTemplate, field_accessor
from fieldview.templates.stack import truncate_text


def test_truncate_text() -> None:
    text = "x" * 60

    truncated = truncate_text(text, True, 50)

    assert len(truncated) == 50
    assert truncated.endswith("...")
    assert truncate_text("x" * 50, True, 50) == "x" * 50
    assert truncate_text(text, False, 50) == text
    assert truncate_text(None, True, 50) is None


def test_renders_lines_in_order() -> None:
    stack = StackTemplate(
        primary=field_accessor("name"),
        secondary=field_accessor("email"),
        tertiary=field_accessor("team.name"),
        icon=lambda item: "person",
    )

    node = stack.render({"name": "Ada", "email": "ada@example.com", "team": {"name": "Engines"}})

    lines = [child for child in node.walk() if "data-level" in child.attributes]
    assert [line.attributes["data-level"] for line in lines] == ["primary", "secondary", "tertiary"]
    assert [line.text() for line in lines] == ["Ada", "ada@example.com", "Engines"]
    assert node.attributes["data-template"] == "stack"
    assert node.has_class("flex-col")


def test_missing_lines_are_omitted() -> None:
    stack = StackTemplate(primary=field_accessor("name"), secondary=field_accessor("email"))

    node = stack.render({"name": "Ada"})

    assert len(node.first_by_class("stack-content").children) == 1


def test_long_lines_are_truncated_everywhere() -> None:
    stack = StackTemplate(primary=field_accessor("a"), secondary=field_accessor("b"))

    node = stack.render({"a": "p" * 60, "b": "s" * 80})

    assert node.first_by_class("stack-primary").text() == "p" * 47 + "..."
    assert node.first_by_class("stack-secondary").text() == "s" * 47 + "..."


def test_configured_stack_defaults() -> None:
    config = (
        TemplateConfigurationBuilder()
        .with_stack_defaults(orientation="horizontal", max_length=10)
        .build()
    )

    stack = StackTemplate(primary=field_accessor("a"), config=config)
    node = stack.render({"a": "abcdefghijklmnop"})

    assert stack.orientation == Orientation.HORIZONTAL
    assert node.attributes["data-orientation"] == "horizontal"
    assert node.first_by_class("stack-primary").text() == "abcdefg..."


def test_explicit_fields_win_over_configuration() -> None:
    stack = StackTemplate(primary=field_accessor("a"), truncate_text=False)

    assert stack.render({"a": "z" * 80}).first_by_class("stack-primary").text() == "z" * 80


def test_short_max_length_is_raised_to_fit_the_ellipsis() -> None:
    stack = StackTemplate(primary=field_accessor("a"), max_length=2)

    assert stack.max_length == 4
    assert stack.render({"a": "abcdefgh"}).first_by_class("stack-primary").text() == "a..."
