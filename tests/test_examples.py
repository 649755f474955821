"""Tests for usage snippet synthesis."""

from __future__ import annotations

from compdoc.constants import ZH
from compdoc.examples import example_value, synthesize_example
from compdoc.models import PropertyDescriptor


def _prop(name: str, type_: str, *, required: bool = False, default: str | None = None) -> PropertyDescriptor:
    return PropertyDescriptor(name=name, type=type_, required=required, default=default)


def test_no_properties_renders_self_closing_tag() -> None:
    assert synthesize_example("Divider", []) == "<Divider />"


def test_name_heuristics_pick_literals() -> None:
    props = [_prop("size", "number", required=True), _prop("color", "string")]

    assert synthesize_example("X", props) == '<X size=24 color="#42b883" />'


def test_optional_properties_with_defaults_are_skipped() -> None:
    props = [
        _prop("type", "String", default="primary"),
        _prop("label", "String", required=True, default="Go"),
    ]

    assert synthesize_example("Button", props) == '<Button label="label content" />'


def test_more_than_three_attributes_go_one_per_line() -> None:
    props = [
        _prop("title", "string"),
        _prop("count", "number"),
        _prop("visible", "boolean"),
        _prop("tags", "string[]"),
    ]

    assert synthesize_example("Panel", props) == (
        "<Panel\n"
        '  title="Example title"\n'
        "  count=42\n"
        "  visible=true\n"
        '  tags="tags content"\n'
        "/>"
    )


def test_slot_wraps_placeholder_content() -> None:
    assert synthesize_example("Card", [], True) == "<Card>\n  Content\n</Card>"


def test_slot_with_multiline_attributes() -> None:
    props = [_prop(name, "boolean") for name in ("a", "b", "c", "d")]

    assert synthesize_example("Box", props, True) == (
        "<Box\n  a=true\n  b=true\n  c=true\n  d=true\n>\n  Content\n</Box>"
    )


def test_value_rules_follow_type_order() -> None:
    assert example_value(_prop("message", "String")) == '"This is a message"'
    assert example_value(_prop("max", "Number")) == "100"
    assert example_value(_prop("min", "number")) == "0"
    assert example_value(_prop("step", "number")) == "42"
    assert example_value(_prop("items", "Array")) == "[]"
    assert example_value(_prop("ids", "number[]")) == "42"
    assert example_value(_prop("options", "Object")) == "{}"
    assert example_value(_prop("onClick", "Function")) == '"onClick value"'


def test_locale_changes_placeholder_literals() -> None:
    assert example_value(_prop("title", "string"), ZH) == '"示例title"'
    assert synthesize_example("Card", [], True, locale=ZH) == "<Card>\n  内容\n</Card>"
