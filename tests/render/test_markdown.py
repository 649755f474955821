"""Tests for the component document renderer."""

from __future__ import annotations

import pytest

from compdoc.constants import ZH
from compdoc.models import ComponentMetadata, PropertyDescriptor, StyleBlock
from compdoc.render import DocRenderer, style_fence_language
from compdoc.stores.docs import parse_description


@pytest.fixture
def button() -> ComponentMetadata:
    return ComponentMetadata(
        name="Button",
        description="A button.",
        properties=[
            PropertyDescriptor(name="type", type="String", default="primary", description="Visual style"),
            PropertyDescriptor(name="label", type="String", required=True),
        ],
        template="<button>\n  <slot />\n</button>",
        styles=[StyleBlock(content=".btn { color: red; }", lang="scss", attrs='scoped lang="scss"')],
        example='<Button label="label content">\n  Content\n</Button>',
    )


def test_render_emits_sections_in_fixed_order(button: ComponentMetadata) -> None:
    markdown = DocRenderer().render(button)

    assert markdown == (
        "# Button\n"
        "\n"
        "A button.\n"
        "\n"
        "## Example\n"
        "\n"
        "```vue\n"
        '<Button label="label content">\n'
        "  Content\n"
        "</Button>\n"
        "```\n"
        "\n"
        "## Props\n"
        "\n"
        "| Name | Type | Required | Default | Description |\n"
        "|------|------|:------:|------|------|\n"
        "| type | `String` |  | primary | Visual style |\n"
        "| label | `String` | ✓ | - | - |\n"
        "\n"
        "## Template\n"
        "\n"
        "```vue\n"
        "<template>\n"
        "  <button>\n"
        "    <slot />\n"
        "  </button>\n"
        "</template>\n"
        "```\n"
        "\n"
        "## Style\n"
        "\n"
        'The component uses scoped lang="scss" styles.\n'
        "\n"
        "```scss\n"
        ".btn { color: red; }\n"
        "```\n"
    )


def test_render_is_idempotent_with_stored_description(button: ComponentMetadata) -> None:
    renderer = DocRenderer()
    first = renderer.render(button)

    second = renderer.render(button, parse_description(first))

    assert second == first


def test_existing_description_wins(button: ComponentMetadata) -> None:
    markdown = DocRenderer().render(button, "Custom text")

    assert "Custom text" in markdown
    assert "A button." not in markdown


def test_empty_sections_are_omitted() -> None:
    metadata = ComponentMetadata(name="Spacer", example="<Spacer />")

    markdown = DocRenderer().render(metadata)

    assert markdown == "# Spacer\n\n## Example\n\n```vue\n<Spacer />\n```\n"


def test_table_cells_escape_pipes() -> None:
    metadata = ComponentMetadata(
        name="Tag",
        properties=[PropertyDescriptor(name="kind", type="'a' | 'b'", description="one | two")],
        example="<Tag />",
    )

    markdown = DocRenderer().render(metadata)

    assert "| kind | `'a' \\| 'b'` |  | - | one \\| two |" in markdown


def test_locale_headings() -> None:
    metadata = ComponentMetadata(
        name="Tag",
        properties=[PropertyDescriptor(name="kind", type="string")],
        template="<span />",
        styles=[StyleBlock(content=".tag {}")],
        example="<Tag />",
    )

    markdown = DocRenderer(ZH).render(metadata)

    assert "## 示例" in markdown
    assert "| 名称 | 类型 | 必填 | 默认值 | 描述 |" in markdown
    assert "## 模板" in markdown
    assert "组件使用 CSS 样式。" in markdown


def test_style_fence_language() -> None:
    assert style_fence_language(StyleBlock(content="", attrs="scoped")) == "css"
    assert style_fence_language(StyleBlock(content="", lang="less", attrs='lang="less"')) == "less"
    assert style_fence_language(StyleBlock(content="", lang="stylus")) == "stylus"
