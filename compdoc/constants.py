"""Shared constants for rendered documentation text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

CATEGORY_ORDER: tuple[str, ...] = (
    "Base",
    "Navigation",
    "Form",
    "DataDisplay",
    "Feedback",
    "Layout",
    "Example",
)

FALLBACK_CATEGORY = "Example"


@dataclass(frozen=True)
class Locale:
    """All human-facing strings used in generated documents."""

    code: str
    example_title: str
    props_title: str
    template_title: str
    style_title: str
    props_headers: Tuple[str, str, str, str, str]
    style_intro: str
    template_placeholder: str
    named_value: str
    message_value: str
    string_value: str
    other_value: str
    slot_content: str
    index_title: str
    index_intro: str
    category_titles: Dict[str, str]
    principles_title: str
    principles: Tuple[str, ...]


EN = Locale(
    code="en",
    example_title="Example",
    props_title="Props",
    template_title="Template",
    style_title="Style",
    props_headers=("Name", "Type", "Required", "Default", "Description"),
    style_intro="The component uses {lang} styles.",
    template_placeholder="<!-- nested content omitted -->",
    named_value="Example {name}",
    message_value="This is a message",
    string_value="{name} content",
    other_value="{name} value",
    slot_content="Content",
    index_title="Components",
    index_intro="Reference pages for every documented component, grouped by purpose.",
    category_titles={
        "Base": "Base",
        "Navigation": "Navigation",
        "Form": "Form",
        "DataDisplay": "Data Display",
        "Feedback": "Feedback",
        "Layout": "Layout",
        "Example": "Examples",
    },
    principles_title="Design Principles",
    principles=(
        "**Consistency**: components share naming, sizing and colour conventions.",
        "**Feedback**: every interaction gives the user a clear response.",
        "**Efficiency**: sensible defaults keep common usage short.",
        "**Controllability**: behaviour is driven by explicit props, never hidden state.",
    ),
)

ZH = Locale(
    code="zh",
    example_title="示例",
    props_title="Props",
    template_title="模板",
    style_title="样式",
    props_headers=("名称", "类型", "必填", "默认值", "描述"),
    style_intro="组件使用 {lang} 样式。",
    template_placeholder="<!-- 嵌套内容已省略 -->",
    named_value="示例{name}",
    message_value="这是一条消息",
    string_value="{name}内容",
    other_value="{name}值",
    slot_content="内容",
    index_title="组件",
    index_intro="所有已生成文档的组件，按用途分类。",
    category_titles={
        "Base": "基础组件",
        "Navigation": "导航组件",
        "Form": "表单组件",
        "DataDisplay": "数据展示",
        "Feedback": "反馈组件",
        "Layout": "布局组件",
        "Example": "示例组件",
    },
    principles_title="设计原则",
    principles=(
        "**一致性**：组件遵循统一的命名、尺寸与配色规范。",
        "**反馈**：每一次交互都给予用户明确的反馈。",
        "**效率**：合理的默认值让常见用法保持简洁。",
        "**可控**：行为由显式的 props 决定，而非隐藏状态。",
    ),
)

LOCALES: Dict[str, Locale] = {"en": EN, "zh": ZH}


def get_locale(code: str | None) -> Locale:
    """Return the locale for ``code``, defaulting to English."""
    return LOCALES.get((code or "en").lower(), EN)


__all__ = ["CATEGORY_ORDER", "EN", "FALLBACK_CATEGORY", "LOCALES", "Locale", "ZH", "get_locale"]
