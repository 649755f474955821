"""Markdown rendering for component metadata."""

from __future__ import annotations

from typing import List, Optional

from ..constants import EN, Locale
from ..models import ComponentMetadata, PropertyDescriptor, StyleBlock
from ..postproc.lint import MarkdownLinter

_PREPROCESSORS: tuple[str, ...] = ("scss", "sass", "less", "stylus")


class DocRenderer:
    """Turns ``ComponentMetadata`` into a canonical Markdown page.

    Sections always appear in the same order: title, description, example,
    props table, template and style. Empty sections are omitted and nothing
    time- or order-dependent is emitted, so identical input renders to
    identical bytes.
    """

    def __init__(
        self,
        locale: Locale = EN,
        *,
        code_language: str = "vue",
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.locale = locale
        self.code_language = code_language
        self.linter = linter or MarkdownLinter()

    def render(self, metadata: ComponentMetadata, existing_description: Optional[str] = None) -> str:
        description = existing_description if existing_description and existing_description.strip() else metadata.description

        lines: List[str] = [f"# {metadata.name}", ""]
        if description and description.strip():
            lines.extend([description.strip(), ""])

        lines.extend(self._example_section(metadata.example))
        if metadata.properties:
            lines.extend(self._props_section(metadata.properties))
        if metadata.template.strip():
            lines.extend(self._template_section(metadata.template))
        if metadata.styles:
            lines.extend(self._style_section(metadata.styles))

        return self.linter.lint("\n".join(lines))

    # ------------------------------------------------------------------
    # Sections

    def _example_section(self, example: str) -> List[str]:
        return [
            f"## {self.locale.example_title}",
            "",
            f"```{self.code_language}",
            example.strip(),
            "```",
            "",
        ]

    def _props_section(self, properties: List[PropertyDescriptor]) -> List[str]:
        headers = self.locale.props_headers
        lines = [
            f"## {self.locale.props_title}",
            "",
            "| " + " | ".join(headers) + " |",
            "|------|------|:------:|------|------|",
        ]
        for prop in properties:
            cells = [
                _cell(prop.name),
                f"`{_cell(prop.type)}`" if prop.type else "-",
                "✓" if prop.required else "",
                _cell(prop.default) if prop.default else "-",
                _cell(prop.description) if prop.description else "-",
            ]
            lines.append("| " + " | ".join(cells) + " |")
        lines.append("")
        return lines

    def _template_section(self, template: str) -> List[str]:
        body = [f"  {line}" if line.strip() else "" for line in template.strip().splitlines()]
        return [
            f"## {self.locale.template_title}",
            "",
            f"```{self.code_language}",
            "<template>",
            *body,
            "</template>",
            "```",
            "",
        ]

    def _style_section(self, styles: List[StyleBlock]) -> List[str]:
        lines = [f"## {self.locale.style_title}", ""]
        for style in styles:
            label = style.attrs.strip() or "CSS"
            lines.extend(
                [
                    self.locale.style_intro.format(lang=label),
                    "",
                    f"```{style_fence_language(style)}",
                    style.content.strip(),
                    "```",
                    "",
                ]
            )
        return lines


def style_fence_language(style: StyleBlock) -> str:
    """Fence language for a style block: a named preprocessor, else ``css``."""
    tag = f"{style.lang} {style.attrs}".lower()
    for preprocessor in _PREPROCESSORS:
        if preprocessor in tag:
            return preprocessor
    return "css"


def _cell(value: str) -> str:
    return " ".join(value.split()).replace("|", "\\|")


__all__ = ["DocRenderer", "style_fence_language"]
