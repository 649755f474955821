"""Split a component-definition file into behaviour, template and style zones."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

_SCRIPT_RE = re.compile(r"<script\b([^>]*)>(.*?)</script\s*>", re.DOTALL | re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b([^>]*)>(.*?)</style\s*>", re.DOTALL | re.IGNORECASE)
_TEMPLATE_TAG_RE = re.compile(r"<(/?)template\b[^>]*?(/?)>", re.IGNORECASE)
_LANG_RE = re.compile(r"""\blang\s*=\s*["']?([\w-]+)""", re.IGNORECASE)


@dataclass(frozen=True)
class StyleZone:
    """Raw style zone: the opening-tag attributes and the body."""

    attrs: str
    content: str

    @property
    def lang(self) -> Optional[str]:
        match = _LANG_RE.search(self.attrs)
        return match.group(1).lower() if match else None


@dataclass(frozen=True)
class SourceZones:
    """The three opaque regions of one component-definition file."""

    script: str = ""
    template: str = ""
    styles: Tuple[StyleZone, ...] = field(default_factory=tuple)
    script_attrs: str = ""


def split_zones(text: str) -> SourceZones:
    """Locate the first script zone, the outermost template and every style zone.

    Missing zones come back empty rather than raising.
    """
    script_match = _SCRIPT_RE.search(text)
    script = script_match.group(2) if script_match else ""
    script_attrs = script_match.group(1).strip() if script_match else ""

    masked = text
    if script_match:
        # @example blocks in the script often contain their own <template> markup.
        start, end = script_match.span()
        masked = text[:start] + " " * (end - start) + text[end:]
    template = _outer_template(masked)

    styles: List[StyleZone] = [
        StyleZone(attrs=match.group(1).strip(), content=match.group(2))
        for match in _STYLE_RE.finditer(text)
    ]
    return SourceZones(
        script=script,
        template=template,
        styles=tuple(styles),
        script_attrs=script_attrs,
    )


def _outer_template(text: str) -> str:
    depth = 0
    body_start: Optional[int] = None
    for match in _TEMPLATE_TAG_RE.finditer(text):
        closing, self_closing = match.group(1), match.group(2)
        if self_closing:
            continue
        if not closing:
            if depth == 0:
                body_start = match.end()
            depth += 1
            continue
        if depth == 0:
            continue
        depth -= 1
        if depth == 0 and body_start is not None:
            return text[body_start : match.start()]
    return ""


__all__ = ["SourceZones", "StyleZone", "split_zones"]
