"""Template excerpt and style zone rules."""

from __future__ import annotations

import re
import textwrap
from typing import List, Optional, Sequence, Tuple

from ..models import StyleBlock
from .zones import StyleZone

EXCERPT_LIMIT = 100
DEFAULT_PLACEHOLDER = "<!-- nested content omitted -->"

_TOKEN_RE = re.compile(
    r"""<!--.*?-->|<(/?)([A-Za-z][\w.:-]*)((?:"[^"]*"|'[^']*'|[^'">])*)>""",
    re.DOTALL,
)
_VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def excerpt_template(
    template: str,
    *,
    limit: int = EXCERPT_LIMIT,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """Dedent the template and collapse oversized children of its top-level elements."""
    text = textwrap.dedent(template).strip()
    if not text:
        return ""
    spans = [(start, end) for start, end in _child_spans(text) if end - start > limit]
    for start, end in reversed(spans):
        text = text[:start] + placeholder + text[end:]
    return text


def has_slot(template: str) -> bool:
    """True when the template accepts injected child content."""
    return "<slot" in template


def extract_styles(zones: Sequence[StyleZone]) -> List[StyleBlock]:
    """Pair each trimmed style body with its declared language (``css`` when absent)."""
    return [
        StyleBlock(content=zone.content.strip(), lang=zone.lang or "css", attrs=zone.attrs)
        for zone in zones
    ]


def _child_spans(text: str) -> List[Tuple[int, int]]:
    """Spans of elements nested exactly one level below a top-level element."""
    spans: List[Tuple[int, int]] = []
    stack: List[str] = []
    child_start: Optional[int] = None

    for match in _TOKEN_RE.finditer(text):
        name = match.group(2)
        if name is None:
            continue
        closing = match.group(1) == "/"
        self_closing = match.group(3).rstrip().endswith("/") or name in _VOID_ELEMENTS

        if closing:
            if name not in stack:
                continue
            while stack and stack.pop() != name:
                pass
            if len(stack) == 1 and child_start is not None:
                spans.append((child_start, match.end()))
                child_start = None
            elif not stack:
                child_start = None
            continue

        if len(stack) == 1:
            if self_closing:
                spans.append((match.start(), match.end()))
                continue
            child_start = match.start()
        if not self_closing:
            stack.append(name)
    return spans


__all__ = ["DEFAULT_PLACEHOLDER", "EXCERPT_LIMIT", "excerpt_template", "extract_styles", "has_slot"]
