"""Shared text helpers for extractor implementations."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

_OPENERS = {"{": "}", "[": "]", "(": ")"}
_CLOSERS = {"}", "]", ")"}
_QUOTES = {"'", '"', "`"}

_COMMENT_PREFIX_RE = re.compile(r"^\s*\*(?!/)\s?")
_WHITESPACE_RE = re.compile(r"\s+")


# Bracket and string aware scanning


def _skip_string(text: str, index: int) -> int:
    """Return the index just past the string literal starting at ``index``."""
    quote = text[index]
    position = index + 1
    while position < len(text):
        char = text[position]
        if char == "\\":
            position += 2
            continue
        if char == quote:
            return position + 1
        if char == "\n" and quote != "`":
            return position
        position += 1
    return len(text)


def _skip_comment(text: str, index: int) -> int:
    """Return the index just past a comment starting at ``index`` (or ``index`` when none)."""
    if text.startswith("//", index):
        end = text.find("\n", index)
        return len(text) if end == -1 else end
    if text.startswith("/*", index):
        end = text.find("*/", index + 2)
        return len(text) if end == -1 else end + 2
    return index


def balanced_block(text: str, open_index: int) -> Optional[Tuple[str, int]]:
    """Return the body of the bracket pair opening at ``open_index`` and the index after it.

    Strings and comments are skipped so brackets inside them do not count.
    Returns ``None`` when the opening bracket is never closed.
    """
    if open_index >= len(text) or text[open_index] not in _OPENERS:
        return None
    stack = [_OPENERS[text[open_index]]]
    position = open_index + 1
    while position < len(text):
        char = text[position]
        if char in _QUOTES:
            position = _skip_string(text, position)
            continue
        skipped = _skip_comment(text, position)
        if skipped != position:
            position = skipped
            continue
        if char in _OPENERS:
            stack.append(_OPENERS[char])
        elif char in _CLOSERS:
            if char != stack[-1]:
                return None
            stack.pop()
            if not stack:
                return text[open_index + 1 : position], position + 1
        position += 1
    return None


def split_top_level(text: str, separator: str = ",") -> List[Tuple[int, str]]:
    """Split ``text`` on ``separator`` at bracket depth zero.

    Returns ``(offset, segment)`` pairs so callers can map positions back to
    the original text. Empty or whitespace-only segments are dropped.
    """
    segments: List[Tuple[int, str]] = []
    depth = 0
    start = 0
    position = 0
    while position < len(text):
        char = text[position]
        if char in _QUOTES:
            position = _skip_string(text, position)
            continue
        skipped = _skip_comment(text, position)
        if skipped != position:
            position = skipped
            continue
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            segments.append((start, text[start:position]))
            start = position + 1
        position += 1
    segments.append((start, text[start:]))
    return [(offset, segment) for offset, segment in segments if segment.strip()]


def brace_delta(line: str) -> int:
    """Net ``{``/``}`` count of a single line, ignoring strings and comments."""
    delta = 0
    position = 0
    while position < len(line):
        char = line[position]
        if char in _QUOTES:
            position = _skip_string(line, position)
            continue
        skipped = _skip_comment(line, position)
        if skipped != position:
            position = skipped
            continue
        if char == "{":
            delta += 1
        elif char == "}":
            delta -= 1
        position += 1
    return delta


# Documentation comments


def strip_comment_prefix(text: str) -> str:
    """Remove leading ``*`` decoration when every non-empty line carries it."""
    lines = text.splitlines()
    content = [line for line in lines if line.strip()]
    if not content or not all(_COMMENT_PREFIX_RE.match(line) for line in content):
        return text
    return "\n".join(_COMMENT_PREFIX_RE.sub("", line, count=1) for line in lines)


def clean_doc_comment(body: str) -> str:
    """Flatten a doc-comment body to single-spaced prose without trailing tags."""
    kept: List[str] = []
    for raw in body.splitlines():
        line = _COMMENT_PREFIX_RE.sub("", raw, count=1).strip()
        if line.startswith("@"):
            break
        kept.append(line)
    return _WHITESPACE_RE.sub(" ", " ".join(kept)).strip()


def doc_comment_tag(body: str, tag: str) -> Optional[str]:
    """Return the single-line value of ``@tag`` inside a doc-comment body."""
    pattern = re.compile(rf"@{re.escape(tag)}\b[ \t]*(.*)")
    for raw in body.splitlines():
        line = _COMMENT_PREFIX_RE.sub("", raw, count=1).strip()
        match = pattern.match(line)
        if match:
            value = match.group(1).strip().rstrip("*/").strip()
            return value or None
    return None


def preceding_doc_comment(text: str, position: int) -> Optional[str]:
    """Return the raw body of a ``/** */`` block ending right before ``position``."""
    head = text[:position].rstrip()
    if not head.endswith("*/"):
        return None
    opening = head.rfind("/**")
    if opening == -1:
        return None
    body = head[opening + 3 : -2]
    if "*/" in body:
        return None
    return body


def unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


__all__ = [
    "balanced_block",
    "brace_delta",
    "clean_doc_comment",
    "doc_comment_tag",
    "preceding_doc_comment",
    "split_top_level",
    "strip_comment_prefix",
    "unquote",
]
