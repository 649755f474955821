"""Name, description and example rules over the behaviour zone."""

from __future__ import annotations

import re
from typing import Optional

from .utils import balanced_block, clean_doc_comment, split_top_level, strip_comment_prefix

_NAME_RE = re.compile(r"""\bname\s*:\s*(['"])([^'"]+)\1""")
_OPTIONS_RE = re.compile(r"(?:export\s+default\s*(?:defineComponent\s*\(\s*)?|defineOptions\s*\(\s*)\{")
_DESCRIPTION_RE = re.compile(r"/\*\*[ \t]*\r?\n(.*?)\*/", re.DOTALL)
_EXAMPLE_RE = re.compile(r"@example\b[^\n`]*\n?(?:[ \t]*\*?[ \t]*)```[\w-]*[ \t]*\r?\n?(.*?)```", re.DOTALL)


def resolve_name(script: str, fallback: str) -> str:
    """Return the declared ``name: '...'`` or the caller-supplied fallback.

    A declaration at the top level of ``export default {}`` or
    ``defineOptions({})`` is preferred; otherwise the first ``name:`` with a
    quoted value anywhere in the zone is used.
    """
    options = _OPTIONS_RE.search(script)
    if options:
        block = balanced_block(script, options.end() - 1)
        if block is not None:
            for _, segment in split_top_level(block[0]):
                match = _NAME_RE.match(segment.strip())
                if match and match.group(2).strip():
                    return match.group(2).strip()
    match = _NAME_RE.search(script)
    if match and match.group(2).strip():
        return match.group(2).strip()
    return fallback


def resolve_description(script: str) -> str:
    """Flatten the first multi-line doc comment in the behaviour zone."""
    match = _DESCRIPTION_RE.search(script)
    if not match:
        return ""
    return clean_doc_comment(match.group(1))


def resolve_example(script: str) -> Optional[str]:
    """Return the fenced block following an ``@example`` tag, verbatim but trimmed."""
    match = _EXAMPLE_RE.search(script)
    if not match:
        return None
    body = strip_comment_prefix(match.group(1).rstrip(" \t*"))
    example = body.strip()
    return example or None


__all__ = ["resolve_description", "resolve_example", "resolve_name"]
