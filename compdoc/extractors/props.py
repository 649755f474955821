"""Property declaration strategies and the policy that combines their results."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..models import PropertyDescriptor
from .utils import (
    balanced_block,
    brace_delta,
    clean_doc_comment,
    doc_comment_tag,
    preceding_doc_comment,
    split_top_level,
    unquote,
)

_OPTIONS_BLOCK_RE = re.compile(r"(?:\bprops\s*:\s*|\bdefineProps\s*(?:<[^>]*>)?\s*\(\s*)\{")
_OPTIONS_ENTRY_RE = re.compile(r"""(['"]?)([A-Za-z_$][\w$-]*)\1\s*:\s*""")
_LEADING_COMMENTS_RE = re.compile(r"\A(?:\s*(?:/\*.*?\*/|//[^\n]*))*\s*", re.DOTALL)
_OPTION_KEY_RE = re.compile(r"(type|default|required)\b\s*(?::\s*|(?=\())")

_INTERFACE_RE = re.compile(
    r"\b(?:interface\s+((?:[A-Za-z_$][\w$]*)?Props)\b[^{;]*|type\s+((?:[A-Za-z_$][\w$]*)?Props)\s*=\s*)\{"
)
_INTERFACE_ENTRY_RE = re.compile(
    r"^(?:readonly\s+)?([A-Za-z_$][\w$]*)(\?)?\s*:\s*(.+?)\s*[;,]?\s*(?://\s*(.*?))?\s*$"
)
_WITH_DEFAULTS_RE = re.compile(r"\bwithDefaults\s*\(\s*defineProps\b")


class MergePolicy(str, Enum):
    """How results from several strategies become one property list."""

    DEDUPE = "dedupe"
    CONCAT = "concat"
    FIRST = "first"


class PropertyStrategy(ABC):
    """Contract for one way of recovering property declarations from a script."""

    name: str = ""

    @abstractmethod
    def supports(self, script: str) -> bool:
        """Return True when the script contains a declaration this strategy reads."""

    @abstractmethod
    def extract(self, script: str) -> List[PropertyDescriptor]:
        """Return descriptors in declaration order."""


class InterfacePropsStrategy(PropertyStrategy):
    """Reads ``interface XxxProps { name?: type; }`` style declarations."""

    name = "interface"

    def supports(self, script: str) -> bool:
        return _locate_interface(script) is not None

    def extract(self, script: str) -> List[PropertyDescriptor]:
        located = _locate_interface(script)
        if located is None:
            return []
        body, start, end = located
        remainder = script[:start] + script[end:]
        defaults_scope = _defaults_scope(remainder)

        properties: List[PropertyDescriptor] = []
        for paragraph_offset, paragraph in _paragraphs(body):
            for line_offset, line in _top_level_lines(paragraph):
                for entry_offset, entry in _line_entries(line):
                    match = _INTERFACE_ENTRY_RE.match(entry)
                    if not match:
                        continue
                    prop_name, optional, prop_type, inline = match.groups()
                    comment = preceding_doc_comment(paragraph, line_offset + entry_offset)
                    description = (inline or "").strip()
                    if comment is not None:
                        description = clean_doc_comment(comment) or description

                    default = find_assigned_default(defaults_scope, prop_name)
                    if default is None and comment is not None:
                        default = doc_comment_tag(comment, "default")

                    properties.append(
                        PropertyDescriptor(
                            name=prop_name,
                            type=prop_type.strip(),
                            required=optional != "?",
                            default=default,
                            description=description,
                            source=self.name,
                        )
                    )
        return properties


class OptionsPropsStrategy(PropertyStrategy):
    """Reads ``props: { name: { type, default, required } }`` declarations."""

    name = "options"

    def supports(self, script: str) -> bool:
        return _locate_options(script) is not None

    def extract(self, script: str) -> List[PropertyDescriptor]:
        body = _locate_options(script)
        if body is None:
            return []

        properties: List[PropertyDescriptor] = []
        for _, segment in split_top_level(body):
            lead = _LEADING_COMMENTS_RE.match(segment)
            entry_start = lead.end() if lead else 0
            match = _OPTIONS_ENTRY_RE.match(segment, entry_start)
            if not match:
                continue
            prop_name = match.group(2)
            value = segment[match.end() :].strip()
            comment = preceding_doc_comment(segment, entry_start)
            description = clean_doc_comment(comment) if comment is not None else ""

            if value.startswith("{"):
                options = balanced_block(value, 0)
                definition = options[0] if options else value[1:]
                prop_type, default, required = _parse_options_entry(definition)
            else:
                # Shorthand form: ``label: String`` or ``value: [String, Number]``.
                prop_type, default, required = value or "any", None, False

            properties.append(
                PropertyDescriptor(
                    name=prop_name,
                    type=prop_type,
                    required=required,
                    default=default,
                    description=description,
                    source=self.name,
                )
            )
        return properties


DEFAULT_STRATEGIES: Tuple[PropertyStrategy, ...] = (
    InterfacePropsStrategy(),
    OptionsPropsStrategy(),
)


def extract_properties(
    script: str,
    *,
    policy: MergePolicy | str = MergePolicy.DEDUPE,
    strategies: Sequence[PropertyStrategy] = DEFAULT_STRATEGIES,
) -> List[PropertyDescriptor]:
    """Run every strategy in order and combine their output under ``policy``."""
    results = [
        (strategy.name, strategy.extract(script))
        for strategy in strategies
        if strategy.supports(script)
    ]
    return merge_properties(results, MergePolicy(policy))


def merge_properties(
    results: Iterable[Tuple[str, List[PropertyDescriptor]]],
    policy: MergePolicy,
) -> List[PropertyDescriptor]:
    """Combine per-strategy results.

    ``DEDUPE`` keeps the first descriptor seen for each name, so earlier
    strategies take precedence. ``CONCAT`` keeps everything, duplicates
    included. ``FIRST`` returns the first non-empty result only.
    """
    if policy is MergePolicy.FIRST:
        for _, properties in results:
            if properties:
                return list(properties)
        return []

    combined: List[PropertyDescriptor] = []
    seen: Dict[str, PropertyDescriptor] = {}
    for _, properties in results:
        for prop in properties:
            if policy is MergePolicy.DEDUPE:
                if prop.name in seen:
                    continue
                seen[prop.name] = prop
            combined.append(prop)
    return combined


def find_assigned_default(scope: str, prop_name: str) -> Optional[str]:
    """Return the value of the first bare ``<prop_name>: <value>`` in ``scope``."""
    pattern = re.compile(
        rf"""(?<![\w$.?]){re.escape(prop_name)}\s*:\s*(?:(['"`])(.*?)\1|([^,\s{{}};][^,\n}};]*))"""
    )
    match = pattern.search(scope)
    if not match:
        return None
    if match.group(1):
        return match.group(2)
    return match.group(3).strip()


# ----------------------------------------------------------------------
# Internals


def _locate_interface(script: str) -> Optional[Tuple[str, int, int]]:
    match = _INTERFACE_RE.search(script)
    if not match:
        return None
    block = balanced_block(script, match.end() - 1)
    if block is None:
        return None
    body, end = block
    return body, match.start(), end


def _locate_options(script: str) -> Optional[str]:
    match = _OPTIONS_BLOCK_RE.search(script)
    if not match:
        return None
    block = balanced_block(script, match.end() - 1)
    return block[0] if block else None


def _defaults_scope(script: str) -> str:
    """Prefer the object handed to ``withDefaults`` when one exists."""
    match = _WITH_DEFAULTS_RE.search(script)
    if not match:
        return script
    call = balanced_block(script, script.index("(", match.start()))
    if call is None:
        return script
    segments = split_top_level(call[0])
    if len(segments) < 2:
        return script
    return segments[1][1]


def _parse_options_entry(definition: str) -> Tuple[str, Optional[str], bool]:
    """Read ``type``, ``default`` and ``required`` from the top-level keys of one entry.

    Values are whole top-level segments, so factory defaults such as
    ``() => ({ a: 1 })`` and method shorthand ``default() { ... }`` stay intact.
    """
    values: Dict[str, str] = {}
    for _, segment in split_top_level(definition):
        lead = _LEADING_COMMENTS_RE.match(segment)
        match = _OPTION_KEY_RE.match(segment, lead.end() if lead else 0)
        if match and match.group(1) not in values:
            values[match.group(1)] = segment[match.end() :].strip()

    prop_type = values.get("type") or "any"
    default = unquote(values["default"]) if values.get("default") else None
    required = values.get("required") == "true"
    return prop_type, default, required


def _line_entries(line: str) -> List[Tuple[int, str]]:
    """Members declared on one interface line, split on top-level ``;``.

    A trailing ``// comment`` segment stays attached to the member before it.
    Offsets point at the first non-blank character of each member.
    """
    entries: List[Tuple[int, str]] = []
    for offset, segment in split_top_level(line, ";"):
        stripped = segment.strip()
        if stripped.startswith("//") and entries:
            previous_offset, previous = entries[-1]
            entries[-1] = (previous_offset, f"{previous} {stripped}")
            continue
        entries.append((offset + len(segment) - len(segment.lstrip()), stripped))
    return entries


def _paragraphs(body: str) -> List[Tuple[int, str]]:
    paragraphs: List[Tuple[int, str]] = []
    position = 0
    for match in re.finditer(r"\n[ \t]*\r?\n", body):
        paragraphs.append((position, body[position : match.start() + 1]))
        position = match.end()
    paragraphs.append((position, body[position:]))
    return [(offset, text) for offset, text in paragraphs if text.strip()]


def _top_level_lines(text: str) -> List[Tuple[int, str]]:
    """Lines that start at brace depth zero, with their offsets into ``text``."""
    lines: List[Tuple[int, str]] = []
    depth = 0
    offset = 0
    in_comment = False
    for line in text.splitlines(keepends=True):
        stripped = line.strip()
        if in_comment:
            if "*/" in stripped:
                in_comment = False
        elif stripped.startswith("/*"):
            in_comment = "*/" not in stripped
        elif depth == 0:
            lines.append((offset, line.rstrip("\r\n")))
        if not in_comment and not stripped.startswith(("/*", "*")):
            depth = max(depth + brace_delta(line), 0)
        offset += len(line)
    return lines


__all__ = [
    "DEFAULT_STRATEGIES",
    "InterfacePropsStrategy",
    "MergePolicy",
    "OptionsPropsStrategy",
    "PropertyStrategy",
    "extract_properties",
    "find_assigned_default",
    "merge_properties",
]
