"""Usage snippet synthesis for components without an author-supplied example."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .constants import EN, Locale
from .models import PropertyDescriptor

ACCENT_COLOR = "#42b883"
MAX_INLINE_ATTRIBUTES = 3


@dataclass(frozen=True)
class NameRule:
    """Picks a literal when the property name contains any of ``keywords``."""

    keywords: Tuple[str, ...]
    literal: Callable[[str, Locale], str]

    def matches(self, name: str) -> bool:
        return any(keyword in name for keyword in self.keywords)


@dataclass(frozen=True)
class ValueRule:
    """Maps a type expression to an example literal, first match wins."""

    label: str
    matches: Callable[[str], bool]
    names: Tuple[NameRule, ...]
    fallback: Callable[[str, Locale], str]

    def literal(self, name: str, locale: Locale) -> str:
        for rule in self.names:
            if rule.matches(name):
                return rule.literal(name, locale)
        return self.fallback(name, locale)


def _quoted(text: str) -> str:
    return f'"{text}"'


VALUE_RULES: Tuple[ValueRule, ...] = (
    ValueRule(
        label="string",
        matches=lambda type_: "string" in type_.lower(),
        names=(
            NameRule(("color",), lambda name, locale: _quoted(ACCENT_COLOR)),
            NameRule(("name", "title"), lambda name, locale: _quoted(locale.named_value.format(name=name))),
            NameRule(("msg", "message"), lambda name, locale: _quoted(locale.message_value)),
        ),
        fallback=lambda name, locale: _quoted(locale.string_value.format(name=name)),
    ),
    ValueRule(
        label="number",
        matches=lambda type_: "number" in type_.lower(),
        names=(
            NameRule(("size",), lambda name, locale: "24"),
            NameRule(("max",), lambda name, locale: "100"),
            NameRule(("min",), lambda name, locale: "0"),
        ),
        fallback=lambda name, locale: "42",
    ),
    ValueRule(
        label="boolean",
        matches=lambda type_: "boolean" in type_.lower(),
        names=(),
        fallback=lambda name, locale: "true",
    ),
    ValueRule(
        label="array",
        matches=lambda type_: "array" in type_.lower() or "[]" in type_,
        names=(),
        fallback=lambda name, locale: "[]",
    ),
    ValueRule(
        label="object",
        matches=lambda type_: "object" in type_.lower(),
        names=(),
        fallback=lambda name, locale: "{}",
    ),
)


def example_value(prop: PropertyDescriptor, locale: Locale = EN) -> str:
    """Return the literal used for ``prop`` in a synthesised example."""
    for rule in VALUE_RULES:
        if rule.matches(prop.type):
            return rule.literal(prop.name, locale)
    return _quoted(locale.other_value.format(name=prop.name))


def synthesize_example(
    component_name: str,
    properties: Sequence[PropertyDescriptor],
    has_slot: bool = False,
    *,
    locale: Locale = EN,
) -> str:
    """Build a deterministic usage snippet for ``component_name``.

    Optional properties with a default are left out; the remaining ones get a
    literal chosen from their type and name. Up to three attributes stay on
    one line, more are written one per line. A component whose template has a
    ``<slot>`` is shown wrapping placeholder content instead of self-closing.
    """
    attributes: List[str] = []
    for prop in properties:
        if _has_default(prop) and not prop.required:
            continue
        attributes.append(f"{prop.name}={example_value(prop, locale)}")

    if not attributes:
        tag = f"<{component_name} />"
    elif len(attributes) <= MAX_INLINE_ATTRIBUTES:
        tag = f"<{component_name} {' '.join(attributes)} />"
    else:
        joined = "\n  ".join(attributes)
        tag = f"<{component_name}\n  {joined}\n/>"

    if has_slot:
        return _wrap_slot(tag, component_name, locale)
    return tag


def _has_default(prop: PropertyDescriptor) -> bool:
    return bool(prop.default)


def _wrap_slot(tag: str, component_name: str, locale: Locale) -> str:
    opening: Optional[str] = None
    if tag.endswith(" />"):
        opening = tag[: -len(" />")] + ">"
    elif tag.endswith("\n/>"):
        opening = tag[: -len("/>")] + ">"
    if opening is None:
        return tag
    return f"{opening}\n  {locale.slot_content}\n</{component_name}>"


__all__ = ["ACCENT_COLOR", "VALUE_RULES", "ValueRule", "example_value", "synthesize_example"]
