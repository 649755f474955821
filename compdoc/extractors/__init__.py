"""Best-effort metadata extraction from component-definition files."""

from __future__ import annotations

from ..models import ComponentMetadata
from .props import (
    DEFAULT_STRATEGIES,
    InterfacePropsStrategy,
    MergePolicy,
    OptionsPropsStrategy,
    PropertyStrategy,
    extract_properties,
    merge_properties,
)
from .script import resolve_description, resolve_example, resolve_name
from .template import DEFAULT_PLACEHOLDER, excerpt_template, extract_styles, has_slot
from .zones import SourceZones, StyleZone, split_zones


def extract(
    source_text: str,
    fallback_name: str,
    *,
    merge_policy: MergePolicy | str = MergePolicy.DEDUPE,
    template_placeholder: str = DEFAULT_PLACEHOLDER,
) -> ComponentMetadata:
    """Turn raw source text into a ``ComponentMetadata`` record.

    Never raises for malformed input: sections that cannot be found leave the
    corresponding field empty. ``example`` is only populated when the author
    supplied one; synthesising a fallback is the caller's job.
    """
    zones = split_zones(source_text)
    script = zones.script

    example = resolve_example(script)
    return ComponentMetadata(
        name=resolve_name(script, fallback_name),
        description=resolve_description(script),
        properties=extract_properties(script, policy=merge_policy),
        template=excerpt_template(zones.template, placeholder=template_placeholder),
        styles=extract_styles(zones.styles),
        example=example or "",
        example_is_explicit=example is not None,
        has_slot=has_slot(zones.template),
    )


__all__ = [
    "DEFAULT_STRATEGIES",
    "InterfacePropsStrategy",
    "MergePolicy",
    "OptionsPropsStrategy",
    "PropertyStrategy",
    "SourceZones",
    "StyleZone",
    "extract",
    "extract_properties",
    "merge_properties",
    "split_zones",
]
