"""Categorised index of every documented component."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader

from .constants import CATEGORY_ORDER, EN, FALLBACK_CATEGORY, Locale
from .postproc.lint import MarkdownLinter
from .stores.docs import DOC_SUFFIX, DocStore, parse_description

INDEX_TEMPLATE = "index.md.j2"


@dataclass(frozen=True)
class CategoryRule:
    """Assigns ``category`` when any keyword is a substring of the component name."""

    category: str
    keywords: Tuple[str, ...]

    def matches(self, name: str) -> bool:
        return any(keyword in name for keyword in self.keywords)


# Evaluated top to bottom; the first matching rule wins.
CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule("Base", ("Button", "Icon", "Link", "Text", "Typography", "Divider")),
    CategoryRule("Navigation", ("Nav", "Menu", "Tab", "Breadcrumb", "Pagination", "Steps", "Dropdown", "Anchor")),
    CategoryRule(
        "Form",
        ("Form", "Input", "Select", "Checkbox", "Radio", "Switch", "Slider", "Picker", "Upload", "Field", "Rate"),
    ),
    CategoryRule(
        "DataDisplay",
        ("Table", "List", "Card", "Avatar", "Badge", "Tag", "Tooltip", "Tree", "Image", "Calendar", "Collapse"),
    ),
    CategoryRule(
        "Feedback",
        ("Alert", "Message", "Modal", "Dialog", "Notification", "Progress", "Spin", "Loading", "Toast", "Drawer"),
    ),
    CategoryRule("Layout", ("Layout", "Grid", "Row", "Col", "Container", "Space", "Header", "Footer", "Aside", "Sidebar")),
)


def classify(name: str, rules: Sequence[CategoryRule] = CATEGORY_RULES) -> str:
    """Return the category of ``name``: first matching rule, else the fallback."""
    for rule in rules:
        if rule.matches(name):
            return rule.category
    return FALLBACK_CATEGORY


@dataclass
class IndexEntry:
    name: str
    link: str
    description: str = ""


@dataclass
class IndexGroup:
    category: str
    title: str
    entries: List[IndexEntry] = field(default_factory=list)


class IndexBuilder:
    """Renders the aggregate index from the documents currently in a store."""

    def __init__(
        self,
        locale: Locale = EN,
        *,
        templates_dir: Path | None = None,
        rules: Sequence[CategoryRule] = CATEGORY_RULES,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.locale = locale
        self.rules = tuple(rules)
        self.linter = linter or MarkdownLinter()
        self._env = self._create_env(templates_dir)

    def build(self, store: DocStore) -> str:
        """Regenerate the whole index; nothing from a previous index is kept."""
        names = store.list_all()
        descriptions: Dict[str, str] = {}
        for name in names:
            document = store.read(name)
            description = parse_description(document) if document else None
            descriptions[name] = " ".join(description.split()) if description else ""
        return self.render(self.group(names, descriptions))

    def group(self, names: Sequence[str], descriptions: Dict[str, str] | None = None) -> List[IndexGroup]:
        """Bucket names into non-empty categories, in fixed category order."""
        descriptions = descriptions or {}
        buckets: Dict[str, List[IndexEntry]] = {category: [] for category in CATEGORY_ORDER}
        for name in sorted(set(names)):
            buckets[classify(name, self.rules)].append(
                IndexEntry(
                    name=name,
                    link=f"./{name}{DOC_SUFFIX}",
                    description=descriptions.get(name, ""),
                )
            )
        return [
            IndexGroup(
                category=category,
                title=self.locale.category_titles.get(category, category),
                entries=buckets[category],
            )
            for category in CATEGORY_ORDER
            if buckets[category]
        ]

    def render(self, groups: Sequence[IndexGroup]) -> str:
        template = self._env.get_template(INDEX_TEMPLATE)
        rendered = template.render(
            title=self.locale.index_title,
            intro=self.locale.index_intro,
            groups=groups,
            principles_title=self.locale.principles_title,
            principles=self.locale.principles,
        )
        return self.linter.lint(rendered)

    @staticmethod
    def _create_env(templates_dir: Optional[Path]) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(loader=loader, autoescape=False, trim_blocks=True, lstrip_blocks=True)


__all__ = ["CATEGORY_RULES", "CategoryRule", "IndexBuilder", "IndexEntry", "IndexGroup", "classify"]
