"""Persistence for generated component documents."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Protocol

from ..logging import get_logger

DOC_SUFFIX = ".md"

logger = get_logger("stores.docs")


class DocStore(Protocol):
    """Capability object for reading and writing component documents."""

    def load(self, name: str) -> Optional[str]:
        """Return the author-maintained description of ``name``, if any."""

    def read(self, name: str) -> Optional[str]:
        """Return the full stored document for ``name``, if any."""

    def save(self, name: str, markdown: str) -> Optional[Path]:
        """Overwrite the document for ``name``."""

    def list_all(self) -> List[str]:
        """Return the names of every stored component document, sorted."""

    def save_index(self, markdown: str) -> Optional[Path]:
        """Overwrite the aggregate index document."""


def parse_description(markdown: str) -> Optional[str]:
    """Return the prose between the title line and the first section heading.

    Non-empty lines are kept and joined with newlines. ``None`` when either
    marker is missing or nothing sits between them.
    """
    lines = markdown.splitlines()
    title_index = next(
        (index for index, line in enumerate(lines) if line.startswith("# ")),
        None,
    )
    if title_index is None:
        return None
    heading_index = next(
        (
            index
            for index in range(title_index + 1, len(lines))
            if lines[index].startswith("## ")
        ),
        None,
    )
    if heading_index is None:
        return None
    kept = [line.strip() for line in lines[title_index + 1 : heading_index] if line.strip()]
    if not kept:
        return None
    return "\n".join(kept)


class FileDocStore:
    """Stores one ``<name>.md`` per component under ``output_dir``."""

    def __init__(self, output_dir: Path, *, index_name: str = "index.md") -> None:
        self.output_dir = Path(output_dir)
        self.index_name = index_name

    def path_for(self, name: str) -> Path:
        return self.output_dir / f"{name}{DOC_SUFFIX}"

    @property
    def index_path(self) -> Path:
        return self.output_dir / self.index_name

    def read(self, name: str) -> Optional[str]:
        path = self.path_for(name)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def load(self, name: str) -> Optional[str]:
        existing = self.read(name)
        if existing is None:
            return None
        return parse_description(existing)

    def save(self, name: str, markdown: str) -> Path:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown, encoding="utf-8")
        logger.debug("Wrote %s", path)
        return path

    def list_all(self) -> List[str]:
        if not self.output_dir.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.output_dir.glob(f"*{DOC_SUFFIX}")
            if path.is_file() and path.name != self.index_name
        )

    def save_index(self, markdown: str) -> Path:
        path = self.index_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markdown, encoding="utf-8")
        return path


class MemoryDocStore:
    """In-memory store used where the filesystem should stay untouched."""

    def __init__(self, documents: Dict[str, str] | None = None) -> None:
        self.documents: Dict[str, str] = dict(documents or {})
        self.index: Optional[str] = None

    def read(self, name: str) -> Optional[str]:
        return self.documents.get(name)

    def load(self, name: str) -> Optional[str]:
        existing = self.read(name)
        if existing is None:
            return None
        return parse_description(existing)

    def save(self, name: str, markdown: str) -> None:
        self.documents[name] = markdown

    def list_all(self) -> List[str]:
        return sorted(self.documents)

    def save_index(self, markdown: str) -> None:
        self.index = markdown


__all__ = ["DOC_SUFFIX", "DocStore", "FileDocStore", "MemoryDocStore", "parse_description"]
