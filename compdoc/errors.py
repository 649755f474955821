"""Exception hierarchy shared across compdoc modules."""

from __future__ import annotations


class CompDocError(RuntimeError):
    """Base class for errors surfaced to CLI and service callers."""


class ComponentNotFoundError(CompDocError):
    """Raised when a component requested by name has no source file."""

    def __init__(self, name: str, search_dir: str | None = None) -> None:
        self.name = name
        self.search_dir = search_dir
        where = f" under {search_dir}" if search_dir else ""
        super().__init__(f"Component not found: {name}{where}")


class GitError(CompDocError):
    """Raised when a git command needed for candidate discovery fails."""


__all__ = ["CompDocError", "ComponentNotFoundError", "GitError"]
