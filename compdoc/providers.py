"""Candidate-file providers feeding the pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

_EXCLUDED_DIRS = {"node_modules", ".git", "__tests__", "dist"}


def component_files(directory: Path, extension: str) -> List[Path]:
    """Every ``*<extension>`` file under ``directory``, recursively and sorted."""
    if not directory.is_dir():
        return []
    return sorted(
        path
        for path in directory.rglob(f"*{extension}")
        if path.is_file() and not _excluded(path.relative_to(directory))
    )


def find_component(directory: Path, name: str, extension: str) -> Optional[Path]:
    """Return the first source file named ``<name><extension>`` under ``directory``."""
    direct = directory / f"{name}{extension}"
    if direct.is_file():
        return direct
    for path in component_files(directory, extension):
        if path.stem == name:
            return path
    return None


def _excluded(relative: Path) -> bool:
    return any(part in _EXCLUDED_DIRS for part in relative.parts[:-1])


__all__ = ["component_files", "find_component"]
