"""Document storage backends."""

from .docs import DocStore, FileDocStore, MemoryDocStore, parse_description

__all__ = ["DocStore", "FileDocStore", "MemoryDocStore", "parse_description"]
