"""Core data models shared across compdoc components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class PropertyDescriptor:
    """One documented configurable input of a component."""

    name: str
    type: str
    required: bool = False
    default: Optional[str] = None
    description: str = ""
    source: str = ""


@dataclass
class StyleBlock:
    """Content of a single style zone with its declared language."""

    content: str
    lang: str = "css"
    attrs: str = ""


@dataclass
class ComponentMetadata:
    """Everything recovered from one component-definition file."""

    name: str
    description: str = ""
    properties: List[PropertyDescriptor] = field(default_factory=list)
    template: str = ""
    styles: List[StyleBlock] = field(default_factory=list)
    example: str = ""
    example_is_explicit: bool = False
    has_slot: bool = False


@dataclass
class FileReport:
    """Outcome of documenting a single source file."""

    path: str
    success: bool
    component: Optional[str] = None
    doc_path: Optional[Path] = None
    message: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "success": self.success,
            "component": self.component,
            "doc_path": str(self.doc_path) if self.doc_path else None,
            "message": self.message,
            "error": self.error,
        }


@dataclass
class BatchReport:
    """Aggregate outcome of a pipeline run over many files."""

    success: bool
    results: List[FileReport] = field(default_factory=list)
    message: str = ""
    index_path: Optional[Path] = None
    index_error: Optional[str] = None

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def failed(self) -> List[FileReport]:
        return [result for result in self.results if not result.success]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "processed": self.processed,
            "message": self.message,
            "index_path": str(self.index_path) if self.index_path else None,
            "index_error": self.index_error,
            "results": [result.to_dict() for result in self.results],
        }
