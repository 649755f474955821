"""Component reference documentation generator."""

from .extractors import extract
from .pipeline import Pipeline

__all__ = ["Pipeline", "extract"]
