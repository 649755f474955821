"""Post-processing helpers for generated Markdown."""

from .lint import MarkdownLinter

__all__ = ["MarkdownLinter"]
