"""Git integration for candidate discovery and staging."""

from .staging import GitStaging

__all__ = ["GitStaging"]
