"""Canonical layout for generated markdown."""

from __future__ import annotations

from typing import List

_FENCE = "```"


class MarkdownLinter:
    """Rewrites markdown as blocks separated by exactly one blank line.

    Headings always stand alone, consecutive table rows stay together and
    every row gets a closing pipe. Fenced code is copied untouched, and a
    fence left open at the end of the page is closed.
    """

    def lint(self, markdown: str) -> str:
        normalized = markdown.replace("\r\n", "\n").replace("\r", "\n")
        blocks: List[List[str]] = []
        current: List[str] = []
        fence: List[str] | None = None

        def flush() -> None:
            if current:
                blocks.append(current.copy())
                current.clear()

        for line in normalized.split("\n"):
            stripped = line.strip()
            if fence is not None:
                if _closes_fence(stripped):
                    fence.append(_FENCE)
                    blocks.append(fence)
                    fence = None
                else:
                    fence.append(line)
                continue

            if stripped.startswith(_FENCE):
                flush()
                fence = [stripped]
            elif not stripped:
                flush()
            elif stripped.startswith("#"):
                flush()
                blocks.append([stripped])
            elif stripped.startswith("|"):
                if current and not _is_table_row(current[-1]):
                    flush()
                current.append(_table_row(stripped))
            else:
                if current and _is_table_row(current[-1]):
                    flush()
                current.append(line.rstrip())

        if fence is not None:
            while len(fence) > 1 and not fence[-1].strip():
                fence.pop()
            fence.append(_FENCE)
            blocks.append(fence)
        flush()

        if not blocks:
            return ""
        return "\n\n".join("\n".join(block) for block in blocks) + "\n"


def _closes_fence(stripped: str) -> bool:
    return stripped.startswith(_FENCE) and not stripped.strip("`")


def _is_table_row(line: str) -> bool:
    return line.startswith("|")


def _table_row(row: str) -> str:
    if not row.endswith("|") or row.endswith("\\|"):
        return f"{row} |"
    return row


__all__ = ["MarkdownLinter"]
