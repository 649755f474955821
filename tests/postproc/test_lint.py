"""Tests for markdown post-processing."""

from __future__ import annotations

from compdoc.postproc import MarkdownLinter


def test_markdown_linter_normalises_whitespace() -> None:
    markdown = "\n\n# Title\r\n\r\nText\r\n\r\n\r\n## Section\r\nContent  \r\n\n\n"
    linted = MarkdownLinter().lint(markdown)
    assert linted == "# Title\n\nText\n\n## Section\n\nContent\n"


def test_markdown_linter_separates_headings() -> None:
    linted = MarkdownLinter().lint("# Title\nIntro\n## Props\n")
    assert linted == "# Title\n\nIntro\n\n## Props\n"


def test_markdown_linter_leaves_code_fences_alone() -> None:
    markdown = "## Example\n\n```vue\n<A />\n\n\n# not a heading\n```\n"
    linted = MarkdownLinter().lint(markdown)
    assert "<A />\n\n\n# not a heading\n```" in linted


def test_markdown_linter_keeps_trailing_whitespace_inside_fences() -> None:
    markdown = "```text  \nline with spaces   \n\ttabbed\t\n```\nafter   \n"
    linted = MarkdownLinter().lint(markdown)
    assert linted == "```text\nline with spaces   \n\ttabbed\t\n```\n\nafter\n"


def test_markdown_linter_groups_table_rows() -> None:
    markdown = "Intro\n| Name | Type |\n|------|------|\n  | a | `string`\nOutro\n"
    linted = MarkdownLinter().lint(markdown)
    assert linted == (
        "Intro\n\n"
        "| Name | Type |\n"
        "|------|------|\n"
        "| a | `string` |\n\n"
        "Outro\n"
    )


def test_markdown_linter_keeps_escaped_pipe_inside_last_cell() -> None:
    linted = MarkdownLinter().lint("| kind | one \\|\n")
    assert linted == "| kind | one \\| |\n"


def test_markdown_linter_closes_unterminated_fence() -> None:
    linted = MarkdownLinter().lint("## Style\n```css\n.a {}\n")
    assert linted == "## Style\n\n```css\n.a {}\n```\n"


def test_markdown_linter_fence_with_info_string_does_not_close() -> None:
    markdown = "```md\n```js\nx\n```\n"
    linted = MarkdownLinter().lint(markdown)
    assert linted == "```md\n```js\nx\n```\n"
