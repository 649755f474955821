"""Tests for name, description and example resolution."""

from __future__ import annotations

import textwrap

from compdoc.extractors.script import resolve_description, resolve_example, resolve_name


def test_resolve_name_prefers_top_level_declaration() -> None:
    script = textwrap.dedent(
        """
        export default {
          data() {
            return { name: 'inner' }
          },
          name: 'FancyButton',
        }
        """
    )

    assert resolve_name(script, "Fallback") == "FancyButton"


def test_resolve_name_reads_define_options() -> None:
    assert resolve_name("defineOptions({ name: \"MyInput\" })", "Fallback") == "MyInput"


def test_resolve_name_falls_back_to_file_stem() -> None:
    assert resolve_name("const size = 1", "Button") == "Button"


def test_resolve_description_cuts_at_first_tag() -> None:
    script = textwrap.dedent(
        """
        /**
         * A clickable button.
         *   Supports icons.
         * @example
         * ignored
         */
        export default {}
        """
    )

    assert resolve_description(script) == "A clickable button. Supports icons."


def test_resolve_description_ignores_single_line_comments() -> None:
    assert resolve_description("/** inline only */\nexport default {}") == ""


def test_resolve_example_returns_fenced_body() -> None:
    script = textwrap.dedent(
        """
        /**
         * Button.
         * @example
         * ```vue
         * <Button type="primary">Go</Button>
         * ```
         */
        """
    )

    assert resolve_example(script) == '<Button type="primary">Go</Button>'


def test_resolve_example_absent() -> None:
    assert resolve_example("/**\n * Plain.\n */") is None
