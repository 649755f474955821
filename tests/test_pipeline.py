"""Pipeline behaviour tests over temporary component projects."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdoc.errors import ComponentNotFoundError
from compdoc.git.staging import GitStaging
from compdoc.pipeline import Pipeline, summarize
from compdoc.stores import MemoryDocStore
from compdoc.watch import ChangeWatcher
from tests._fixtures.component_builder import ComponentBuilder

BUTTON = """
<template>
  <button class="btn"><slot /></button>
</template>

<script>
/**
 * Auto text
 */
export default {
  name: 'Button',
  props: {
    /** Button label */
    label: { type: String, required: true },
    size: { type: Number, default: 14 },
  }
}
</script>

<style scoped>
.btn { padding: 4px; }
</style>
"""

TABS = """
<template>
  <div class="tabs"></div>
</template>

<script>
/**
 * Switches between panels.
 * @example
 * ```vue
 * <Tabs :items="items" />
 * ```
 */
export default { name: 'Tabs' }
</script>
"""


class _RecordingRunner:
    def __init__(self, staged: str = "") -> None:
        self.staged = staged
        self.calls: list[list[str]] = []

    def __call__(self, args, cwd, capture_output=False):  # type: ignore[no-untyped-def]
        self.calls.append(list(args))
        if args[:3] == ["git", "diff", "--cached"]:
            return self.staged
        return ""

    @property
    def add_calls(self) -> list[list[str]]:
        return [call for call in self.calls if call[:2] == ["git", "add"]]


def test_run_component_writes_document_and_index(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    pipeline = Pipeline(component_builder.config())

    report = pipeline.run_component("Button")

    doc_path = component_builder.docs_dir / "Button.md"
    assert report.success is True
    assert report.processed == 1
    assert report.results[0].doc_path == doc_path
    markdown = doc_path.read_text(encoding="utf-8")
    assert markdown.startswith("# Button\n\nAuto text\n\n## Example\n")
    assert '<Button label="label content">\n  Content\n</Button>' in markdown
    assert "| label | `String` | ✓ | - | Button label |" in markdown
    assert "| size | `Number` |  | 14 | - |" in markdown
    assert "```css\n.btn { padding: 4px; }\n```" in markdown
    index = (component_builder.docs_dir / "index.md").read_text(encoding="utf-8")
    assert "- [Button](./Button.md) — Auto text" in index


def test_existing_description_is_preserved(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    component_builder.write(
        {"docs/components/Button.md": "# Button\n\nCustom text\n\n## Example\n\n```vue\n<Button />\n```\n"}
    )
    pipeline = Pipeline(component_builder.config())

    pipeline.run_component("Button")

    markdown = (component_builder.docs_dir / "Button.md").read_text(encoding="utf-8")
    assert "Custom text" in markdown
    assert "Auto text" not in markdown
    assert "| label |" in markdown


def test_repeated_runs_are_byte_stable(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    component_builder.component("Tabs", TABS)
    pipeline = Pipeline(component_builder.config())

    pipeline.run_all()
    first = {path.name: path.read_bytes() for path in component_builder.docs_dir.iterdir()}
    pipeline.run_all()
    second = {path.name: path.read_bytes() for path in component_builder.docs_dir.iterdir()}

    assert first == second
    assert sorted(first) == ["Button.md", "Tabs.md", "index.md"]


def test_explicit_example_is_used_verbatim(component_builder: ComponentBuilder) -> None:
    component_builder.component("Tabs", TABS)
    store = MemoryDocStore()

    Pipeline(component_builder.config(), store=store).run_component("Tabs")

    assert '```vue\n<Tabs :items="items" />\n```' in store.documents["Tabs"]
    assert store.index is not None


def test_empty_candidate_list_still_rebuilds_index(component_builder: ComponentBuilder) -> None:
    pipeline = Pipeline(component_builder.config())

    report = pipeline.run([])

    assert report.success is True
    assert report.processed == 0
    assert report.message == "Processed 0 component file(s)"
    assert (component_builder.docs_dir / "index.md").is_file()


def test_failure_does_not_abort_batch(component_builder: ComponentBuilder) -> None:
    good = component_builder.component("Button", BUTTON)
    missing = component_builder.components_dir / "Ghost.vue"
    pipeline = Pipeline(component_builder.config())

    report = pipeline.run([missing, good])

    assert report.success is False
    assert [result.success for result in report.results] == [False, True]
    assert report.results[0].error
    assert len(report.failed) == 1
    assert (component_builder.docs_dir / "Button.md").is_file()
    assert (component_builder.docs_dir / "index.md").is_file()
    assert summarize(report)[-1] == "failed"


def test_run_all_recurses_and_skips_vendor_dirs(component_builder: ComponentBuilder) -> None:
    component_builder.component("forms/Input", "<script>export default { name: 'Input' }</script>")
    component_builder.component("node_modules/Vendor", "<script>export default {}</script>")
    component_builder.component("Tabs", TABS)
    pipeline = Pipeline(component_builder.config())

    report = pipeline.run_all()

    assert [result.component for result in report.results] == ["Tabs", "Input"]
    assert not (component_builder.docs_dir / "Vendor.md").exists()


def test_declared_name_overrides_file_stem(component_builder: ComponentBuilder) -> None:
    component_builder.component("btn", "<script>export default { name: 'FancyButton' }</script>")
    pipeline = Pipeline(component_builder.config())

    pipeline.run_all()

    assert (component_builder.docs_dir / "FancyButton.md").is_file()


def test_run_component_missing_raises(component_builder: ComponentBuilder) -> None:
    pipeline = Pipeline(component_builder.config())

    with pytest.raises(ComponentNotFoundError) as excinfo:
        pipeline.run_component("Nope")

    assert "Nope" in str(excinfo.value)


def test_run_staged_processes_and_stages(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    (component_builder.root / ".git").mkdir()
    runner = _RecordingRunner("src/components/Button.vue\nsrc/components/Gone.vue\nREADME.md\n")
    pipeline = Pipeline(component_builder.config(), staging=GitStaging(runner=runner))

    report = pipeline.run_staged()

    assert report.success is True
    assert report.processed == 1
    assert runner.add_calls == [
        ["git", "add", "--", "docs/components/Button.md", "docs/components/index.md"]
    ]


def test_run_staged_without_stage_flag(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    (component_builder.root / ".git").mkdir()
    runner = _RecordingRunner("src/components/Button.vue\n")
    pipeline = Pipeline(component_builder.config(), staging=GitStaging(runner=runner))

    report = pipeline.run_staged(stage=False)

    assert report.success is True
    assert runner.add_calls == []


def test_failed_batch_is_not_staged(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    (component_builder.root / ".git").mkdir()
    runner = _RecordingRunner()
    pipeline = Pipeline(component_builder.config(), staging=GitStaging(runner=runner))

    report = pipeline.run(
        [component_builder.components_dir / "Ghost.vue", component_builder.components_dir / "Button.vue"],
        stage=True,
    )

    assert report.success is False
    assert runner.add_calls == []


def test_stage_docs_config_applies_by_default(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    component_builder.write({".compdoc.yml": "git:\n  stage_docs: true\n"})
    (component_builder.root / ".git").mkdir()
    runner = _RecordingRunner()
    pipeline = Pipeline(component_builder.config(), staging=GitStaging(runner=runner))

    pipeline.run_component("Button")

    assert len(runner.add_calls) == 1


def test_watch_regenerates_changed_component(component_builder: ComponentBuilder) -> None:
    config = component_builder.config()
    pipeline = Pipeline(config)

    def fake_sleep(_: float) -> None:
        component_builder.component("Tabs", TABS)

    watcher = ChangeWatcher(config.components_dir, config.extension, sleep=fake_sleep)
    pipeline.watch(watcher=watcher, max_cycles=1)

    assert (component_builder.docs_dir / "Tabs.md").is_file()
    assert "- [Tabs](./Tabs.md)" in (component_builder.docs_dir / "index.md").read_text(encoding="utf-8")


def test_zh_locale_headings(component_builder: ComponentBuilder) -> None:
    component_builder.component("Button", BUTTON)
    component_builder.write({".compdoc.yml": "locale: zh\n"})

    Pipeline(component_builder.config()).run_component("Button")

    markdown = (component_builder.docs_dir / "Button.md").read_text(encoding="utf-8")
    assert "## 示例" in markdown
    assert "<Button label=\"label内容\">\n  内容\n</Button>" in markdown


def test_from_path_reads_config(component_builder: ComponentBuilder) -> None:
    component_builder.write({".compdoc.yml": "output_dir: site/api\n"})

    pipeline = Pipeline.from_path(component_builder.root)

    assert pipeline.config.output_dir == component_builder.root.resolve() / "site" / "api"
