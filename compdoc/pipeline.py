"""Pipeline orchestration: extract, render, persist, then rebuild the index."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import CompDocConfig, load_config
from .constants import get_locale
from .errors import ComponentNotFoundError, GitError
from .examples import synthesize_example
from .extractors import MergePolicy, extract
from .git.staging import GitStaging
from .index import IndexBuilder
from .logging import get_logger
from .models import BatchReport, ComponentMetadata, FileReport
from .providers import component_files, find_component
from .render.markdown import DocRenderer
from .stores.docs import DocStore, FileDocStore
from .watch import ChangeWatcher


class Pipeline:
    """Coordinates documentation runs over a list of candidate source files."""

    def __init__(
        self,
        config: CompDocConfig | None = None,
        *,
        store: DocStore | None = None,
        renderer: DocRenderer | None = None,
        index_builder: IndexBuilder | None = None,
        staging: GitStaging | None = None,
    ) -> None:
        self.config = config or CompDocConfig(root=Path.cwd().resolve())
        self.locale = get_locale(self.config.locale)
        self.store: DocStore = store or FileDocStore(
            self.config.output_dir, index_name=self.config.index_file
        )
        self.renderer = renderer or DocRenderer(self.locale)
        self.index_builder = index_builder or IndexBuilder(
            self.locale, templates_dir=self.config.templates_dir
        )
        self.staging = staging or GitStaging()
        self.merge_policy = MergePolicy(self.config.props.merge)
        self.logger = get_logger("pipeline")

    @classmethod
    def from_path(cls, path: str | Path = ".") -> "Pipeline":
        """Build a pipeline from the ``.compdoc.yml`` found at ``path``."""
        return cls(load_config(Path(path)))

    # ------------------------------------------------------------------
    # Core steps

    def document(self, source_text: str, fallback_name: str) -> Tuple[ComponentMetadata, str]:
        """Extract metadata and render it, honouring any stored description."""
        metadata = extract(
            source_text,
            fallback_name,
            merge_policy=self.merge_policy,
            template_placeholder=self.locale.template_placeholder,
        )
        if not metadata.example_is_explicit:
            metadata.example = synthesize_example(
                metadata.name,
                metadata.properties,
                metadata.has_slot,
                locale=self.locale,
            )
        existing = self.store.load(metadata.name)
        if existing:
            self.logger.debug("Keeping existing description for %s", metadata.name)
        return metadata, self.renderer.render(metadata, existing)

    def process_file(self, path: Path | str) -> FileReport:
        """Document one source file; failures are reported, never raised."""
        source = Path(path)
        self.logger.info("Processing %s", source)
        try:
            text = source.read_text(encoding="utf-8")
            metadata, markdown = self.document(text, source.stem)
            doc_path = self.store.save(metadata.name, markdown)
        except Exception as exc:
            self.logger.error("Failed to document %s: %s", source, exc)
            return FileReport(
                path=str(source),
                success=False,
                message=f"Failed to document {source}",
                error=str(exc),
            )
        target = doc_path or metadata.name
        self.logger.info("Generated documentation for %s at %s", metadata.name, target)
        return FileReport(
            path=str(source),
            success=True,
            component=metadata.name,
            doc_path=doc_path,
            message=f"Documentation generated: {target}",
        )

    def build_index(self) -> Tuple[Optional[Path], Optional[str]]:
        """Regenerate and persist the index; returns ``(path, error)``."""
        try:
            markdown = self.index_builder.build(self.store)
            path = self.store.save_index(markdown)
        except Exception as exc:
            self.logger.error("Failed to build component index: %s", exc)
            return None, str(exc)
        self.logger.info("Component index regenerated%s", f" at {path}" if path else "")
        return path, None

    def run(self, paths: Iterable[Path | str], *, stage: bool | None = None) -> BatchReport:
        """Process every path in order, then rebuild the index once.

        The index is regenerated even when ``paths`` is empty so it always
        mirrors the stored documents. Overall success requires every file and
        the index build to succeed; documents are staged only after a fully
        successful run.
        """
        results: List[FileReport] = [self.process_file(path) for path in paths]
        index_path, index_error = self.build_index()

        success = all(result.success for result in results) and index_error is None
        message = f"Processed {len(results)} component file(s)"
        if index_error:
            message += "; index build failed"

        if success and self._should_stage(stage):
            staged = [result.doc_path for result in results if result.doc_path]
            if index_path is not None:
                staged.append(index_path)
            try:
                self.staging.stage(self.config.root, staged)
            except GitError as exc:
                self.logger.error("Failed to stage documentation: %s", exc)
                success = False
                message += "; staging failed"

        if not success:
            self.logger.warning("%s with failures", message)
        return BatchReport(
            success=success,
            results=results,
            message=message,
            index_path=index_path,
            index_error=index_error,
        )

    # ------------------------------------------------------------------
    # Invocation modes

    def run_all(self, *, stage: bool | None = None) -> BatchReport:
        """Document every component under the configured source directory."""
        files = component_files(self.config.components_dir, self.config.extension)
        self.logger.info("Found %d component file(s)", len(files))
        return self.run(files, stage=stage)

    def run_component(self, name: str, *, stage: bool | None = None) -> BatchReport:
        """Document a single component by name; raises when it does not exist."""
        path = find_component(self.config.components_dir, name, self.config.extension)
        if path is None:
            raise ComponentNotFoundError(name, str(self.config.components_dir))
        return self.run([path], stage=stage)

    def run_staged(self, *, stage: bool | None = True) -> BatchReport:
        """Document components currently staged for commit."""
        candidates = self.staging.staged_components(
            self.config.root, self.config.components_dir, self.config.extension
        )
        existing = [path for path in candidates if path.is_file()]
        if len(existing) != len(candidates):
            self.logger.debug("Skipping %d staged path(s) that no longer exist", len(candidates) - len(existing))
        if not existing:
            self.logger.info("No staged component files; refreshing index only")
        else:
            self.logger.info("Detected %d staged component file(s)", len(existing))
        return self.run(existing, stage=stage)

    def watch(
        self,
        *,
        interval: float | None = None,
        max_cycles: int | None = None,
        watcher: ChangeWatcher | None = None,
    ) -> None:
        """Regenerate documentation whenever a component source changes."""
        watcher = watcher or ChangeWatcher(
            self.config.components_dir,
            self.config.extension,
            interval=interval or self.config.watch.interval,
        )
        watcher.watch(lambda path: self.run([path], stage=False), max_cycles=max_cycles)

    def _should_stage(self, stage: bool | None) -> bool:
        return self.config.git.stage_docs if stage is None else stage


def summarize(report: BatchReport) -> Sequence[str]:
    """Human-readable lines for a batch report."""
    lines = [report.message]
    for result in report.results:
        marker = "ok" if result.success else "FAILED"
        detail = str(result.doc_path) if result.success and result.doc_path else (result.error or "")
        lines.append(f"  [{marker}] {result.path}{f' -> {detail}' if detail else ''}")
    if report.index_error:
        lines.append(f"  [FAILED] index: {report.index_error}")
    elif report.index_path:
        lines.append(f"  [ok] index -> {report.index_path}")
    lines.append("success" if report.success else "failed")
    return lines


__all__ = ["Pipeline", "summarize"]
