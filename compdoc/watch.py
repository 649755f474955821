"""Polling file watcher used by watch mode."""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .logging import get_logger
from .providers import component_files


class ChangeWatcher:
    """Reports component sources whose size or mtime changed since the last poll."""

    def __init__(
        self,
        directory: Path,
        extension: str,
        *,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.directory = Path(directory)
        self.extension = extension
        self.interval = interval
        self._sleep = sleep
        self._snapshot: Dict[Path, tuple[int, int]] = self._scan()
        self.logger = get_logger("watch")

    def poll(self) -> List[Path]:
        """Return changed or new files, sorted; deletions are not reported."""
        current = self._scan()
        changed = sorted(
            path for path, signature in current.items() if self._snapshot.get(path) != signature
        )
        self._snapshot = current
        return changed

    def watch(
        self,
        on_change: Callable[[Path], object],
        *,
        max_cycles: Optional[int] = None,
    ) -> None:
        """Call ``on_change`` for each changed file until interrupted or ``max_cycles`` polls ran."""
        self.logger.info("Watching %s for *%s changes", self.directory, self.extension)
        cycles = 0
        while max_cycles is None or cycles < max_cycles:
            self._sleep(self.interval)
            for path in self.poll():
                self.logger.info("File changed: %s", path)
                on_change(path)
            cycles += 1

    def _scan(self) -> Dict[Path, tuple[int, int]]:
        snapshot: Dict[Path, tuple[int, int]] = {}
        for path in component_files(self.directory, self.extension):
            try:
                stat_result = path.stat()
            except FileNotFoundError:
                continue
            snapshot[path] = (stat_result.st_size, stat_result.st_mtime_ns)
        return snapshot


__all__ = ["ChangeWatcher"]
