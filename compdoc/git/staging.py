"""Git helpers: staged component discovery and staging of generated docs."""

from __future__ import annotations

import subprocess
from pathlib import Path, PurePosixPath
from typing import Callable, Iterable, List, Sequence

from ..errors import GitError
from ..logging import get_logger


class GitStaging:
    """Lists staged component sources and stages regenerated documents."""

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("git")

    def staged_files(self, repo_path: Path) -> List[str]:
        """Return repository-relative paths currently staged for commit."""
        output = self._run(
            ["git", "diff", "--cached", "--name-only", "--relative"],
            cwd=repo_path,
            capture_output=True,
        )
        return [line.strip() for line in output.splitlines() if line.strip()]

    def staged_components(
        self,
        repo_path: Path,
        components_dir: Path,
        extension: str,
    ) -> List[Path]:
        """Staged files under ``components_dir`` with ``extension``, as absolute paths."""
        prefix = _relative_prefix(repo_path, components_dir)
        selected: List[Path] = []
        for rel in self.staged_files(repo_path):
            normalized = rel.replace("\\", "/")
            if not normalized.endswith(extension):
                continue
            if prefix and not normalized.startswith(f"{prefix}/"):
                continue
            selected.append(repo_path / PurePosixPath(normalized))
        return selected

    def stage(self, repo_path: Path, files: Sequence[Path | str]) -> bool:
        """``git add`` the given files; False when the path is not a repository."""
        if not (repo_path / ".git").exists():
            self.logger.debug("Skipping staging; %s is not a Git repository", repo_path)
            return False
        relative = [_to_relative(repo_path, Path(file)) for file in files]
        if not relative:
            return False
        self._run(["git", "add", "--", *relative], cwd=repo_path)
        self.logger.info("Staged %d documentation file(s)", len(relative))
        return True

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        args = list(args)
        try:
            return self._runner(args, cwd=cwd, capture_output=capture_output)
        except (OSError, subprocess.CalledProcessError) as exc:
            raise GitError(f"git command failed: {' '.join(args)}: {exc}") from exc

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


def _relative_prefix(repo_path: Path, directory: Path) -> str:
    try:
        prefix = directory.resolve().relative_to(repo_path.resolve()).as_posix().rstrip("/")
    except ValueError:
        return directory.as_posix().rstrip("/")
    return "" if prefix == "." else prefix


def _to_relative(repo: Path, path: Path) -> str:
    try:
        return path.resolve().relative_to(repo.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["GitStaging"]
