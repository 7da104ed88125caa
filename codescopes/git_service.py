"""List repository files through the git CLI."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from codescopes.constants import GIT_EXECUTABLE
from codescopes.errors import CodescopesError, GitCommandError

logger = logging.getLogger(__name__)

_RENAME_STATUSES = ("R", "C")


def _split_nul(output: str) -> list[str]:
    return [item for item in output.split("\0") if item]


class GitService:
    def __init__(self, cwd: Path, executable: str = GIT_EXECUTABLE) -> None:
        self._cwd = cwd
        self._executable = executable

    def _run(self, *args: str, cwd: Optional[Path] = None) -> str:
        command = [self._executable, *args]
        logger.debug("Running %s in %s", " ".join(command), cwd or self._cwd)
        try:
            completed = subprocess.run(
                command,
                cwd=str(cwd or self._cwd),
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except OSError as exc:
            raise GitCommandError(command, str(exc)) from exc
        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"exit code {completed.returncode}"
            raise GitCommandError(command, detail)
        return completed.stdout

    def toplevel(self) -> Path:
        return Path(self._run("rev-parse", "--show-toplevel").strip())

    def tracked_files(self, relative_to: Optional[Path] = None) -> list[str]:
        root = self.toplevel()
        paths = sorted(_split_nul(self._run("ls-files", "-z", cwd=root)))
        return self._relativize(paths, root, relative_to)

    def changed_files(
        self,
        ref: Optional[str] = None,
        staged: bool = False,
        relative_to: Optional[Path] = None,
    ) -> list[str]:
        root = self.toplevel()
        if ref is not None or staged:
            args = ["diff", "--name-only", "-z"]
            if staged:
                args.append("--cached")
            if ref is not None:
                args.append(ref)
            paths = sorted(set(_split_nul(self._run(*args, cwd=root))))
        else:
            paths = self._working_tree_changes(root)
        return self._relativize(paths, root, relative_to)

    def _relativize(
        self, paths: list[str], toplevel: Path, relative_to: Optional[Path]
    ) -> list[str]:
        """Rebase toplevel-relative paths onto ``relative_to``, dropping paths outside it."""
        if relative_to is None:
            return paths
        try:
            prefix = relative_to.resolve().relative_to(toplevel.resolve()).as_posix()
        except ValueError:
            raise CodescopesError(
                f"{relative_to} is not inside the git repository at {toplevel}"
            ) from None
        if prefix == ".":
            return paths
        marker = f"{prefix}/"
        logger.debug("Limiting git paths to %s", marker)
        return [path[len(marker) :] for path in paths if path.startswith(marker)]

    def _working_tree_changes(self, root: Path) -> list[str]:
        output = self._run(
            "status", "--porcelain=v1", "-z", "--untracked-files=all", cwd=root
        )
        entries = _split_nul(output)
        paths: set[str] = set()
        index = 0
        while index < len(entries):
            entry = entries[index]
            status, path = entry[:2], entry[3:]
            paths.add(path)
            if status[0] in _RENAME_STATUSES:
                # The rename source follows as its own field.
                index += 1
            index += 1
        return sorted(paths)
