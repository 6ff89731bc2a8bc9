"""
Git integration for cliki.

This module runs the git CLI for staging, committing, deleting and
inspecting page history. Commands inherit the terminal so git's own
pager and editor behave as they would when invoked by hand.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

from .errors import GitError
from .tools.interface import VersionControl

LOG = logging.getLogger(__name__)

REPOSITORY_MARKER = ".git"


def find_git() -> str:
    """
    Locate the git executable on PATH, falling back to the bare name.
    """

    return shutil.which("git") or "git"


class GitVersionControl(VersionControl):
    """
    VersionControl implementation driving a git executable.

    The executable is resolved once, when the instance is created.
    """

    def __init__(self, executable: Optional[str] = None) -> None:
        self.executable = executable or find_git()

    def _run_git(self, args: List[str]) -> int:
        """
        Run a git command and return its exit status.

        This helper is used for all git invocations so that error
        handling and logging are centralized.
        """

        cmd = [self.executable, *args]
        LOG.debug("Running git command: %s", " ".join(cmd))
        try:
            completed = subprocess.run(cmd, check=False)
        except OSError as exc:
            raise GitError(f"failed to execute git: {exc}") from exc

        if completed.returncode != 0:
            LOG.debug("git exited with status %d", completed.returncode)
        return completed.returncode

    def is_repository(self, path: Path) -> bool:
        return (path / REPOSITORY_MARKER).exists()

    def add(self, path: Path) -> int:
        return self._run_git(["add", "--", str(path)])

    def commit(self, template_path: Path) -> int:
        return self._run_git(["commit", "--allow-empty-message", "-t", str(template_path)])

    def remove(self, path: Path) -> int:
        return self._run_git(["rm", "--", str(path)])

    def log(self, path: Optional[Path] = None) -> int:
        args = ["log"]
        if path is not None:
            args.extend(["--", str(path)])
        return self._run_git(args)

    def blame(self, path: Path) -> int:
        return self._run_git(["blame", "--", str(path)])
