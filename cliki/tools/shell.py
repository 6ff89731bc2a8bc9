"""
Renderer, pager and editor backed by user-configured command lines.

Command lines are split shell-style, so a setting such as
``pandoc -t plain`` or ``code --wait`` works as expected. Programs
inherit the controlling terminal. Their exit statuses are returned but
never turned into errors; only a failure to launch them is.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from ..errors import ToolError
from .interface import Editor, Pager, Renderer

LOG = logging.getLogger(__name__)


def _run_program(
    command: str,
    args: List[str],
    input_bytes: Optional[bytes] = None,
    capture: bool = False,
) -> subprocess.CompletedProcess[bytes]:
    """
    Run a configured program and return the completed process.
    """

    try:
        program = shlex.split(command)
    except ValueError as exc:
        raise ToolError(f"cannot parse command line {command!r}: {exc}") from exc
    if not program:
        raise ToolError("no program configured")

    cmd = [*program, *args]

    LOG.debug("Running command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            check=False,
            input=input_bytes,
            stdout=subprocess.PIPE if capture else None,
        )
    except OSError as exc:
        raise ToolError(f"failed to execute {cmd[0]}: {exc}") from exc

    if completed.returncode != 0:
        LOG.debug("%s exited with status %d", cmd[0], completed.returncode)
    return completed


class ShellRenderer(Renderer):
    def __init__(self, command: str) -> None:
        self.command = command

    def render(self, path: Path) -> bytes:
        return _run_program(self.command, [str(path)], capture=True).stdout or b""


class ShellPager(Pager):
    def __init__(self, command: str) -> None:
        self.command = command

    def page(self, content: bytes) -> int:
        return _run_program(self.command, [], input_bytes=content).returncode


class ShellEditor(Editor):
    def __init__(self, command: str) -> None:
        self.command = command

    def edit(self, path: Path) -> int:
        return _run_program(self.command, [str(path)]).returncode
