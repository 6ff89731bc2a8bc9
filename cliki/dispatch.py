"""
Validation and dispatch of a cliki operation.

Checks run in a fixed order so the first failing precondition decides
the exit code: the location must exist, an operation must be named, the
location must be a repository, and only then are the per-operation
arguments validated.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from .config import Config
from .errors import (
    EditorNotConfiguredError,
    MissingResourceError,
    NotARepositoryError,
    UsageError,
)
from .pages import PageOperations

LOG = logging.getLogger(__name__)

OPERATIONS: Dict[str, str] = {
    "s": "show",
    "show": "show",
    "e": "edit",
    "edit": "edit",
    "d": "delete",
    "delete": "delete",
    "l": "log",
    "log": "log",
    "b": "blame",
    "blame": "blame",
}

PAGE_OPTIONAL = frozenset({"log"})


@contextmanager
def working_directory(path: Path) -> Iterator[None]:
    original = Path.cwd()
    LOG.debug("Changing directory to %s", path)
    os.chdir(path)
    try:
        yield
    finally:
        os.chdir(original)


def resolve_operation(operation: str) -> str:
    try:
        return OPERATIONS[operation]
    except KeyError:
        raise UsageError(f"unknown operation: {operation}") from None


class CommandDispatcher:
    """
    Validate a requested operation and run it against the page location.
    """

    def __init__(self, config: Config, pages: PageOperations) -> None:
        self.config = config
        self.pages = pages

    @property
    def location(self) -> Path:
        return Path(self.config.location).expanduser()

    def dispatch(self, operation: Optional[str], page: Optional[str] = None) -> None:
        location = self.location
        if not location.is_dir():
            raise MissingResourceError(f"location {location} is not a directory")

        with working_directory(location):
            if not operation:
                raise UsageError("no operation given")

            if not self.pages.in_repository():
                raise NotARepositoryError(f"location {location} is not a git repository")

            self._run(resolve_operation(operation), page)

    def _run(self, operation: str, page: Optional[str]) -> None:
        page = page or None
        if page is None and operation not in PAGE_OPTIONAL:
            raise UsageError(f"{operation} requires a page name")

        if operation == "edit" and not self.config.editor.strip():
            raise EditorNotConfiguredError("no editor configured; set EDITOR or use -e")

        LOG.info("Running %s on %s", operation, page if page is not None else "all pages")
        if operation == "show":
            self.pages.show(page)
        elif operation == "edit":
            self.pages.edit(page)
        elif operation == "delete":
            self.pages.delete(page)
        elif operation == "log":
            self.pages.log(page)
        elif operation == "blame":
            self.pages.blame(page)
