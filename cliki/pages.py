"""
Page operations for cliki.

Each operation turns a page name into ``<name>.md`` relative to the
current directory, which the dispatcher has already set to the page
location, and hands the real work to the external collaborators.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import Config
from .errors import MissingResourceError
from .tools.interface import Editor, Pager, Renderer, VersionControl

LOG = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"


def page_path(name: str) -> Path:
    return Path(name + PAGE_SUFFIX)


@contextmanager
def commit_template(message: str) -> Iterator[Path]:
    """
    Write message to a temporary commit template, removed on exit.
    """

    fd, name = tempfile.mkstemp(prefix="cliki-", suffix=".txt")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(message + "\n")
        yield Path(name)
    finally:
        os.remove(name)


class PageOperations:
    """
    The operations cliki offers on a page directory.
    """

    def __init__(
        self,
        config: Config,
        vcs: VersionControl,
        renderer: Renderer,
        pager: Pager,
        editor: Editor,
    ) -> None:
        self.config = config
        self.vcs = vcs
        self.renderer = renderer
        self.pager = pager
        self.editor = editor

    def in_repository(self) -> bool:
        return self.vcs.is_repository(Path("."))

    def _existing_page(self, name: str) -> Path:
        path = page_path(name)
        if not path.is_file():
            raise MissingResourceError(f"page {name} does not exist")
        return path

    def show(self, name: str) -> int:
        path = self._existing_page(name)
        return self.pager.page(self.renderer.render(path))

    def edit(self, name: str) -> None:
        """
        Edit a page, creating it if needed, and commit the result.

        The commit is skipped unless ``nocommit`` is exactly ``NO``.
        """

        path = page_path(name)
        verb = "Edited" if path.exists() else "Created"
        message = f"{verb} {name}"

        with commit_template(message) as template:
            self.editor.edit(path)
            if not self.config.commit_enabled:
                LOG.info("nocommit is %r; not committing %s", self.config.nocommit, path)
                return
            self.vcs.add(path)
            self.vcs.commit(template)

    def delete(self, name: str) -> None:
        # Deletions are always committed, whatever nocommit says.
        path = self._existing_page(name)
        with commit_template(f"Deleted {name}") as template:
            self.vcs.remove(path)
            self.vcs.commit(template)

    def log(self, name: Optional[str] = None) -> int:
        if name is None:
            return self.vcs.log()
        return self.vcs.log(self._existing_page(name))

    def blame(self, name: str) -> int:
        return self.vcs.blame(self._existing_page(name))
