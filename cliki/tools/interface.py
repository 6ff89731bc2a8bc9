"""
Abstract interfaces for the external programs used by cliki.

Each interface exposes one method per capability the page operations
need. Keeping them separate from the concrete process-spawning
implementations makes it easy to substitute doubles in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class VersionControl(ABC):
    """
    Version history of the page directory.
    """

    @abstractmethod
    def is_repository(self, path: Path) -> bool:
        """
        Return True if path carries the repository marker.
        """

    @abstractmethod
    def add(self, path: Path) -> int:
        """
        Stage path for the next commit.
        """

    @abstractmethod
    def commit(self, template_path: Path) -> int:
        """
        Commit staged changes, proposing the message in template_path.

        An empty message is accepted.
        """

    @abstractmethod
    def remove(self, path: Path) -> int:
        """
        Delete path and stage its removal.
        """

    @abstractmethod
    def log(self, path: Optional[Path] = None) -> int:
        """
        Show the commit history, restricted to path when given.
        """

    @abstractmethod
    def blame(self, path: Path) -> int:
        """
        Show line authorship for path.
        """


class Renderer(ABC):
    @abstractmethod
    def render(self, path: Path) -> bytes:
        """
        Return the rendered text of the page at path.
        """


class Pager(ABC):
    @abstractmethod
    def page(self, content: bytes) -> int:
        """
        Display content to the user and return the exit status.
        """


class Editor(ABC):
    @abstractmethod
    def edit(self, path: Path) -> int:
        """
        Edit path interactively and return once the user is done.
        """
