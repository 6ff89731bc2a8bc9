from pathlib import Path
from typing import List, Optional

import pytest

from cliki.config import Config
from cliki.pages import PageOperations
from cliki.tools.interface import Editor, Pager, Renderer, VersionControl


class RecordingVCS(VersionControl):
    def __init__(self, repository: bool = True) -> None:
        self.repository = repository
        self.calls: List[tuple] = []
        self.messages: List[str] = []

    def is_repository(self, path: Path) -> bool:
        return self.repository

    def add(self, path: Path) -> int:
        self.calls.append(("add", str(path)))
        return 0

    def commit(self, template_path: Path) -> int:
        self.calls.append(("commit",))
        self.messages.append(template_path.read_text().strip())
        return 0

    def remove(self, path: Path) -> int:
        self.calls.append(("rm", str(path)))
        path.unlink()
        return 0

    def log(self, path: Optional[Path] = None) -> int:
        self.calls.append(("log", None if path is None else str(path)))
        return 0

    def blame(self, path: Path) -> int:
        self.calls.append(("blame", str(path)))
        return 0


class RecordingRenderer(Renderer):
    def __init__(self) -> None:
        self.rendered: List[str] = []

    def render(self, path: Path) -> bytes:
        self.rendered.append(str(path))
        return b"rendered " + path.read_bytes()


class RecordingPager(Pager):
    def __init__(self) -> None:
        self.pages: List[bytes] = []

    def page(self, content: bytes) -> int:
        self.pages.append(content)
        return 0


class WritingEditor(Editor):
    """Appends a line to the file, creating it if needed."""

    def __init__(self) -> None:
        self.edited: List[str] = []

    def edit(self, path: Path) -> int:
        self.edited.append(str(path))
        with open(path, "a", encoding="utf-8") as handle:
            handle.write("edited\n")
        return 0


def make_config(location: str = ".", **overrides: str) -> Config:
    options = {
        "location": location,
        "viewer": "less",
        "typesetter": "pandoc -t plain",
        "editor": "vi",
        "nocommit": "NO",
    }
    options.update(overrides)
    return Config.from_options(options)


def make_pages(config: Config, vcs: Optional[RecordingVCS] = None) -> PageOperations:
    return PageOperations(
        config,
        vcs=vcs or RecordingVCS(),
        renderer=RecordingRenderer(),
        pager=RecordingPager(),
        editor=WritingEditor(),
    )


@pytest.fixture
def wiki_dir(tmp_path, monkeypatch):
    """An empty page directory that is also the current directory."""

    wiki = tmp_path / "wiki"
    wiki.mkdir()
    (wiki / ".git").mkdir()
    monkeypatch.chdir(wiki)
    return wiki
