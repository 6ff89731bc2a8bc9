import subprocess
from pathlib import Path

import pytest

from cliki.errors import ToolError
from cliki.tools import ShellEditor, ShellPager, ShellRenderer


@pytest.fixture
def recorded(monkeypatch):
    calls = []

    def fake_run(cmd, check=False, input=None, stdout=None):
        calls.append({"cmd": cmd, "input": input, "captured": stdout is subprocess.PIPE})
        out = b"text" if stdout is subprocess.PIPE else None
        return subprocess.CompletedProcess(args=cmd, returncode=3, stdout=out)

    monkeypatch.setattr("cliki.tools.shell.subprocess.run", fake_run)
    return calls


def test_renderer_splits_command_line_and_captures_output(recorded):
    output = ShellRenderer("pandoc -t plain").render(Path("home.md"))

    assert output == b"text"
    assert recorded == [
        {"cmd": ["pandoc", "-t", "plain", "home.md"], "input": None, "captured": True},
    ]


def test_pager_feeds_content_on_stdin_and_returns_status(recorded):
    assert ShellPager("less -R").page(b"page") == 3
    assert recorded == [{"cmd": ["less", "-R"], "input": b"page", "captured": False}]


def test_editor_receives_quoted_arguments(recorded):
    ShellEditor("code --wait 'new window'").edit(Path("home.md"))
    assert recorded[0]["cmd"] == ["code", "--wait", "new window", "home.md"]


def test_empty_command_line_is_rejected(recorded):
    with pytest.raises(ToolError):
        ShellEditor("").edit(Path("home.md"))
    assert recorded == []


def test_program_that_cannot_be_launched_raises(monkeypatch):
    def fake_run(*args, **kwargs):
        raise FileNotFoundError("No such file or directory: 'pandoc'")

    monkeypatch.setattr("cliki.tools.shell.subprocess.run", fake_run)

    with pytest.raises(ToolError) as excinfo:
        ShellRenderer("pandoc").render(Path("home.md"))
    assert "failed to execute pandoc" in str(excinfo.value)


def test_whitespace_only_command_line_does_not_run_the_page(recorded):
    with pytest.raises(ToolError) as excinfo:
        ShellRenderer("   ").render(Path("home.md"))
    assert "no program configured" in str(excinfo.value)
    assert recorded == []


def test_unbalanced_quotes_are_reported_as_tool_error(recorded):
    with pytest.raises(ToolError) as excinfo:
        ShellEditor("vim '").edit(Path("home.md"))
    assert "vim '" in str(excinfo.value)
    assert recorded == []
