"""
External programs cliki delegates its work to.
"""

from .interface import Editor, Pager, Renderer, VersionControl
from .shell import ShellEditor, ShellPager, ShellRenderer

__all__ = [
    "Editor",
    "Pager",
    "Renderer",
    "ShellEditor",
    "ShellPager",
    "ShellRenderer",
    "VersionControl",
]
