"""
Custom exception types used across cliki.

Every error carries the process exit code the CLI reports for it, so
the layers below the CLI can raise without knowing how the process
terminates.
"""

from __future__ import annotations


class CLikiError(Exception):
    """Base class for all cliki specific errors."""

    exit_code = 1


class UsageError(CLikiError):
    """Raised when a required operation or page argument is missing."""

    exit_code = 1


class MissingResourceError(CLikiError):
    """Raised when a page, directory or file does not exist."""

    exit_code = 2


class ConfigReadError(MissingResourceError):
    """Raised when an explicitly requested config file cannot be read."""


class NotARepositoryError(CLikiError):
    """Raised when the page location is not under version control."""

    exit_code = 3


class EditorNotConfiguredError(CLikiError):
    """Raised when editing is requested without an editor configured."""

    exit_code = 4


class ToolError(CLikiError):
    """Raised when an external program cannot be launched."""

    exit_code = 127


class GitError(ToolError):
    """Raised when the git executable cannot be launched."""
