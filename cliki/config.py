"""
Configuration model for cliki.

The effective configuration is merged from built-in defaults, the
per-user config file, command-line flags and an optional override file.
The CLI builds a single Config instance and passes it down into the
dispatcher so behavior can be adjusted without relying on global state.

Config files hold one ``key=value`` setting per line. Any line that
contains a ``#`` is treated as a comment, wherever the ``#`` appears, so
values cannot contain ``#``.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .errors import ConfigReadError

LOG = logging.getLogger(__name__)

KNOWN_OPTIONS = ("location", "viewer", "typesetter", "editor", "nocommit")

HOME_CONFIG_PATH = Path("~/.config/cliki.conf")

_TEMPLATE = """\
# cliki configuration file
#
# Settings are written one per line as key=value. Any line containing
# a hash sign is ignored. Whitespace around keys and values is kept.
#
# Directory holding the pages; it must be a git repository.
#location={location}
#
# Program that displays rendered pages, reading them from stdin.
#viewer={viewer}
#
# Program that renders a page file to plain text on stdout.
#typesetter={typesetter}
#
# Program used to edit pages. Defaults to $EDITOR.
#editor={editor}
#
# Set to YES to edit pages without committing the result.
#nocommit={nocommit}
"""


@dataclass(frozen=True)
class Config:
    """
    Effective configuration for a cliki run.

    Unknown keys read from config files are kept in ``extra`` but are
    not used by any operation.
    """

    location: str
    viewer: str
    typesetter: str
    editor: str = ""
    nocommit: str = "NO"
    extra: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def commit_enabled(self) -> bool:
        # Only the exact value NO enables commits; typos disable them.
        return self.nocommit == "NO"

    @classmethod
    def from_options(cls, options: Mapping[str, str]) -> "Config":
        known = {key: options[key] for key in KNOWN_OPTIONS if key in options}
        extra = {key: value for key, value in options.items() if key not in KNOWN_OPTIONS}
        return cls(extra=MappingProxyType(extra), **known)


def default_options(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Return the built-in defaults, resolving external programs on PATH.
    """

    if environ is None:
        environ = os.environ

    pandoc = shutil.which("pandoc") or "pandoc"
    return {
        "location": os.getcwd(),
        "viewer": shutil.which("less") or "less",
        "typesetter": f"{pandoc} -t plain",
        "editor": environ.get("EDITOR", ""),
        "nocommit": "NO",
    }


def parse_config_lines(lines: Iterable[str]) -> List[Tuple[str, str]]:
    """
    Parse ``key=value`` lines into ordered pairs.

    Lines containing ``#`` anywhere and lines without ``=`` are skipped.
    The key is everything before the first ``=`` and the value everything
    after it; nothing is trimmed except the line terminator.
    """

    pairs: List[Tuple[str, str]] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if "#" in line or "=" not in line:
            continue
        key, value = line.split("=", 1)
        pairs.append((key, value))
    return pairs


def load_config_file(path: Path) -> Dict[str, str]:
    try:
        with open(path, encoding="utf-8") as handle:
            options = dict(parse_config_lines(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(f"cannot read configuration file {path}: {exc}") from exc
    LOG.debug("Loaded %d option(s) from %s", len(options), path)
    return options


def render_config_template(defaults: Mapping[str, str]) -> str:
    return _TEMPLATE.format(**{key: defaults.get(key, "") for key in KNOWN_OPTIONS})


def ensure_home_config(path: Path, defaults: Mapping[str, str]) -> Dict[str, str]:
    """
    Load the per-user config file, creating a commented template if absent.

    A freshly written template has every setting commented out, so it
    contributes no options. Failing to write it is reported but is not
    fatal.
    """

    if path.exists():
        return load_config_file(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_config_template(defaults), encoding="utf-8")
    except OSError as exc:
        LOG.warning("Could not create default configuration %s: %s", path, exc)
        return {}

    print(f"cliki: created default configuration file {path}", file=sys.stderr)
    return {}


def merge(
    defaults: Mapping[str, str],
    home: Mapping[str, str],
    flags: Mapping[str, str],
    override: Mapping[str, str],
) -> Config:
    """
    Merge option sources into a Config; later sources win key by key.
    """

    options: Dict[str, str] = {}
    for source in (defaults, home, flags, override):
        options.update(source)
    return Config.from_options(options)
