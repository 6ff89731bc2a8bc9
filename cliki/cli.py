"""
Command-line interface for cliki.

This module is responsible for argument parsing, assembling the
effective configuration and delegating to the dispatcher.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from . import __version__
from .config import (
    HOME_CONFIG_PATH,
    Config,
    default_options,
    ensure_home_config,
    load_config_file,
    merge,
)
from .dispatch import CommandDispatcher
from .errors import CLikiError, ConfigReadError
from .git_adapter import GitVersionControl
from .logging_utils import configure_logging
from .pages import PageOperations
from .tools import ShellEditor, ShellPager, ShellRenderer

LOG = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliki",
        description="Manage a directory of Markdown pages kept in a git repository.",
        epilog=(
            "operations: s/show PAGE, e/edit PAGE, d/delete PAGE, "
            "l/log [PAGE], b/blame PAGE"
        ),
    )

    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation to run: show, edit, delete, log or blame (or s, e, d, l, b).",
    )
    parser.add_argument(
        "page",
        nargs="?",
        help="Name of the page, without the .md suffix.",
    )
    parser.add_argument(
        "-c",
        dest="config_file",
        metavar="FILE",
        help="Read settings from FILE; they override all other options.",
    )
    parser.add_argument(
        "-l",
        dest="location",
        metavar="DIR",
        help="Directory holding the pages.",
    )
    parser.add_argument(
        "-s",
        dest="viewer",
        metavar="PROGRAM",
        help="Program used to display rendered pages.",
    )
    parser.add_argument(
        "-t",
        dest="typesetter",
        metavar="PROGRAM",
        help="Program used to render pages.",
    )
    parser.add_argument(
        "-e",
        dest="editor",
        metavar="PROGRAM",
        help="Program used to edit pages.",
    )
    parser.add_argument(
        "-n",
        dest="nocommit",
        action="store_true",
        help="Do not commit after editing a page.",
    )
    parser.add_argument(
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )

    return parser


def flag_options(args: argparse.Namespace) -> Dict[str, str]:
    options = {
        key: getattr(args, key)
        for key in ("location", "viewer", "typesetter", "editor")
        if getattr(args, key) is not None
    }
    if args.nocommit:
        options["nocommit"] = "YES"
    return options


def build_config(args: argparse.Namespace, home_config: Optional[Path] = None) -> Config:
    """
    Merge defaults, the home config file, flags and the ``-c`` file.

    The ``-c`` file is applied last, so its settings override flags given
    alongside it.
    """

    defaults = default_options()
    home_path = (home_config or HOME_CONFIG_PATH).expanduser()
    home = ensure_home_config(home_path, defaults)

    override: Dict[str, str] = {}
    if args.config_file is not None:
        override_path = Path(args.config_file)
        if not override_path.is_file():
            raise ConfigReadError(f"cannot read configuration file {override_path}")
        override = load_config_file(override_path)

    return merge(defaults, home, flag_options(args), override)


def build_dispatcher(config: Config) -> CommandDispatcher:
    pages = PageOperations(
        config,
        vcs=GitVersionControl(),
        renderer=ShellRenderer(config.typesetter),
        pager=ShellPager(config.viewer),
        editor=ShellEditor(config.editor),
    )
    return CommandDispatcher(config, pages)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(verbosity=args.verbose)

    try:
        config = build_config(args)
        LOG.debug("Effective configuration: %s", config)
        build_dispatcher(config).dispatch(args.operation, args.page)
    except KeyboardInterrupt:
        return 130
    except CLikiError as exc:
        print(f"cliki: {exc}", file=sys.stderr)
        return exc.exit_code
    except Exception as exc:  # noqa: BLE001
        LOG.debug("Unexpected failure", exc_info=True)
        print(f"cliki: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
