"""
safari-tabs - CLI entry point.
Provides activate, list, and close subcommands.
"""

import argparse
import json
import logging
import sys

from .__version__ import __version__
from .activator import TabActivator
from .closer import TabCloser
from .config import get_log_level
from .constants import (
    ACTIVE_TAB_MARKER,
    CLOSE_ALIASES,
    CLOSE_TARGETS,
    EXIT_FAILURE,
    FRONTMOST_WINDOW,
    TREE_BRANCH,
    TREE_LAST,
    TREE_PIPE,
    TREE_SPACE,
)
from .errors import SafariTabsError
from .schemas import WindowInfo
from .window_service import create_service

logger = logging.getLogger(__name__)


def format_windows(windows: list[WindowInfo]) -> str:
    """Render windows and their tabs as a box-drawing tree."""
    lines = ["Windows"]
    for i, win in enumerate(windows):
        last_win = i == len(windows) - 1
        lines.append(f"{TREE_LAST if last_win else TREE_BRANCH}Window {win.index}")
        indent = TREE_SPACE if last_win else TREE_PIPE
        for j, tab in enumerate(win.tabs):
            last_tab = j == len(win.tabs) - 1
            marker = ACTIVE_TAB_MARKER if tab.index == win.active_tab else ""
            branch = TREE_LAST if last_tab else TREE_BRANCH
            lines.append(f"{indent}{branch}[{tab.index:2d}] {marker}{tab.title}")
    return "\n".join(lines)


def cmd_activate(args):
    """Activate a window, and optionally one of its tabs."""
    logger.debug("Activating %s", "x".join(args.ordinals))
    TabActivator(create_service()).run(args.ordinals)


def cmd_list(args):
    """List open windows and tabs."""
    windows = create_service().describe_windows()
    if args.json:
        payload = [w.model_dump(by_alias=True) for w in windows]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(format_windows(windows))


def cmd_close(args):
    """Close a window or tabs."""
    closed = TabCloser(create_service()).close(args.what, args.window, args.tab)
    logger.debug("Closed tabs: %s", closed)


def _split_activate(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate the raw window/tab values of an ``activate`` command.

    The values are handed to TabActivator untouched, so strings such as
    ``-x`` or ``-1abc`` are parsed as ordinals rather than rejected by
    argparse as unknown options.
    """
    for i, token in enumerate(argv):
        if token in ("activate", "a"):
            head, values = argv[: i + 1], argv[i + 1 :]
            if values[:1] in (["-h"], ["--help"]):
                return head + values[:1], []
            return head, values
        if not token.startswith("-"):
            break
    return argv, []


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_log_level(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="safari-tabs",
        description="safari-tabs - activate, list and close Safari windows and tabs",
        epilog=(
            "Examples:\n"
            "  safari-tabs activate 2          Bring window 2 to the front\n"
            "  safari-tabs activate 1 3        Bring window 1 to the front, switch to tab 3\n"
            "  safari-tabs list --json         Print windows and tabs as JSON\n"
            "  safari-tabs close tabs-right    Close tabs right of the current tab\n"
            "  safari-tabs close win 2         Close window 2\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    activate_p = sub.add_parser("activate", aliases=["a"], help="Activate a window or tab")
    # Values are split off by _split_activate; these only document them.
    activate_p.add_argument("window", nargs="?", help="Window number (1 = frontmost)")
    activate_p.add_argument(
        "tab", nargs="?", default=None, help="Tab number (omit or 0 to keep the current tab)"
    )

    list_p = sub.add_parser("list", aliases=["l"], help="List open windows and tabs")
    list_p.add_argument("--json", "-j", action="store_true", help="Output JSON, not text")

    close_p = sub.add_parser("close", aliases=["c"], help="Close windows and/or tabs")
    close_p.add_argument(
        "what",
        help=f"What to close: {', '.join(CLOSE_TARGETS)} (or {', '.join(CLOSE_ALIASES)})",
    )
    close_p.add_argument(
        "window",
        nargs="?",
        type=int,
        default=FRONTMOST_WINDOW,
        help=f"Target window (default: {FRONTMOST_WINDOW})",
    )
    close_p.add_argument(
        "tab", nargs="?", type=int, default=0, help="Target tab (default: current tab)"
    )

    head, ordinals = _split_activate(sys.argv[1:] if argv is None else list(argv))
    args = parser.parse_args(head)
    args.ordinals = ordinals
    if not args.command:
        parser.print_help()
        return

    _configure_logging(args.verbose)

    handler = {
        "activate": cmd_activate,
        "a": cmd_activate,
        "list": cmd_list,
        "l": cmd_list,
        "close": cmd_close,
        "c": cmd_close,
    }[args.command]

    try:
        handler(args)
    except SafariTabsError as e:
        print(e.diagnostic, file=sys.stderr)
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
