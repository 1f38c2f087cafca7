"""Command line entry point.

Exit code 0 means "cd to what's on stdout" to the shell hook, so only a
successful warp exits 0. Everything else, successful subcommands included,
exits 1.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable
from typing import TextIO

from warpdir import __version__
from warpdir.infrastructure.config import ENV_LOG_LEVEL, ENV_RC_PATH, resolve_log_level
from warpdir.infrastructure.logger import install_exception_hooks, logger, setup_logging
from warpdir.registry.errors import WarpError
from warpdir.registry.operations import WarpRegistry
from warpdir.registry.store import RcFileStore
from warpdir.shell.hooks import HOOKS, current_bin_name, render_hook

EXIT_WARP = 0
EXIT_NO_WARP = 1

PROG = "warpdir"
WARP_COMMAND = "_warp"

DESCRIPTION = f"""\
Warp to bookmarked directories.

Installation
In your shell's rc, add eval "$({PROG} hook <shell>)", for example
eval "$({PROG} hook bash)". An external program can't change the directory
of your shell, so the hook feeds the directory mapped to your warp point
back to the shell's cd command.
"""

EPILOG = f"""\
environment variables:
  {ENV_RC_PATH:<15} location of your rc file (default ~/.warprc)
  {ENV_LOG_LEVEL:<15} log level, overrides -v
"""


class _Parser(argparse.ArgumentParser):
    """Prints help and usage on stderr and always exits 1."""

    def print_usage(self, file: TextIO | None = None) -> None:
        super().print_usage(file or sys.stderr)

    def print_help(self, file: TextIO | None = None) -> None:
        super().print_help(file or sys.stderr)

    def exit(self, status: int = 0, message: str | None = None) -> None:  # type: ignore[override]
        if message:
            sys.stderr.write(message)
        sys.exit(EXIT_NO_WARP)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", dest="verbosity", action="count", default=0,
        help="increase the verbosity of output (can be repeated)",
    )
    parser.add_argument("--version", action="store_true", help="display version information and quit")

    sub = parser.add_subparsers(dest="command", metavar="<command> | <point>")

    p_add = sub.add_parser("add", help="add the current directory to your warp points")
    p_add.add_argument("point", nargs="?", help="warp point name (default: the current directory's name)")

    p_rm = sub.add_parser("rm", help="remove the warp point")
    p_rm.add_argument("point", nargs="?", help="warp point name (default: the current directory's name)")

    p_list = sub.add_parser("list", help="print all warp points")
    p_list.add_argument(
        "-c", "--completion", action="store_true",
        help="list warp points space delimited on a single line for completion scripts",
    )

    sub.add_parser("show", help="show warp points for the current directory")

    p_clean = sub.add_parser("clean", help="clean warps pointing to non-existent directories")
    p_clean.add_argument(
        "-d", "--dry-run", action="store_true", help="display warps to be removed without removing them"
    )

    p_path = sub.add_parser("path", help="show the path for the given warp point")
    p_path.add_argument("point", help="warp point name")

    p_hook = sub.add_parser("hook", help="print shell specific configuration")
    p_hook.add_argument("shell", help=f"the shell to print the hook for ({', '.join(HOOKS)})")

    sub.add_parser("help", help="show this help")

    # Reached by rewriting "warpdir <point>"; no help= keeps it out of the listing
    p_warp = sub.add_parser(WARP_COMMAND)
    p_warp.add_argument("point")

    return parser


def _route_default_point(argv: list[str], commands: set[str]) -> list[str]:
    """Turn ``warpdir [opts] <point>`` into ``warpdir [opts] _warp <point>``."""
    for i, arg in enumerate(argv):
        if arg.startswith("-"):
            continue
        if arg in commands:
            return argv
        return [*argv[:i], WARP_COMMAND, *argv[i:]]
    return argv


# --- Commands ---


def cmd_warp(args: argparse.Namespace, registry: WarpRegistry) -> int:
    print(registry.resolve(args.point))
    return EXIT_WARP


def cmd_path(args: argparse.Namespace, registry: WarpRegistry) -> int:
    print(registry.resolve(args.point), file=sys.stderr)
    return EXIT_NO_WARP


def cmd_add(args: argparse.Namespace, registry: WarpRegistry) -> int:
    point = registry.add(args.point, os.getcwd())
    print(f"Successfully added {point.name} -> {point.path}", file=sys.stderr)
    return EXIT_NO_WARP


def cmd_rm(args: argparse.Namespace, registry: WarpRegistry) -> int:
    point = registry.remove(args.point, os.getcwd())
    print(f"Successfully removed {point.name} -> {point.path}", file=sys.stderr)
    return EXIT_NO_WARP


def cmd_list(args: argparse.Namespace, registry: WarpRegistry) -> int:
    if args.completion:
        print(" ".join(registry.completion_names()))
        return EXIT_NO_WARP

    points = registry.list_points()
    print(f"total: {len(points)}")
    for point in points:
        print(f"\t{point.name} -> {point.path}")
    return EXIT_NO_WARP


def cmd_show(args: argparse.Namespace, registry: WarpRegistry) -> int:
    current_dir = os.getcwd()
    names = registry.show(current_dir)
    if not names:
        print(f"no warp points for '{current_dir}'")
        return EXIT_NO_WARP

    print(f"total: {len(names)}")
    for name in names:
        print(f"\t{name} -> {current_dir}")
    return EXIT_NO_WARP


def cmd_clean(args: argparse.Namespace, registry: WarpRegistry) -> int:
    missing = registry.clean(dry_run=args.dry_run)
    verb = "Would remove" if args.dry_run else "Removing"
    for entry in missing:
        print(f"Missing path: {entry.path}", file=sys.stderr)
        for name in entry.points:
            print(f"  - {verb} {name}", file=sys.stderr)
        if not args.dry_run:
            print(f"Successfully removed {entry.path}", file=sys.stderr)
    return EXIT_NO_WARP


def cmd_hook(args: argparse.Namespace, registry: WarpRegistry) -> int:
    print(render_hook(args.shell, current_bin_name()))
    return EXIT_NO_WARP


COMMANDS: dict[str, Callable[[argparse.Namespace, WarpRegistry], int]] = {
    WARP_COMMAND: cmd_warp,
    "path": cmd_path,
    "add": cmd_add,
    "rm": cmd_rm,
    "list": cmd_list,
    "show": cmd_show,
    "clean": cmd_clean,
    "hook": cmd_hook,
}


def main(argv: list[str] | None = None, registry: WarpRegistry | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(_route_default_point(argv, {*COMMANDS, "help"}))

    setup_logging(resolve_log_level(args.verbosity))
    install_exception_hooks()

    if args.version:
        print(f"{PROG} {__version__}", file=sys.stderr)
        return EXIT_NO_WARP

    if args.command == "help":
        parser.print_help()
        return EXIT_NO_WARP

    handler = COMMANDS.get(args.command)
    if handler is None:
        logger.error("missing command or warp point. see help for more information")
        return EXIT_NO_WARP

    if registry is None:
        registry = WarpRegistry(RcFileStore())

    try:
        return handler(args, registry)
    except WarpError as err:
        logger.error(str(err))
        return EXIT_NO_WARP
    except OSError as err:
        # e.g. the current directory was deleted out from under us
        logger.error("Filesystem error", error=str(err))
        return EXIT_NO_WARP


def run() -> None:
    sys.exit(main())
