#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from apisurface.__version__ import __version__
from apisurface.interfaces.cli.commands.members_cli import cmd_members
from apisurface.interfaces.cli.commands.options_cli import cmd_options
from apisurface.interfaces.cli.commands.types_cli import cmd_types


def _add_common_arguments(s: argparse.ArgumentParser) -> None:
    s.add_argument("graph", help="graph document (.json, .yaml or .yml)")
    s.add_argument("--prefix", help="only analyze projects whose path starts with this (default: src)")
    s.add_argument("-o", "--output", help="report file, '-' for stdout (default: from config)")
    s.add_argument(
        "--min-bucket-size",
        type=int,
        help="report only projects with more than N matched types",
    )
    s.add_argument("--config", help="YAML config file")
    s.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="apisurface",
        description="apisurface - public API surface reports over a compiled type graph",
        epilog="Examples:\n"
        "  apisurface types graph.json                        # Public top-level types per project\n"
        "  apisurface options graph.json --suffix Settings    # Types named *Settings\n"
        "  apisurface members graph.yaml --pattern subscribe  # Subscription APIs, inherited included\n"
        "  apisurface members graph.yaml --declared-only -o - # Own members only, to stdout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'apisurface <command> --help' for command-specific help)",
    )

    # types: public top-level types
    s = sub.add_parser("types", help="List public top-level types per project")
    _add_common_arguments(s)
    s.set_defaults(func=cmd_types)

    # options: types whose name ends with a suffix
    s = sub.add_parser("options", help="List option types (class/record names ending with a suffix)")
    _add_common_arguments(s)
    s.add_argument("--suffix", help="type name suffix (default: Options)")
    s.set_defaults(func=cmd_options)

    # members: members matching a name pattern, walking base types and interfaces
    s = sub.add_parser("members", help="List public members whose name contains a pattern")
    _add_common_arguments(s)
    s.add_argument("--pattern", help="case-insensitive member name substring (default: subscribe)")
    s.add_argument(
        "--declared-only",
        action="store_true",
        help="only inspect members a type declares itself, not inherited ones",
    )
    s.set_defaults(func=cmd_members)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
