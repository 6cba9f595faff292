"""
Shared utility functions for CLI commands.
Helper functions used across multiple command modules.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from apisurface.helpers.dto.graph_dto import SymbolGraph
from apisurface.helpers.dto.report_dto import Report, ReportKind
from apisurface.helpers.exceptions import GraphDocumentError
from apisurface.helpers.logging_helper import configure_logging
from apisurface.interfaces.cli.ui import (
    COLOR_WARNING,
    InfoPanel,
    TableDisplay,
    print_error,
    print_success,
    print_warning,
)
from apisurface.persistence.graph_document import load_graph
from apisurface.services.config_svc import ConfigService

__all__ = [
    "emit_report",
    "load_config",
    "load_graph_or_report",
    "resolve_min_bucket_size",
    "resolve_output_path",
]


def load_config(args: argparse.Namespace, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Compose config from files, env and CLI flags, then configure logging."""
    flags: dict[str, Any] = {"path_prefix": args.prefix, "log_level": args.log_level}
    if overrides:
        flags.update(overrides)
    config = ConfigService(args.config, overrides=flags).get_config()
    configure_logging(config["log_level"])
    return config


def load_graph_or_report(path: str) -> SymbolGraph | None:
    """Load the graph document, printing the error and returning None on failure."""
    try:
        return load_graph(Path(path))
    except GraphDocumentError as e:
        print_error(str(e))
        return None


def resolve_min_bucket_size(args: argparse.Namespace, config: dict[str, Any], kind: ReportKind) -> int | None:
    """Threshold from the flag or config. Prints the error and returns None if it is invalid."""
    value = args.min_bucket_size if args.min_bucket_size is not None else config["min_bucket_size"][kind.value]
    try:
        size = int(value)
    except (TypeError, ValueError):
        print_error(f"Invalid min_bucket_size: {value!r}")
        return None
    if size < 0:
        print_error(f"min_bucket_size must be >= 0, got {size}")
        return None
    return size


def resolve_output_path(args: argparse.Namespace, config: dict[str, Any], kind: ReportKind) -> str:
    if args.output:
        return str(args.output)
    return str(Path(config["output_dir"]) / config["output_files"][kind.value])


def emit_report(report: Report, markdown: str, output: str, title: str) -> int:
    """Write markdown to output ('-' for stdout) and show a summary. Returns an exit code."""
    if output == "-":
        sys.stdout.write(markdown)
    else:
        output_path = Path(output)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(markdown, encoding="utf-8")
        except OSError as e:
            print_error(f"Failed to write report to {output_path}: {e}")
            return 1

    summary = report.summary
    data: dict[str, Any] = {
        "Projects processed": summary.projects_processed,
        "Projects skipped": summary.projects_skipped,
        "Declarations skipped": summary.declarations_skipped,
        "Ancestors skipped": summary.ancestors_skipped,
        "Types matched": summary.types_matched,
    }
    if report.kind is ReportKind.MEMBERS:
        data["Members matched"] = summary.members_matched
    TableDisplay.show_summary(title, data)

    if report.sections:
        TableDisplay.show_sections(report)
    else:
        InfoPanel.show(title, "No project met the section threshold", COLOR_WARNING)

    skipped = summary.projects_skipped + summary.declarations_skipped + summary.ancestors_skipped
    if skipped:
        print_warning(f"{skipped} unresolved project(s), declaration(s) or ancestor(s) skipped, see log for details")

    if output != "-":
        print_success(f"Report written to {output}")
    return 0
