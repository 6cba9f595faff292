"""
Options command: list configuration option types (names ending with a suffix).
"""

from __future__ import annotations

import argparse

from apisurface.components.report.markdown_render_comp import render_markdown
from apisurface.components.report.report_model_comp import build_report
from apisurface.helpers.dto.graph_dto import TypeKind
from apisurface.helpers.dto.report_dto import ReportKind
from apisurface.interfaces.cli.ui import print_error, show_spinner
from apisurface.interfaces.cli.utils import (
    emit_report,
    load_config,
    load_graph_or_report,
    resolve_min_bucket_size,
    resolve_output_path,
)
from apisurface.workflows.analysis.analyze_named_types_wf import analyze_named_types_workflow


def cmd_options(args: argparse.Namespace) -> int:
    """
    Report class and record declarations whose name ends with the options suffix.
    """
    config = load_config(args, {"options_suffix": args.suffix})

    try:
        kinds = [TypeKind(kind) for kind in config["named_type_kinds"]]
    except ValueError as e:
        print_error(f"Invalid named_type_kinds in config: {e}")
        return 1

    min_bucket_size = resolve_min_bucket_size(args, config, ReportKind.OPTIONS)
    if min_bucket_size is None:
        return 1

    graph = load_graph_or_report(args.graph)
    if graph is None:
        return 1

    suffix = config["options_suffix"]
    result = show_spinner(
        f"Collecting types ending with '{suffix}'...",
        analyze_named_types_workflow,
        graph,
        suffix,
        config["path_prefix"],
        kinds,
    )
    report = build_report(result, min_bucket_size)

    output = resolve_output_path(args, config, ReportKind.OPTIONS)
    return emit_report(report, render_markdown(report), output, "Option Types")
