"""
Types command: list every public top-level type per project.
"""

from __future__ import annotations

import argparse

from apisurface.components.report.markdown_render_comp import render_markdown
from apisurface.components.report.report_model_comp import build_report
from apisurface.helpers.dto.report_dto import ReportKind
from apisurface.interfaces.cli.ui import print_info, show_spinner
from apisurface.interfaces.cli.utils import (
    emit_report,
    load_config,
    load_graph_or_report,
    resolve_min_bucket_size,
    resolve_output_path,
)
from apisurface.workflows.analysis.analyze_types_wf import analyze_types_workflow


def cmd_types(args: argparse.Namespace) -> int:
    """
    Report public top-level types, tagging static types that hold extension methods.
    """
    config = load_config(args)
    min_bucket_size = resolve_min_bucket_size(args, config, ReportKind.TYPES)
    if min_bucket_size is None:
        return 1

    graph = load_graph_or_report(args.graph)
    if graph is None:
        return 1

    print_info(f"Loaded {len(graph.types)} types from {graph.source}")
    result = show_spinner("Collecting public types...", analyze_types_workflow, graph, config["path_prefix"])
    report = build_report(result, min_bucket_size)

    output = resolve_output_path(args, config, ReportKind.TYPES)
    return emit_report(report, render_markdown(report), output, "Public Types")
