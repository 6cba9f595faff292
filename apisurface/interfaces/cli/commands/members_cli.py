"""
Members command: list public members matching a name pattern (e.g. subscription APIs).
"""

from __future__ import annotations

import argparse
from typing import Any

from apisurface.components.report.markdown_render_comp import render_markdown
from apisurface.components.report.report_model_comp import build_report
from apisurface.helpers.dto.report_dto import ReportKind
from apisurface.interfaces.cli.ui import show_spinner
from apisurface.interfaces.cli.utils import (
    emit_report,
    load_config,
    load_graph_or_report,
    resolve_min_bucket_size,
    resolve_output_path,
)
from apisurface.workflows.analysis.analyze_matching_members_wf import analyze_matching_members_workflow


def cmd_members(args: argparse.Namespace) -> int:
    """
    Report public top-level types exposing public members whose name contains the pattern.

    Inherited members are included unless --declared-only is given.
    """
    overrides: dict[str, Any] = {"member_pattern": args.pattern}
    if args.declared_only:
        overrides["include_inherited"] = False
    config = load_config(args, overrides)

    min_bucket_size = resolve_min_bucket_size(args, config, ReportKind.MEMBERS)
    if min_bucket_size is None:
        return 1

    graph = load_graph_or_report(args.graph)
    if graph is None:
        return 1

    pattern = config["member_pattern"]
    result = show_spinner(
        f"Walking type hierarchies for '{pattern}'...",
        analyze_matching_members_workflow,
        graph,
        pattern,
        bool(config["include_inherited"]),
        config["path_prefix"],
    )
    report = build_report(result, min_bucket_size)

    output = resolve_output_path(args, config, ReportKind.MEMBERS)
    return emit_report(report, render_markdown(report), output, "Matching Members")
