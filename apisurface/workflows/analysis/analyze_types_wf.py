"""Type-listing workflow - every public top-level type per project."""

from __future__ import annotations

import logging

from apisurface.components.analysis.aggregation_comp import Aggregator
from apisurface.components.analysis.member_filter_comp import has_public_extension_method, is_public_root
from apisurface.components.analysis.project_scan_comp import iter_declarations, iter_projects
from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter
from apisurface.helpers.dto.graph_dto import SymbolGraph
from apisurface.helpers.dto.report_dto import AnalysisResult, ReportKind
from apisurface.helpers.exceptions import UnresolvedNodeError

logger = logging.getLogger(__name__)

EXTENSION_METHODS_TAG = "extension methods"


def analyze_types_workflow(graph: SymbolGraph, path_prefix: str = "") -> AnalysisResult:
    """
    Bucket every public top-level type by project.

    Static types with at least one public extension method are tagged
    with EXTENSION_METHODS_TAG. Every processed project gets a bucket,
    even an empty one.

    Args:
        graph: Compiled symbol graph
        path_prefix: Only analyze projects whose path starts with this

    Returns:
        AnalysisResult with type buckets, tags and counters
    """
    adapter = SymbolGraphAdapter(graph)
    aggregator = Aggregator()

    for project in iter_projects(adapter, path_prefix, aggregator.counters):
        aggregator.open_project(project.path)
        for node in iter_declarations(adapter, project, aggregator.counters):
            if not is_public_root(node):
                continue
            try:
                tagged = has_public_extension_method(adapter, node)
            except UnresolvedNodeError as e:
                logger.warning("Skipping declaration: %s", e)
                aggregator.counters.declarations_skipped += 1
                continue
            aggregator.record(project.path, node)
            if tagged:
                aggregator.tag(node, EXTENSION_METHODS_TAG)

    logger.info(
        "Found %d public types in %d projects", aggregator.types_matched, aggregator.counters.projects_processed
    )
    return aggregator.to_result(ReportKind.TYPES, adapter.source)
