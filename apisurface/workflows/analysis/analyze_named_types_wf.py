"""Named-type workflow - types whose name ends with a suffix (e.g. "Options")."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from apisurface.components.analysis.aggregation_comp import Aggregator
from apisurface.components.analysis.member_filter_comp import all_of, is_matching_type_name, is_type_kind
from apisurface.components.analysis.project_scan_comp import iter_declarations, iter_projects
from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter
from apisurface.helpers.dto.graph_dto import SymbolGraph, TypeKind
from apisurface.helpers.dto.report_dto import AnalysisResult, ReportKind

logger = logging.getLogger(__name__)

DEFAULT_KINDS = (TypeKind.CLASS, TypeKind.RECORD)


def analyze_named_types_workflow(
    graph: SymbolGraph,
    suffix: str,
    path_prefix: str = "",
    kinds: Iterable[TypeKind] = DEFAULT_KINDS,
) -> AnalysisResult:
    """
    Bucket every declared type of the given kinds whose name ends with suffix.

    Visibility and nesting are not filtered here: non-public matches are
    reported with their visibility label.
    """
    kinds = tuple(kinds)
    adapter = SymbolGraphAdapter(graph)
    aggregator = Aggregator()
    is_match = all_of(lambda node: is_type_kind(node, kinds), lambda node: is_matching_type_name(node, suffix))

    for project in iter_projects(adapter, path_prefix, aggregator.counters):
        aggregator.open_project(project.path)
        for node in iter_declarations(adapter, project, aggregator.counters):
            if is_match(node):
                aggregator.record(project.path, node)

    logger.info("Found %d types ending with '%s'", aggregator.types_matched, suffix)
    return aggregator.to_result(ReportKind.OPTIONS, adapter.source)
