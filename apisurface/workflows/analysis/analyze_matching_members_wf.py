"""Member-matching workflow - public types exposing members whose name contains a pattern."""

from __future__ import annotations

import logging

from apisurface.components.analysis.aggregation_comp import Aggregator
from apisurface.components.analysis.member_filter_comp import (
    all_of,
    is_matching_member_name,
    is_public_member,
    is_public_root,
)
from apisurface.components.analysis.project_scan_comp import iter_declarations, iter_projects
from apisurface.components.graph.hierarchy_walk_comp import declared_members, walk_hierarchy
from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter
from apisurface.helpers.dto.graph_dto import MemberNode, SymbolGraph, TypeNode
from apisurface.helpers.dto.report_dto import AnalysisResult, ReportKind
from apisurface.helpers.exceptions import UnresolvedNodeError

logger = logging.getLogger(__name__)


def analyze_matching_members_workflow(
    graph: SymbolGraph,
    substring: str,
    include_inherited: bool = True,
    path_prefix: str = "",
) -> AnalysisResult:
    """
    Find public top-level types exposing public members matching substring.

    Args:
        graph: Compiled symbol graph
        substring: Case-insensitive member name pattern
        include_inherited: Also walk base types and implemented interfaces
        path_prefix: Only analyze projects whose path starts with this

    Returns:
        AnalysisResult with type buckets (only projects with matches),
        member buckets annotated with the declaring node, and counters
    """
    adapter = SymbolGraphAdapter(graph)
    aggregator = Aggregator()
    counters = aggregator.counters
    is_match = all_of(is_public_member, lambda member: is_matching_member_name(member, substring))

    def on_unresolved(e: UnresolvedNodeError) -> None:
        logger.warning("Skipping ancestor: %s", e)
        counters.ancestors_skipped += 1

    for project in iter_projects(adapter, path_prefix, counters):
        for node in iter_declarations(adapter, project, counters):
            if not is_public_root(node):
                continue

            if include_inherited:
                pairs = walk_hierarchy(adapter, node, on_unresolved)
            else:
                pairs = declared_members(adapter, node)

            # Drain the walk before recording so a failed declaration leaves nothing behind
            try:
                matches: list[tuple[MemberNode, TypeNode]] = [
                    (member, declaring)
                    for member, declaring in pairs
                    if is_match(member)
                ]
            except UnresolvedNodeError as e:
                logger.warning("Skipping declaration: %s", e)
                counters.declarations_skipped += 1
                continue

            for member, declaring in matches:
                aggregator.record(project.path, node)
                aggregator.record_member(node, member, declaring)

    logger.info(
        "Found %d members matching '%s' on %d types",
        aggregator.members_matched,
        substring,
        aggregator.types_matched,
    )
    return aggregator.to_result(ReportKind.MEMBERS, adapter.source)
