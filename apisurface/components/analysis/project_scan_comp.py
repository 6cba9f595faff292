"""
Per-project iteration with skip-and-continue error handling.

Projects are visited in path order and restricted to a path prefix.
Unresolved projects and declarations are logged, counted and skipped; they
never abort the run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter
from apisurface.helpers.dto.graph_dto import ProjectView, TypeNode
from apisurface.helpers.dto.report_dto import AnalysisCounters
from apisurface.helpers.exceptions import UnresolvedNodeError, UnresolvedProjectError
from apisurface.helpers.logging_helper import clear_log_context, set_log_context

logger = logging.getLogger(__name__)


def check_project(project: ProjectView) -> None:
    """Raise UnresolvedProjectError if the project has no compiled view."""
    if not project.resolved:
        raise UnresolvedProjectError(project.path, project.error)


def iter_projects(
    adapter: SymbolGraphAdapter,
    path_prefix: str,
    counters: AnalysisCounters,
) -> Iterator[ProjectView]:
    """Yield resolved projects whose path starts with path_prefix."""
    for project in adapter.projects():
        if not project.path.startswith(path_prefix):
            continue
        try:
            check_project(project)
        except UnresolvedProjectError as e:
            logger.warning("Skipping project: %s", e)
            counters.projects_skipped += 1
            continue

        logger.info("Processing project: %s", project.path)
        counters.projects_processed += 1
        set_log_context(project=project.path)
        try:
            yield project
        finally:
            clear_log_context()


def iter_declarations(
    adapter: SymbolGraphAdapter,
    project: ProjectView,
    counters: AnalysisCounters,
) -> Iterator[TypeNode]:
    """Yield the project's declared types, skipping keys that do not resolve."""
    for key in project.declarations:
        try:
            yield adapter.resolve_type(key, project.path)
        except UnresolvedNodeError as e:
            logger.warning("Skipping declaration: %s", e)
            counters.declarations_skipped += 1
