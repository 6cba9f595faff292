"""
Hierarchy walk over base types and implemented interfaces.

Order contract (part of the public behaviour, relied on by first-write-wins
provenance in the aggregator):
- breadth-first from the root
- for each node, its base type is enqueued before its interfaces
- interfaces are enqueued in declared order

Each node is visited at most once per walk. The visited set bounds the walk
by the number of distinct reachable nodes, so diamonds and cyclic metadata
both terminate.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator

from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter, UnresolvedCallback
from apisurface.helpers.dto.graph_dto import MemberNode, TypeNode
from apisurface.helpers.exceptions import UnresolvedNodeError

logger = logging.getLogger(__name__)


def _report_once(on_unresolved: UnresolvedCallback | None) -> UnresolvedCallback | None:
    """Wrap on_unresolved so each missing key is reported once per walk."""
    if on_unresolved is None:
        return None
    reported: set[str] = set()

    def report(e: UnresolvedNodeError) -> None:
        if e.key in reported:
            return
        reported.add(e.key)
        on_unresolved(e)

    return report


def iter_hierarchy(
    adapter: SymbolGraphAdapter,
    root: TypeNode,
    on_unresolved: UnresolvedCallback | None = None,
) -> Iterator[TypeNode]:
    """
    Yield root and every reachable ancestor exactly once.

    Ancestor keys that do not resolve are handed to on_unresolved, once per
    key, and skipped. Without a callback the UnresolvedNodeError propagates.
    """
    report = _report_once(on_unresolved)
    visited: set[str] = set()
    queue: deque[TypeNode] = deque([root])

    while queue:
        current = queue.popleft()
        if current.key in visited:
            continue
        visited.add(current.key)
        yield current

        base = adapter.base_type(current, report)
        ancestors = [base] if base is not None else []
        ancestors.extend(adapter.interfaces(current, report))
        queue.extend(node for node in ancestors if node.key not in visited)

    logger.debug("Walked %d types from %s", len(visited), root.display)


def walk_hierarchy(
    adapter: SymbolGraphAdapter,
    root: TypeNode,
    on_unresolved: UnresolvedCallback | None = None,
) -> Iterator[tuple[MemberNode, TypeNode]]:
    """Yield (member, declaring node) for root and all of its ancestors."""
    for node in iter_hierarchy(adapter, root, on_unresolved):
        for member in adapter.members(node):
            yield member, node


def declared_members(adapter: SymbolGraphAdapter, root: TypeNode) -> Iterator[tuple[MemberNode, TypeNode]]:
    """Yield (member, root) for the members root declares itself."""
    for member in adapter.members(root):
        yield member, root
