"""Read-only adapter over a SymbolGraph."""

from __future__ import annotations

from collections.abc import Callable

from apisurface.helpers.dto.graph_dto import MemberNode, ProjectView, SymbolGraph, TypeNode, Visibility
from apisurface.helpers.exceptions import UnresolvedNodeError

UnresolvedCallback = Callable[[UnresolvedNodeError], None]


class SymbolGraphAdapter:
    """
    Thin view over the compiled symbol graph.

    Every lookup is by identity key. A key with no node behind it raises
    UnresolvedNodeError; callers skip the affected declaration or ancestor
    and carry on. base_type() and interfaces() accept an on_unresolved
    callback instead, so one dangling reference does not hide the others.
    """

    def __init__(self, graph: SymbolGraph) -> None:
        self._graph = graph

    @property
    def source(self) -> str | None:
        return self._graph.source

    def projects(self) -> list[ProjectView]:
        """Projects sorted by path."""
        return sorted(self._graph.projects, key=lambda p: p.path)

    def resolve_type(self, key: str, referenced_from: str | None = None) -> TypeNode:
        node = self._graph.types.get(key)
        if node is None:
            raise UnresolvedNodeError(key, referenced_from)
        return node

    def members(self, node: TypeNode) -> list[MemberNode]:
        """Members declared on node, in declaration order."""
        result = []
        for key in node.member_keys:
            member = self._graph.members.get(key)
            if member is None:
                raise UnresolvedNodeError(key, node.key)
            result.append(member)
        return result

    def base_type(self, node: TypeNode, on_unresolved: UnresolvedCallback | None = None) -> TypeNode | None:
        if node.base_type is None:
            return None
        resolved = self._resolve_all([node.base_type], node, on_unresolved)
        return resolved[0] if resolved else None

    def interfaces(self, node: TypeNode, on_unresolved: UnresolvedCallback | None = None) -> list[TypeNode]:
        """Directly implemented interfaces, in declared order."""
        return self._resolve_all(node.interfaces, node, on_unresolved)

    @staticmethod
    def is_top_level_public(node: TypeNode) -> bool:
        return node.visibility is Visibility.PUBLIC and not node.is_nested

    def _resolve_all(
        self,
        keys: tuple[str, ...] | list[str],
        referrer: TypeNode,
        on_unresolved: UnresolvedCallback | None,
    ) -> list[TypeNode]:
        result = []
        for key in keys:
            try:
                result.append(self.resolve_type(key, referrer.key))
            except UnresolvedNodeError as e:
                if on_unresolved is None:
                    raise
                on_unresolved(e)
        return result
