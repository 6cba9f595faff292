"""Symbol graph adapter and hierarchy walk."""

from .hierarchy_walk_comp import declared_members, iter_hierarchy, walk_hierarchy
from .symbol_graph_comp import SymbolGraphAdapter

__all__ = ["SymbolGraphAdapter", "declared_members", "iter_hierarchy", "walk_hierarchy"]
