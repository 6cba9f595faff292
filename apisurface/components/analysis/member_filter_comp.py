"""
Pure predicates over types and members.

Reports combine them with all_of(); none of them mutate their input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from apisurface.components.graph.symbol_graph_comp import SymbolGraphAdapter
from apisurface.helpers.dto.graph_dto import MemberKind, MemberNode, TypeKind, TypeNode, Visibility

T = TypeVar("T")


def is_public_root(node: TypeNode) -> bool:
    """Public and not nested inside another type."""
    return SymbolGraphAdapter.is_top_level_public(node)


def is_matching_type_name(node: TypeNode, suffix: str) -> bool:
    """Declared name ends with suffix (case-sensitive)."""
    return node.name.endswith(suffix)


def is_matching_member_name(member: MemberNode, substring: str) -> bool:
    """Declared name contains substring, ignoring case character by character."""
    return substring.lower() in member.name.lower()


def is_public_member(member: MemberNode) -> bool:
    return member.visibility is Visibility.PUBLIC


def is_type_kind(node: TypeNode, kinds: Iterable[TypeKind]) -> bool:
    return node.kind in set(kinds)


def is_extension_method(member: MemberNode, declaring: TypeNode) -> bool:
    """A method that extends a type other than the one declaring it."""
    return member.kind is MemberKind.METHOD and member.extends is not None and member.extends != declaring.key


def has_public_extension_method(adapter: SymbolGraphAdapter, node: TypeNode) -> bool:
    """Static type with at least one public extension method of its own."""
    if not node.is_static:
        return False
    return any(is_public_member(m) and is_extension_method(m, node) for m in adapter.members(node))


def all_of(*predicates: Callable[[T], bool]) -> Callable[[T], bool]:
    """Combine predicates with logical AND."""

    def combined(item: T) -> bool:
        return all(predicate(item) for predicate in predicates)

    return combined
