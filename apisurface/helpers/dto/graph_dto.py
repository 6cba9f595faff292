"""
DTOs for the compiled symbol graph.

Nodes are plain frozen data with string identity keys. Identity is the
`key`, never the display string: two generic instantiations can render
identically while being distinct symbols.

Rules for DTO modules:
- Import only stdlib and typing (no apisurface.* imports except other DTOs)
- No I/O, no business logic
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Visibility(str, Enum):
    """Declared accessibility of a type or member."""

    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PRIVATE = "private"
    PROTECTED_INTERNAL = "protected_internal"
    PRIVATE_PROTECTED = "private_protected"

    @property
    def label(self) -> str:
        """Human label used in reports, e.g. 'Protected Internal'."""
        return " ".join(part.capitalize() for part in self.value.split("_"))


class TypeKind(str, Enum):
    CLASS = "class"
    RECORD = "record"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"
    DELEGATE = "delegate"


class MemberKind(str, Enum):
    FIELD = "field"
    METHOD = "method"
    PROPERTY = "property"
    EVENT = "event"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True)
class MemberNode:
    """A field, method, property, event or constructor declared on a type."""

    key: str
    name: str
    display: str
    visibility: Visibility
    owner: str  # key of the declaring TypeNode
    kind: MemberKind = MemberKind.METHOD
    is_static: bool = False
    extends: str | None = None  # extension methods: key of the extended type


@dataclass(frozen=True)
class TypeNode:
    """One declared type in the compiled graph."""

    key: str
    name: str
    display: str
    visibility: Visibility
    kind: TypeKind = TypeKind.CLASS
    is_static: bool = False
    containing_type: str | None = None
    base_type: str | None = None
    interfaces: tuple[str, ...] = ()
    member_keys: tuple[str, ...] = ()  # declaration order

    @property
    def is_nested(self) -> bool:
        return self.containing_type is not None


@dataclass(frozen=True)
class ProvenancedMember:
    """A member plus the node on whose hierarchy-walk path it was first discovered."""

    member: MemberNode
    declaring: TypeNode


@dataclass(frozen=True)
class ProjectView:
    """One project of the compiled graph: its path and declared type keys in source order."""

    path: str
    resolved: bool = True
    error: str | None = None
    declarations: tuple[str, ...] = ()


@dataclass
class SymbolGraph:
    """Arena of all types and members, plus the projects declaring them."""

    source: str | None = None
    projects: list[ProjectView] = field(default_factory=list)
    types: dict[str, TypeNode] = field(default_factory=dict)
    members: dict[str, MemberNode] = field(default_factory=dict)
