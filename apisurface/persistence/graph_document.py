"""
Graph document loading.

A graph document is the on-disk form of a compiled symbol graph: projects,
the type keys they declare, and every type with its members. It is written
by a front end that has already compiled the codebase; this module only
validates it and turns it into a SymbolGraph.

References between types (base_type, interfaces, containing_type, extends)
and project declarations are allowed to dangle. They surface later as
UnresolvedNodeError and are skipped by the analysis.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from apisurface.helpers.dto.graph_dto import (
    MemberKind,
    MemberNode,
    ProjectView,
    SymbolGraph,
    TypeKind,
    TypeNode,
    Visibility,
)
from apisurface.helpers.exceptions import GraphDocumentError

logger = logging.getLogger(__name__)


class MemberDocument(BaseModel):
    id: str = Field(description="Identity key, unique across the document")
    name: str = Field(description="Declared name")
    display: str | None = Field(default=None, description="Display string, defaults to name")
    kind: MemberKind = MemberKind.METHOD
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    extends: str | None = Field(default=None, description="Type key extended by an extension method")


class TypeDocument(BaseModel):
    id: str = Field(description="Identity key, unique across the document")
    name: str = Field(description="Declared name")
    display: str | None = Field(default=None, description="Fully qualified display string, defaults to name")
    kind: TypeKind = TypeKind.CLASS
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    containing_type: str | None = None
    base_type: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    members: list[MemberDocument] = Field(default_factory=list)


class ProjectDocument(BaseModel):
    path: str = Field(description="Project path relative to the solution directory")
    resolved: bool = Field(default=True, description="False when the project failed to compile")
    error: str | None = None
    declarations: list[str] = Field(default_factory=list, description="Declared type keys in source order")


class GraphDocument(BaseModel):
    source: str | None = Field(default=None, description="Solution or workspace the graph was built from")
    projects: list[ProjectDocument] = Field(default_factory=list)
    types: list[TypeDocument] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_ids(self) -> GraphDocument:
        """Validate identity key uniqueness."""
        seen_types: set[str] = set()
        seen_members: set[str] = set()
        for type_doc in self.types:
            if type_doc.id in seen_types:
                msg = f"Duplicate type id '{type_doc.id}'"
                raise ValueError(msg)
            seen_types.add(type_doc.id)
            for member_doc in type_doc.members:
                if member_doc.id in seen_members:
                    msg = f"Duplicate member id '{member_doc.id}' (on type '{type_doc.id}')"
                    raise ValueError(msg)
                seen_members.add(member_doc.id)
        return self


def build_symbol_graph(document: GraphDocument) -> SymbolGraph:
    """Convert a validated document into the in-memory arena."""
    graph = SymbolGraph(source=document.source)

    for type_doc in document.types:
        for member_doc in type_doc.members:
            graph.members[member_doc.id] = MemberNode(
                key=member_doc.id,
                name=member_doc.name,
                display=member_doc.display or member_doc.name,
                visibility=member_doc.visibility,
                owner=type_doc.id,
                kind=member_doc.kind,
                is_static=member_doc.is_static,
                extends=member_doc.extends,
            )
        graph.types[type_doc.id] = TypeNode(
            key=type_doc.id,
            name=type_doc.name,
            display=type_doc.display or type_doc.name,
            visibility=type_doc.visibility,
            kind=type_doc.kind,
            is_static=type_doc.is_static,
            containing_type=type_doc.containing_type,
            base_type=type_doc.base_type,
            interfaces=tuple(type_doc.interfaces),
            member_keys=tuple(m.id for m in type_doc.members),
        )

    graph.projects = [
        ProjectView(
            path=project_doc.path,
            resolved=project_doc.resolved,
            error=project_doc.error,
            declarations=tuple(project_doc.declarations),
        )
        for project_doc in document.projects
    ]
    return graph


def parse_graph_document(data: Any) -> GraphDocument:
    """Validate already-decoded document data."""
    try:
        return GraphDocument.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid graph document: {e}"
        raise GraphDocumentError(msg) from e


def _decode(path: Path, text: str) -> Any:
    if path.suffix.lower() in {".yaml", ".yml"}:
        return yaml.safe_load(text)
    return json.loads(text)


def load_graph(path: Path) -> SymbolGraph:
    """
    Read, validate and convert a JSON or YAML graph document.

    Raises:
        GraphDocumentError: if the file cannot be read, decoded or validated
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Failed to read graph document {path}: {e}"
        raise GraphDocumentError(msg) from e

    try:
        data = _decode(path, text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Failed to parse graph document {path}: {e}"
        raise GraphDocumentError(msg) from e

    document = parse_graph_document(data)
    graph = build_symbol_graph(document)
    if graph.source is None:
        graph.source = str(path)

    logger.info(
        "Loaded graph document %s: %d projects, %d types, %d members",
        path,
        len(graph.projects),
        len(graph.types),
        len(graph.members),
    )
    return graph
