"""
DTOs for analysis results and the report model.

AnalysisResult is what a workflow hands to the report builder; Report is
what the report builder hands to a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from apisurface.helpers.dto.graph_dto import ProvenancedMember, TypeNode


class ReportKind(str, Enum):
    TYPES = "types"
    OPTIONS = "options"
    MEMBERS = "members"


@dataclass
class AnalysisCounters:
    """Skip and progress counters for one analysis run."""

    projects_processed: int = 0
    projects_skipped: int = 0
    declarations_skipped: int = 0
    ancestors_skipped: int = 0


@dataclass
class AnalysisResult:
    """Buckets, member buckets, tags and counters produced by one analysis run."""

    kind: ReportKind
    source: str | None
    type_buckets: dict[str, dict[str, TypeNode]]
    member_buckets: dict[str, dict[str, ProvenancedMember]]
    tags: dict[str, list[str]]
    counters: AnalysisCounters


@dataclass(frozen=True)
class MemberEntry:
    display: str
    inherited_from: str | None = None


@dataclass(frozen=True)
class TypeEntry:
    display: str
    visibility_label: str | None = None  # set only for non-public types
    tags: tuple[str, ...] = ()
    members: tuple[MemberEntry, ...] = ()


@dataclass(frozen=True)
class Section:
    """One project bucket, ready for rendering."""

    project: str
    types: tuple[TypeEntry, ...]


@dataclass(frozen=True)
class ReportSummary:
    source: str | None
    projects: int  # projects with a bucket
    projects_skipped: int
    declarations_skipped: int
    types_matched: int
    members_matched: int
    projects_processed: int = 0
    ancestors_skipped: int = 0


@dataclass(frozen=True)
class Report:
    kind: ReportKind
    summary: ReportSummary
    sections: tuple[Section, ...] = field(default_factory=tuple)
