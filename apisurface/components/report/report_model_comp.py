"""Build the ordered report model from an analysis result."""

from __future__ import annotations

from apisurface.helpers.dto.graph_dto import ProvenancedMember, TypeNode, Visibility
from apisurface.helpers.dto.report_dto import (
    AnalysisResult,
    MemberEntry,
    Report,
    ReportKind,
    ReportSummary,
    Section,
    TypeEntry,
)

DEFAULT_MIN_BUCKET_SIZE: dict[ReportKind, int] = {
    ReportKind.TYPES: 1,
    ReportKind.OPTIONS: 1,
    ReportKind.MEMBERS: 0,
}


def _member_entry(owner: TypeNode, provenanced: ProvenancedMember) -> MemberEntry:
    inherited_from = None
    if provenanced.declaring.key != owner.key:
        inherited_from = provenanced.declaring.name
    return MemberEntry(display=provenanced.member.display, inherited_from=inherited_from)


def _type_entry(node: TypeNode, result: AnalysisResult) -> TypeEntry:
    provenanced = result.member_buckets.get(node.key, {}).values()
    members = tuple(
        _member_entry(node, p) for p in sorted(provenanced, key=lambda p: (p.member.display, p.member.key))
    )
    return TypeEntry(
        display=node.display,
        visibility_label=None if node.visibility is Visibility.PUBLIC else node.visibility.label,
        tags=tuple(result.tags.get(node.key, ())),
        members=members,
    )


def build_report(result: AnalysisResult, min_bucket_size: int | None = None) -> Report:
    """
    Turn buckets into sections.

    A section is emitted for every project whose bucket holds more than
    min_bucket_size types. Sections are ordered by project path, types and
    members by display string with the identity key as tie-breaker, so the
    output is identical across runs on the same graph.
    """
    if min_bucket_size is None:
        min_bucket_size = DEFAULT_MIN_BUCKET_SIZE[result.kind]
    if min_bucket_size < 0:
        raise ValueError(f"min_bucket_size must be >= 0, got {min_bucket_size}")

    sections = []
    for project in sorted(result.type_buckets):
        bucket = result.type_buckets[project]
        if len(bucket) <= min_bucket_size:
            continue
        nodes = sorted(bucket.values(), key=lambda n: (n.display, n.key))
        sections.append(Section(project=project, types=tuple(_type_entry(n, result) for n in nodes)))

    summary = ReportSummary(
        source=result.source,
        projects=len(result.type_buckets),
        projects_skipped=result.counters.projects_skipped,
        declarations_skipped=result.counters.declarations_skipped,
        projects_processed=result.counters.projects_processed,
        ancestors_skipped=result.counters.ancestors_skipped,
        types_matched=sum(len(b) for b in result.type_buckets.values()),
        members_matched=sum(len(b) for b in result.member_buckets.values()),
    )
    return Report(kind=result.kind, summary=summary, sections=tuple(sections))
