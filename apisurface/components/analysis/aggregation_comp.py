"""
Aggregation of matched types and members for one analysis run.

All containers are append-only: entries are never replaced or removed once
recorded. Deduplication is by identity key.
"""

from __future__ import annotations

from apisurface.helpers.dto.graph_dto import MemberNode, ProvenancedMember, TypeNode
from apisurface.helpers.dto.report_dto import AnalysisCounters, AnalysisResult, ReportKind


class Aggregator:
    """
    Buckets matched types per project path and matched members per type.

    One Aggregator belongs to exactly one analysis run.
    """

    def __init__(self) -> None:
        self.type_buckets: dict[str, dict[str, TypeNode]] = {}
        self.member_buckets: dict[str, dict[str, ProvenancedMember]] = {}
        self.tags: dict[str, list[str]] = {}
        self.counters = AnalysisCounters()

    def open_project(self, project: str) -> None:
        """Create an empty bucket for project if it has none yet."""
        self.type_buckets.setdefault(project, {})

    def record(self, project: str, node: TypeNode) -> bool:
        """Add node to the project's bucket. Returns False if it was already there."""
        bucket = self.type_buckets.setdefault(project, {})
        if node.key in bucket:
            return False
        bucket[node.key] = node
        return True

    def record_member(self, node: TypeNode, member: MemberNode, declaring: TypeNode) -> bool:
        """
        Add member to node's member bucket, first write wins.

        When the same member is reached along two paths, the declaring node
        of the first recorded path is kept.
        """
        bucket = self.member_buckets.setdefault(node.key, {})
        if member.key in bucket:
            return False
        bucket[member.key] = ProvenancedMember(member=member, declaring=declaring)
        return True

    def tag(self, node: TypeNode, label: str) -> None:
        labels = self.tags.setdefault(node.key, [])
        if label not in labels:
            labels.append(label)

    @property
    def types_matched(self) -> int:
        return sum(len(bucket) for bucket in self.type_buckets.values())

    @property
    def members_matched(self) -> int:
        return sum(len(bucket) for bucket in self.member_buckets.values())

    def to_result(self, kind: ReportKind, source: str | None) -> AnalysisResult:
        return AnalysisResult(
            kind=kind,
            source=source,
            type_buckets=self.type_buckets,
            member_buckets=self.member_buckets,
            tags=self.tags,
            counters=self.counters,
        )
