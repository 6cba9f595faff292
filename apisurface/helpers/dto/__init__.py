"""
Cross-layer DTOs.

Rules for DTO modules:
- Import only stdlib and typing (no imports from components, workflows, services or interfaces)
- Contain ONLY dataclass/enum definitions and simple properties
- No I/O, no business logic
"""

from .graph_dto import (
    MemberKind,
    MemberNode,
    ProjectView,
    ProvenancedMember,
    SymbolGraph,
    TypeKind,
    TypeNode,
    Visibility,
)
from .report_dto import (
    AnalysisCounters,
    AnalysisResult,
    MemberEntry,
    Report,
    ReportKind,
    ReportSummary,
    Section,
    TypeEntry,
)

__all__ = [
    "AnalysisCounters",
    "AnalysisResult",
    "MemberEntry",
    "MemberKind",
    "MemberNode",
    "ProjectView",
    "ProvenancedMember",
    "Report",
    "ReportKind",
    "ReportSummary",
    "Section",
    "SymbolGraph",
    "TypeEntry",
    "TypeKind",
    "TypeNode",
    "Visibility",
]
