"""Analysis workflows, one per report kind."""

from .analyze_matching_members_wf import analyze_matching_members_workflow
from .analyze_named_types_wf import analyze_named_types_workflow
from .analyze_types_wf import EXTENSION_METHODS_TAG, analyze_types_workflow

__all__ = [
    "EXTENSION_METHODS_TAG",
    "analyze_matching_members_workflow",
    "analyze_named_types_workflow",
    "analyze_types_workflow",
]
