"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class ApiSurfaceError(Exception):
    """Base class for all apisurface errors."""


class GraphDocumentError(ApiSurfaceError):
    """Raised when a graph document cannot be read, parsed or validated."""


class UnresolvedProjectError(ApiSurfaceError):
    """Raised when a project has no compiled view in the symbol graph."""

    def __init__(self, project: str, reason: str | None = None) -> None:
        self.project = project
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Project '{project}' could not be resolved{detail}")


class UnresolvedNodeError(ApiSurfaceError):
    """Raised when a symbol key does not resolve to a node in the symbol graph."""

    def __init__(self, key: str, referenced_from: str | None = None) -> None:
        self.key = key
        self.referenced_from = referenced_from
        origin = f" (referenced from '{referenced_from}')" if referenced_from else ""
        super().__init__(f"Symbol '{key}' is not in the graph{origin}")
