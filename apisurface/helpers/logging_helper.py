"""
Logging helpers: record tagging filter, per-run context and handler setup.

Log lines carry an identity tag and a role tag derived from the logger name,
so "apisurface.workflows.analysis.analyze_types_wf" logs as
"[Analyze Types] [Workflow]". Context values set with set_log_context()
(e.g. the project being analyzed) are appended to every record.
"""

from __future__ import annotations

import contextvars
import logging
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(apisurface_identity_tag)s %(apisurface_role_tag)s %(context_str)s%(message)s"

# Module name suffix -> role tag
ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "Service",
    "_wf": "Workflow",
    "_comp": "Component",
    "_helper": "Helper",
    "_dto": "DTO",
    "_cli": "Command",
}

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "apisurface_log_context", default=None
)


def set_log_context(**values: Any) -> None:
    """Add key/value pairs to the context appended to every log record."""
    current = dict(_log_context.get() or {})
    current.update(values)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all context values."""
    _log_context.set(None)


def _identity_and_role(name: str) -> tuple[str, str]:
    stem = name.rsplit(".", 1)[-1]
    for suffix, role in ROLE_SUFFIXES.items():
        if stem.endswith(suffix):
            base = stem[: -len(suffix)]
            if not base:
                break
            identity = " ".join(part.capitalize() for part in base.split("_") if part)
            return f"[{identity}]", f"[{role}]"
    return name, ""


class ApiSurfaceLogFilter(logging.Filter):
    """
    Attach apisurface_identity_tag, apisurface_role_tag and context_str to records.

    Never suppresses a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _identity_and_role(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.apisurface_identity_tag = identity
        record.apisurface_role_tag = role

        context = _log_context.get()
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            record.context_str = f"[{pairs}] "
        else:
            record.context_str = ""
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """Install a stderr handler with the apisurface format on the root logger."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(ApiSurfaceLogFilter())

    # force=True clears handlers left over from an earlier configure_logging()
    logging.basicConfig(level=level, handlers=[handler], force=True)
