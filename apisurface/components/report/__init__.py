"""Report model and markdown rendering."""

from .markdown_render_comp import render_markdown
from .report_model_comp import DEFAULT_MIN_BUCKET_SIZE, build_report

__all__ = ["DEFAULT_MIN_BUCKET_SIZE", "build_report", "render_markdown"]
