"""Render a Report as markdown."""

from __future__ import annotations

from apisurface.helpers.dto.report_dto import Report, ReportKind, Section, TypeEntry

TYPE_COUNT_LABELS: dict[ReportKind, str] = {
    ReportKind.TYPES: "Public types",
    ReportKind.OPTIONS: "Option types",
    ReportKind.MEMBERS: "Types",
}


def _header(report: Report) -> list[str]:
    summary = report.summary
    lines = [
        f"- Solution: {summary.source or '(unknown)'}",
        f"- Projects: {summary.projects_processed}",
    ]
    if summary.projects_skipped:
        lines.append(f"- Projects skipped: {summary.projects_skipped}")
    if summary.declarations_skipped:
        lines.append(f"- Declarations skipped: {summary.declarations_skipped}")
    if summary.ancestors_skipped:
        lines.append(f"- Ancestors skipped: {summary.ancestors_skipped}")
    lines.append(f"- {TYPE_COUNT_LABELS[report.kind]}: {summary.types_matched}")
    if report.kind is ReportKind.MEMBERS:
        lines.append(f"- Members: {summary.members_matched}")
    lines.append("")
    return lines


def _listing_line(entry: TypeEntry) -> str:
    line = f" - `{entry.display}`"
    if entry.visibility_label:
        line += f" ({entry.visibility_label})"
    for tag in entry.tags:
        line += f" ({tag})"
    return line


def _member_lines(entry: TypeEntry) -> list[str]:
    lines = [f"## `{entry.display}`", ""]
    for member in entry.members:
        suffix = f" (inherited from `{member.inherited_from}`)" if member.inherited_from else ""
        lines.append(f"- `{member.display}`{suffix}")
    lines.append("")
    return lines


def _section_lines(report: Report, section: Section) -> list[str]:
    lines = [f"# {section.project}", ""]
    if report.kind is ReportKind.MEMBERS:
        for entry in section.types:
            lines.extend(_member_lines(entry))
    else:
        lines.extend(_listing_line(entry) for entry in section.types)
        lines.append("")
    return lines


def render_markdown(report: Report) -> str:
    lines = _header(report)
    for section in report.sections:
        lines.extend(_section_lines(report, section))
    return "\n".join(lines) + "\n"
