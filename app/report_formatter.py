"""Format analysis results as human-readable Markdown."""

from deps import List, Optional
from .schemas import EmulationResponse, IssueOut, ReportResponse

SEVERITY_ORDER = ("Critical", "Warning", "Info")


def _issue_block_md(i: IssueOut) -> List[str]:
    """One issue as Markdown: Line N · Category · Severity, then message, code, fix."""
    lines = []
    lines.append(f"**Line {i.line_number} · {i.category} · {i.severity}** (`{i.rule_id}`)")
    lines.append("")
    lines.append(i.message)
    lines.append("")
    lines.append("- **Code:**")
    lines.append("```")
    lines.append(i.matched_text)
    lines.append("```")
    lines.append("")
    lines.append(f"- **Fix:** {i.suggestion}")
    if i.replacement_text is not None:
        lines.append("```")
        lines.append(i.replacement_text)
        lines.append("```")
    if i.estimated_end_of_life and i.estimated_end_of_life != "Unknown":
        lines.append(f"- **End of life:** {i.estimated_end_of_life}")
    if i.documentation_url:
        lines.append(f"- **Docs:** {i.documentation_url}")
    lines.append("")
    return lines


def format_text_report(report: ReportResponse, patched: Optional[EmulationResponse] = None) -> str:
    """Format a scan report (and optionally the shadow-mode patch) as Markdown."""
    lines = []
    title = report.profile_id or report.source
    lines.append(f"# Future compatibility: {title}")
    lines.append("")
    lines.append(f"Generated: {report.timestamp}")
    lines.append("")
    lines.append(f"Health score: **{report.health_score}/100**")
    lines.append("")

    counts = report.severity_counts
    lines.append(
        f"**{len(report.issues)}** issue(s) found ({counts.get('Critical', 0)} critical, "
        f"{counts.get('Warning', 0)} warning(s), {counts.get('Info', 0)} info)."
    )
    lines.append("")
    lines.append(report.summary)
    lines.append("")

    lines.append("## Issues")
    lines.append("")
    if not report.issues:
        lines.append("No breaking changes found.")
        lines.append("")
    else:
        for severity in SEVERITY_ORDER:
            for i in report.issues:
                if i.severity == severity:
                    lines.extend(_issue_block_md(i))

    if report.logs:
        lines.append("## Log")
        lines.append("")
        lines.append("```")
        lines.extend(report.logs)
        lines.append("```")
        lines.append("")

    if patched is not None and patched.patched_code:
        lines.append("## Patched code")
        lines.append("")
        lines.append("```")
        lines.append(patched.patched_code)
        lines.append("```")
        lines.append("")

    return "\n".join(lines)
