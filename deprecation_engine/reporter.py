"""
Report assembly and text rendering for scan results.
"""

import re
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

from .issue import (
    AnalysisReport,
    DependencyAudit,
    Finding,
    Severity,
)
from .scorer import severity_counts

_EOL_MONTH = re.compile(r"^(\d{4}-\d{2})")


def utc_timestamp() -> str:
    """Current time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def summarize(findings: Sequence[Finding]) -> str:
    """Deterministic summary line for rule-engine reports."""
    if not findings:
        return "No issues found"
    critical = severity_counts(findings)[Severity.CRITICAL]
    noun = "issue" if len(findings) == 1 else "issues"
    return f"{len(findings)} {noun} found, {critical} critical"


def assemble(
    findings: Sequence[Finding],
    score: int,
    logs: Sequence[str],
    timestamp: Optional[str] = None,
    dependencies: Optional[Sequence[DependencyAudit]] = None,
    summary: Optional[str] = None,
    profile_id: Optional[str] = None,
) -> AnalysisReport:
    """Package findings, score and logs into a report.

    Each finding gets an id unique within this report. A finding that already
    carries an id keeps it unless an earlier finding holds the same one;
    generated ids skip every id already in use.
    """
    taken = {f.id for f in findings if f.id}
    used = set()
    numbered = []
    index = 0
    for f in findings:
        if not f.id or f.id in used:
            while f"issue-{index}" in taken:
                index += 1
            f = replace(f, id=f"issue-{index}")
            taken.add(f.id)
        used.add(f.id)
        numbered.append(f)
        index += 1
    return AnalysisReport(
        health_score=score,
        summary=summary if summary else summarize(numbered),
        findings=numbered,
        logs=list(logs),
        timestamp=timestamp or utc_timestamp(),
        profile_id=profile_id,
        dependencies=list(dependencies or []),
    )


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    return date(day.year + month_index // 12, month_index % 12 + 1, 1)


def build_timeline(
    findings: Sequence[Finding],
    today: Optional[date] = None,
    months: int = 12,
) -> List[Tuple[str, int]]:
    """Findings per end-of-life month (YYYY-MM), sorted ascending.

    The next `months` months are always present (possibly with 0); findings
    whose end of life is not an ISO date (YYYY-MM...) are left out.
    """
    today = today or date.today()
    buckets: Dict[str, int] = {}
    for i in range(months):
        buckets[_add_months(today, i).strftime("%Y-%m")] = 0
    for f in findings:
        m = _EOL_MONTH.match((f.estimated_end_of_life or "").strip())
        if m is None:
            continue
        key = m.group(1)
        buckets[key] = buckets.get(key, 0) + 1
    return sorted(buckets.items())


class ReportGenerator:
    """Generate reports from analysis results."""

    @staticmethod
    def generate_text_report(report: AnalysisReport) -> str:
        """Generate a text report."""
        findings = report.findings
        if not findings:
            return f"\n✓ No breaking changes found (health score {report.health_score})\n"

        lines = [f"\n{'='*80}"]
        title = "Future Compatibility Report"
        if report.profile_id:
            title += f": {report.profile_id}"
        lines.append(title)
        lines.append(f"Health score: {report.health_score}/100")
        lines.append(f"{'='*80}\n")

        counts = severity_counts(findings)
        for severity in Severity:
            group = [f for f in findings if f.severity == severity]
            if not group:
                continue
            lines.append(f"{severity.value.upper()} ({len(group)}):")
            lines.append("-" * 80)
            for f in group:
                lines.append(f"  Line {f.line_number}: {f.message}")
                lines.append(f"    Code: {f.matched_text}")
                lines.append(f"    Fix: {f.suggestion}")
                if f.replacement_text is not None:
                    lines.append(f"    Rewrite: {f.affected_text} -> {f.replacement_text}")
                lines.append(f"    Rule: {f.rule_id}\n")

        lines.append(
            f"\nSummary: {counts[Severity.CRITICAL]} critical, "
            f"{counts[Severity.WARNING]} warnings, {counts[Severity.INFO]} info"
        )
        lines.append("="*80)
        return "\n".join(lines)

