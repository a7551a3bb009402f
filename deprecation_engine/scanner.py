"""
Scanner: runs every rule of a profile over a source text.
"""

import logging
from typing import List

from .issue import Finding, ScanResult, Severity
from .profile import PlatformProfile
from .rule import PatternRule
from .utils import line_number_at, newline_offsets

logger = logging.getLogger(__name__)


def _finding_for(rule: PatternRule, text: str, start: int, end: int, matched: str, offsets: List[int]) -> Finding:
    affected = matched
    replacement = None
    if rule.rewrite is not None:
        resolved = rule.rewrite.resolve(text, start, end)
        if resolved is not None:
            affected, replacement = resolved
    return Finding(
        rule_id=rule.id,
        severity=rule.severity,
        message=rule.message,
        suggestion=rule.migration_suggestion,
        matched_text=matched,
        line_number=line_number_at(offsets, start),
        start_offset=start,
        end_offset=end,
        affected_text=affected,
        replacement_text=replacement,
        category=rule.category,
        estimated_end_of_life=rule.end_of_life,
        documentation_url=rule.documentation_url,
    )


def log_line(rule: PatternRule) -> str:
    """User-facing log line for a rule that matched at least once."""
    if rule.severity == Severity.CRITICAL:
        return f"[Error] {rule.message}"
    return f"[Warn] {rule.message}"


def scan(text: str, profile: PlatformProfile) -> ScanResult:
    """Scan text with every rule of profile.

    Findings are ordered by rule declaration, then by position within a
    rule. Neither text nor profile is modified.
    """
    if text is None:
        raise ValueError("text must not be None")
    offsets = newline_offsets(text)
    findings: List[Finding] = []
    logs: List[str] = []

    for rule in profile.rules:
        matched_any = False
        for start, end, matched in rule.find(text):
            matched_any = True
            findings.append(_finding_for(rule, text, start, end, matched, offsets))
        if matched_any:
            logs.append(log_line(rule))

    if not findings:
        logs.append(f"[Success] Application mounted successfully in {profile.title}.")
    else:
        logs.append(f"[System] Process terminated with {len(findings)} issues.")

    logger.debug("Scanned %d chars with %s: %d findings", len(text), profile.id, len(findings))
    return ScanResult(findings=findings, logs=logs)
