"""
Rewrite engine: applies textual fixes to a copy of the source text.

Two entry points:
- apply_fix replaces the first occurrence of one snippet (single-issue fix).
- apply_all_fixes applies many fixes in one pass, longest snippet first,
  replacing every occurrence of each and skipping the ones that can no
  longer be found.

Neither raises for "not found" or "nothing applied"; both are reported
through RewriteResult.status.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from .issue import Finding, FixStatus, RewriteResult
from .utils import count_occurrences, locate_snippet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fix:
    """Replace matched_text with replacement_text."""
    matched_text: str
    replacement_text: str


def fixes_from_findings(findings: Iterable[Finding]) -> List[Fix]:
    """Fixes for every finding that carries an automated replacement."""
    return [
        Fix(f.affected_text, f.replacement_text)
        for f in findings
        if f.fixable
    ]


def apply_fix(text: str, matched_text: str, replacement_text: str) -> RewriteResult:
    """Replace the first occurrence of matched_text (exact, then trimmed)."""
    if text is None:
        raise ValueError("text must not be None")
    match = locate_snippet(text, matched_text)
    if not match:
        logger.debug("Snippet not found for single fix: %r", matched_text)
        return RewriteResult(
            original_text=text,
            rewritten_text=text,
            status=FixStatus.SNIPPET_NOT_FOUND,
            unresolved=[matched_text],
        )
    return RewriteResult(
        original_text=text,
        rewritten_text=text.replace(match, replacement_text, 1),
        status=FixStatus.APPLIED,
        applied_count=1,
        original_highlights=[match],
        rewritten_highlights=[replacement_text],
    )


def _unique(fixes: Iterable[Fix]) -> List[Fix]:
    seen = set()
    out = []
    for fix in fixes:
        key = (fix.matched_text, fix.replacement_text)
        if key in seen:
            continue
        seen.add(key)
        out.append(fix)
    return out


def apply_all_fixes(text: str, fixes: Iterable[Fix]) -> RewriteResult:
    """Apply every fix against the progressively updated text.

    Longer snippets go first so a shorter snippet contained in a longer one
    cannot break the longer replacement. Each located snippet is replaced
    everywhere; fixes whose snippet is gone are skipped.
    """
    if text is None:
        raise ValueError("text must not be None")
    ordered = sorted(_unique(fixes), key=lambda f: len(f.matched_text), reverse=True)

    current = text
    applied = 0
    original_highlights: List[str] = []
    rewritten_highlights: List[str] = []
    unresolved: List[str] = []

    for fix in ordered:
        match = locate_snippet(current, fix.matched_text)
        occurrences = count_occurrences(current, match)
        if not occurrences:
            unresolved.append(fix.matched_text)
            continue
        current = current.replace(match, fix.replacement_text)
        applied += occurrences
        original_highlights.append(match)
        rewritten_highlights.append(fix.replacement_text)

    if not applied:
        return RewriteResult(
            original_text=text,
            rewritten_text=text,
            status=FixStatus.NO_APPLICABLE_FIXES,
            unresolved=unresolved,
        )
    logger.debug("Bulk fix replaced %d occurrences, skipped %d fixes", applied, len(unresolved))
    return RewriteResult(
        original_text=text,
        rewritten_text=current,
        status=FixStatus.APPLIED,
        applied_count=applied,
        original_highlights=original_highlights,
        rewritten_highlights=rewritten_highlights,
        unresolved=unresolved,
    )
