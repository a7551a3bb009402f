"""
Main entry point that coordinates scanning, scoring, rewriting and reporting.
"""

from typing import Optional, Sequence

from .issue import AnalysisReport, DependencyAudit, EmulationResult
from .registry import ProfileRegistry, default_registry
from .rewriter import apply_all_fixes, fixes_from_findings
from .reporter import assemble
from .scanner import scan
from .scorer import DEFAULT_POLICY, ScoringPolicy, score


class ShadowEmulator:
    """Runs source text against a target platform profile."""

    def __init__(
        self,
        registry: Optional[ProfileRegistry] = None,
        policy: ScoringPolicy = DEFAULT_POLICY,
    ):
        self.registry = registry or default_registry()
        self.policy = policy

    def analyze(
        self,
        text: str,
        profile_id: Optional[str] = None,
        dependencies: Optional[Sequence[DependencyAudit]] = None,
        timestamp: Optional[str] = None,
    ) -> AnalysisReport:
        """Scan, score and assemble a report for one profile."""
        profile = self.registry.get_profile(profile_id)
        result = scan(text, profile)
        return assemble(
            result.findings,
            score(result.findings, self.policy),
            result.logs,
            timestamp=timestamp,
            dependencies=dependencies,
            profile_id=profile.id,
        )

    def simulate(self, text: str, profile_id: Optional[str] = None) -> EmulationResult:
        """Scan, score and auto-patch every finding that has a rewrite.

        patched_text is empty when no rewrite changed the text.
        """
        profile = self.registry.get_profile(profile_id)
        result = scan(text, profile)
        patched = ""
        fixes = fixes_from_findings(result.findings)
        if fixes:
            rewrite = apply_all_fixes(text, fixes)
            if rewrite.ok and rewrite.rewritten_text != text:
                patched = rewrite.rewritten_text
        return EmulationResult(
            profile_id=profile.id,
            score=score(result.findings, self.policy),
            findings=result.findings,
            patched_text=patched,
            logs=result.logs,
        )
