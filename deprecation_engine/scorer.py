"""
Health score: severity-weighted deductions from 100.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

from .errors import ConfigurationError
from .issue import Finding, Severity

MAX_SCORE = 100


@dataclass(frozen=True)
class ScoringPolicy:
    """Points deducted per finding of each severity."""
    critical: int = 25
    warning: int = 10
    info: int = 2

    def __post_init__(self):
        for name in ("critical", "warning", "info"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"Penalty for {name} must not be negative")

    def penalty(self, severity: Severity) -> int:
        if severity == Severity.CRITICAL:
            return self.critical
        if severity == Severity.WARNING:
            return self.warning
        return self.info


DEFAULT_POLICY = ScoringPolicy()
# Deduction table the external analyzer is prompted with.
ANALYZER_POLICY = ScoringPolicy(critical=15, warning=5, info=2)


def score(findings: Iterable[Finding], policy: ScoringPolicy = DEFAULT_POLICY) -> int:
    """Score in [0, 100]; independent of the order of findings."""
    total = sum(policy.penalty(f.severity) for f in findings)
    return max(0, MAX_SCORE - total)


def severity_counts(findings: Iterable[Finding]) -> Dict[Severity, int]:
    """Number of findings per severity; every severity is present."""
    counts = {s: 0 for s in Severity}
    for f in findings:
        counts[f.severity] += 1
    return counts
