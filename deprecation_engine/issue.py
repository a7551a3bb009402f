"""
Finding and report data models for the deprecation engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import NoApplicableFixesError, SnippetNotFoundError


class Severity(Enum):
    """Finding severity levels, most severe first."""
    CRITICAL = "Critical"
    WARNING = "Warning"
    INFO = "Info"


class Category(Enum):
    """Finding categories."""
    SECURITY = "Security"
    DEPRECATION = "Deprecation"
    PERFORMANCE = "Performance"
    STANDARD = "Standard"


class CompatibilityStatus(Enum):
    """Upgrade status of an audited dependency."""
    COMPATIBLE = "Compatible"
    BREAKING_CHANGES = "Breaking Changes"
    UNKNOWN = "Unknown"


UNKNOWN_END_OF_LIFE = "Unknown"


@dataclass(frozen=True)
class Finding:
    """One concrete match of a rule (or one analyzer issue) in the source text.

    Rule fields are copied at scan time; a finding never refers back to the
    rule object itself, only to its id.
    """
    rule_id: str
    severity: Severity
    message: str
    suggestion: str
    matched_text: str
    line_number: int
    start_offset: int
    end_offset: int
    affected_text: str = ""
    replacement_text: Optional[str] = None
    category: Category = Category.DEPRECATION
    estimated_end_of_life: str = UNKNOWN_END_OF_LIFE
    documentation_url: Optional[str] = None
    is_prediction: bool = False
    prediction_confidence: Optional[int] = None
    risk_factors: List[str] = field(default_factory=list)
    id: str = ""

    def __post_init__(self):
        if not self.affected_text:
            object.__setattr__(self, "affected_text", self.matched_text)

    @property
    def fixable(self) -> bool:
        """True when an automated replacement is available."""
        return self.replacement_text is not None


@dataclass(frozen=True)
class DependencyAudit:
    """Upgrade status of one package; supplied by an external source."""
    package_name: str
    current_version: str
    latest_version: str
    compatibility_status: CompatibilityStatus
    action_required: str


@dataclass(frozen=True)
class AnalysisReport:
    """Scored result of one scan."""
    health_score: int
    summary: str
    findings: List[Finding]
    logs: List[str]
    timestamp: str
    profile_id: Optional[str] = None
    dependencies: List[DependencyAudit] = field(default_factory=list)


@dataclass(frozen=True)
class ScanResult:
    """Raw scanner output: ordered findings plus user-facing log lines."""
    findings: List[Finding]
    logs: List[str]


class FixStatus(Enum):
    """Outcome of a single or bulk fix."""
    APPLIED = "Applied"
    SNIPPET_NOT_FOUND = "SnippetNotFound"
    NO_APPLICABLE_FIXES = "NoApplicableFixes"


@dataclass(frozen=True)
class RewriteResult:
    """Text before and after a fix, with the changed substrings for diffing."""
    original_text: str
    rewritten_text: str
    status: FixStatus
    applied_count: int = 0
    original_highlights: List[str] = field(default_factory=list)
    rewritten_highlights: List[str] = field(default_factory=list)
    unresolved: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == FixStatus.APPLIED

    def raise_for_status(self) -> "RewriteResult":
        """Raise the matching error when the fix did not apply."""
        if self.status == FixStatus.SNIPPET_NOT_FOUND:
            raise SnippetNotFoundError(self.unresolved[0] if self.unresolved else "")
        if self.status == FixStatus.NO_APPLICABLE_FIXES:
            raise NoApplicableFixesError(len(self.unresolved))
        return self


@dataclass(frozen=True)
class EmulationResult:
    """Shadow-mode run of one profile: findings, score and the auto-patched text."""
    profile_id: str
    score: int
    findings: List[Finding]
    patched_text: str
    logs: List[str]
