"""Scanner service: wraps deprecation_engine and maps results to API models."""

from deps import List, Optional

from deprecation_engine import (
    AnalysisReport,
    DependencyAudit,
    Finding,
    Fix,
    PlatformProfile,
    RewriteResult,
    ShadowEmulator,
    apply_all_fixes,
    apply_fix,
    build_timeline,
    severity_counts,
)
from ..config import get_default_profile_id, get_scoring_policy
from ..schemas import (
    DependencyOut,
    EmulationResponse,
    FixItem,
    FixResponse,
    IssueOut,
    ProfileOut,
    ReportResponse,
    RuleOut,
    TimelinePoint,
)


def issue_to_out(f: Finding) -> IssueOut:
    return IssueOut(
        id=f.id,
        rule_id=f.rule_id,
        severity=f.severity.value,
        message=f.message,
        suggestion=f.suggestion,
        matched_text=f.matched_text,
        affected_text=f.affected_text,
        replacement_text=f.replacement_text,
        line_number=f.line_number,
        start_offset=f.start_offset,
        end_offset=f.end_offset,
        category=f.category.value,
        estimated_end_of_life=f.estimated_end_of_life,
        documentation_url=f.documentation_url,
        is_prediction=f.is_prediction,
        prediction_confidence=f.prediction_confidence,
        risk_factors=list(f.risk_factors),
    )


def _dependency_to_out(d: DependencyAudit) -> DependencyOut:
    return DependencyOut(
        package_name=d.package_name,
        current_version=d.current_version,
        latest_version=d.latest_version,
        compatibility_status=d.compatibility_status.value,
        action_required=d.action_required,
    )


def report_to_out(report: AnalysisReport, source: str) -> ReportResponse:
    """Same response shape for rule-engine and analyzer reports."""
    counts = severity_counts(report.findings)
    return ReportResponse(
        source=source,
        profile_id=report.profile_id,
        health_score=report.health_score,
        summary=report.summary,
        issues=[issue_to_out(f) for f in report.findings],
        logs=list(report.logs),
        severity_counts={s.value: n for s, n in counts.items()},
        timeline=[TimelinePoint(date=d, count=n) for d, n in build_timeline(report.findings)],
        dependencies=[_dependency_to_out(d) for d in report.dependencies],
        timestamp=report.timestamp,
    )


def rewrite_to_out(result: RewriteResult) -> FixResponse:
    return FixResponse(
        status=result.status.value,
        applied_count=result.applied_count,
        original_code=result.original_text,
        rewritten_code=result.rewritten_text,
        original_highlights=list(result.original_highlights),
        rewritten_highlights=list(result.rewritten_highlights),
        unresolved=list(result.unresolved),
    )


def profile_to_out(p: PlatformProfile) -> ProfileOut:
    return ProfileOut(
        id=p.id,
        name=p.name,
        version_label=p.version_label,
        description=p.description,
        rules=[
            RuleOut(
                id=r.id,
                severity=r.severity.value,
                message=r.message,
                migration_suggestion=r.migration_suggestion,
                category=r.category.value,
                automated=r.rewrite is not None,
            )
            for r in p.rules
        ],
    )


class CheckerService:
    """Wraps ShadowEmulator and the rewrite engine for use by the API."""

    def __init__(self, emulator: Optional[ShadowEmulator] = None):
        self.emulator = emulator or ShadowEmulator(policy=get_scoring_policy())

    def _profile_id(self, profile_id: Optional[str]) -> Optional[str]:
        return profile_id or get_default_profile_id() or None

    def profiles(self) -> List[ProfileOut]:
        return [profile_to_out(p) for p in self.emulator.registry.list_profiles()]

    def profile(self, profile_id: str) -> ProfileOut:
        return profile_to_out(self.emulator.registry.get_profile(profile_id))

    def scan_report(self, code: str, profile_id: Optional[str] = None) -> AnalysisReport:
        """Rule-engine report (raises ProfileNotFoundError for unknown ids)."""
        return self.emulator.analyze(code, self._profile_id(profile_id))

    def scan(self, code: str, profile_id: Optional[str] = None) -> ReportResponse:
        return report_to_out(self.scan_report(code, profile_id), source="rules")

    def simulate(self, code: str, profile_id: Optional[str] = None) -> EmulationResponse:
        result = self.emulator.simulate(code, self._profile_id(profile_id))
        return EmulationResponse(
            profile_id=result.profile_id,
            score=result.score,
            issues=[issue_to_out(f) for f in result.findings],
            patched_code=result.patched_text,
            logs=list(result.logs),
        )

    def fix(self, code: str, matched_text: str, replacement_text: str) -> RewriteResult:
        return apply_fix(code, matched_text, replacement_text)

    def fix_all(self, code: str, issues: List[FixItem]) -> RewriteResult:
        return apply_all_fixes(code, [Fix(i.matched_text, i.replacement_text) for i in issues])
