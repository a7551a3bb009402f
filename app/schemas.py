"""Pydantic request/response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


# --- Request ---


class ScanRequest(BaseModel):
    """Request body for rule-based scanning."""

    code: str = Field(..., description="Source code to scan")
    profile_id: Optional[str] = Field(default=None, description="Target platform profile (default: first profile)")


class AnalyzeRequest(BaseModel):
    """Request body for the external analyzer."""

    code: str = Field(..., description="Source code or dependency file to analyze")
    context: Optional[str] = Field(default=None, description="Free-text hint, e.g. 'React 18 app'")


class FixRequest(BaseModel):
    """Single-issue fix: replace the first occurrence of matched_text."""

    code: str
    matched_text: str
    replacement_text: str


class FixItem(BaseModel):
    matched_text: str
    replacement_text: str


class FixAllRequest(BaseModel):
    """Bulk fix: every occurrence of every located snippet is replaced."""

    code: str
    issues: List[FixItem] = Field(default_factory=list)


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single finding."""

    id: str = ""
    rule_id: str
    severity: str = Field(..., description="Critical, Warning, or Info")
    message: str
    suggestion: str
    matched_text: str
    affected_text: str
    replacement_text: Optional[str] = Field(default=None, description="Automated replacement for affected_text, if any")
    line_number: int
    start_offset: int
    end_offset: int
    category: str
    estimated_end_of_life: str = "Unknown"
    documentation_url: Optional[str] = None
    is_prediction: bool = False
    prediction_confidence: Optional[int] = None
    risk_factors: List[str] = Field(default_factory=list)


class DependencyOut(BaseModel):
    package_name: str
    current_version: str
    latest_version: str
    compatibility_status: str
    action_required: str


class TimelinePoint(BaseModel):
    date: str = Field(..., description="YYYY-MM")
    count: int


# --- Responses ---


class ReportResponse(BaseModel):
    """Response for POST /scan and POST /analyze."""

    source: str = Field(..., description="'rules' or 'analyzer'")
    profile_id: Optional[str] = None
    health_score: int
    summary: str
    issues: List[IssueOut] = Field(default_factory=list)
    logs: List[str] = Field(default_factory=list)
    severity_counts: Dict[str, int] = Field(default_factory=dict)
    timeline: List[TimelinePoint] = Field(default_factory=list)
    dependencies: List[DependencyOut] = Field(default_factory=list)
    timestamp: str


class EmulationResponse(BaseModel):
    """Response for POST /simulate."""

    profile_id: str
    score: int
    issues: List[IssueOut] = Field(default_factory=list)
    patched_code: str = Field(default="", description="Auto-patched code; empty when nothing was rewritten")
    logs: List[str] = Field(default_factory=list)


class FixResponse(BaseModel):
    """Response for POST /fix and POST /fix-all."""

    status: str
    applied_count: int
    original_code: str
    rewritten_code: str
    original_highlights: List[str] = Field(default_factory=list)
    rewritten_highlights: List[str] = Field(default_factory=list)
    unresolved: List[str] = Field(default_factory=list)


class RuleOut(BaseModel):
    id: str
    severity: str
    message: str
    migration_suggestion: str
    category: str
    automated: bool = Field(..., description="True if the rule carries an automatic rewrite")


class ProfileOut(BaseModel):
    id: str
    name: str
    version_label: str
    description: str
    rules: List[RuleOut] = Field(default_factory=list)


# --- External analyzer payload ---


class AnalyzerIssue(BaseModel):
    """One issue as returned by the analysis provider."""

    severity: str
    title: str
    description: str = ""
    affected_code: str = Field(default="", alias="affectedCode")
    replacement_code: Optional[str] = Field(default=None, alias="replacementCode")
    estimated_end_of_life: str = Field(default="Unknown", alias="estimatedEndOfLife")
    category: str = "Deprecation"
    documentation_url: Optional[str] = Field(default=None, alias="documentationUrl")
    is_prediction: bool = Field(default=False, alias="isPrediction")
    prediction_confidence: Optional[float] = Field(default=None, alias="predictionConfidence")
    risk_factors: List[str] = Field(default_factory=list, alias="riskFactors")

    @field_validator("prediction_confidence")
    @classmethod
    def clamp_confidence(cls, v: Optional[float]) -> Optional[float]:
        """Confidence is a percentage; out-of-range values are clamped to 0-100."""
        if v is None:
            return None
        return min(100.0, max(0.0, v))

    model_config = {"populate_by_name": True}


class AnalyzerDependency(BaseModel):
    package_name: str = Field(..., alias="packageName")
    current_version: str = Field(default="", alias="currentVersion")
    latest_version: str = Field(default="", alias="latestVersion")
    compatibility_status: str = Field(default="Unknown", alias="compatibilityStatus")
    action_required: str = Field(default="", alias="actionRequired")

    model_config = {"populate_by_name": True}


class AnalyzerPayload(BaseModel):
    """Top-level JSON document returned by the analysis provider."""

    overall_health_score: Optional[float] = Field(default=None, alias="overallHealthScore")
    summary: str = ""
    issues: List[AnalyzerIssue] = Field(default_factory=list)
    dependencies: List[AnalyzerDependency] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
