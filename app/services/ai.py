"""AI service: Together.ai-backed external analyzer with the same report shape as the rule engine."""

import openai

from ..config import (
    get_analyzer_timeout,
    get_scoring_policy,
    get_together_api_key,
    get_together_base_url,
    get_together_model,
)
from deps import Any, Callable, List, OpenAI, Optional, ValidationError, json, logging
from deprecation_engine import (
    ANALYZER_POLICY,
    AnalysisReport,
    Category,
    CompatibilityStatus,
    DependencyAudit,
    ExternalAnalyzerError,
    Finding,
    ScoringPolicy,
    Severity,
    assemble,
    score,
)
from deprecation_engine import errors
from deprecation_engine.issue import UNKNOWN_END_OF_LIFE
from deprecation_engine.utils import line_number_at, locate_snippet, newline_offsets
from ..schemas import AnalyzerDependency, AnalyzerIssue, AnalyzerPayload

logger = logging.getLogger(__name__)

ANALYZER_RULE_ID = "analyzer"
MAX_CODE_CHARS = 12000


def default_client() -> Optional[Any]:
    """Return OpenAI-compatible client for Together.ai, or None if no key is set."""
    key = get_together_api_key()
    if not key:
        return None
    return OpenAI(api_key=key, base_url=get_together_base_url())


REPORT_FORMAT = """{
  "overallHealthScore": number (0-100),
  "summary": string,
  "issues": [
    {
      "severity": "Critical" | "Warning" | "Info",
      "title": string,
      "description": string,
      "affectedCode": string (exact snippet copied from the input),
      "replacementCode": string,
      "estimatedEndOfLife": "YYYY-MM-DD" or "Unknown",
      "category": "Security" | "Deprecation" | "Performance" | "Standard",
      "isPrediction": boolean,
      "predictionConfidence": number (0-100),
      "riskFactors": [string]
    }
  ],
  "dependencies": [
    {
      "packageName": string,
      "currentVersion": string,
      "latestVersion": string,
      "compatibilityStatus": "Compatible" | "Breaking Changes" | "Unknown",
      "actionRequired": string
    }
  ]
}"""


def _system_prompt(context: Optional[str]) -> str:
    return (
        "You are 'DepreCheck AI', a senior software architect and future-tech predictor. "
        "Scan the provided code (or dependency file) for CURRENT issues and FUTURE risks.\n\n"
        "SCORING RULES:\n"
        "- Start with a Health Score of 100. If you find NO issues, the score MUST remain 100.\n"
        "- Deduct 15 points for each CRITICAL issue, 5 for each WARNING, 2 for each INFO/PREDICTION.\n"
        "- If the code already uses modern APIs, DO NOT flag old issues.\n\n"
        "1. Standard deprecation: libraries/methods that are currently deprecated.\n"
        "2. Future-API prediction: APIs likely to be deprecated in the next 6-12 months "
        "(slowing maintenance, known upcoming breaking changes in major frameworks, legacy patterns). "
        "Mark these with isPrediction=true and a predictionConfidence score.\n"
        "3. Security: vulnerabilities related to outdated dependencies.\n\n"
        "For every issue give an estimated end of life, modern replacement code and risk factors. "
        "affectedCode must be copied verbatim from the input so it can be located and replaced. "
        "Populate dependencies if the input looks like a dependency file or has imports.\n\n"
        f"Context: {context or 'General Web/Software Development'}\n\n"
        "Respond with a single JSON object of this form and nothing else:\n"
        f"{REPORT_FORMAT}"
    )


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        if lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines)
    return text


_SEVERITY_ALIASES = {
    "critical": Severity.CRITICAL,
    "error": Severity.CRITICAL,
    "warning": Severity.WARNING,
    "warn": Severity.WARNING,
    "info": Severity.INFO,
}


def _parse_severity(value: str) -> Severity:
    severity = _SEVERITY_ALIASES.get((value or "").strip().lower())
    if severity is None:
        logger.debug("Unknown analyzer severity %r, treating as Info", value)
        return Severity.INFO
    return severity


def _parse_category(value: str) -> Category:
    for c in Category:
        if c.value.lower() == (value or "").strip().lower():
            return c
    return Category.DEPRECATION


def _parse_end_of_life(value: str) -> str:
    value = (value or "").strip()
    if not value or value.lower() == UNKNOWN_END_OF_LIFE.lower():
        return UNKNOWN_END_OF_LIFE
    return value


def _parse_status(value: str) -> CompatibilityStatus:
    for s in CompatibilityStatus:
        if s.value.lower() == (value or "").strip().lower():
            return s
    return CompatibilityStatus.UNKNOWN


def issue_to_finding(issue: AnalyzerIssue, code: str, offsets: List[int]) -> Finding:
    """Map an analyzer issue onto the rule-engine finding shape.

    Offsets point at the first occurrence of the affected code; when it cannot
    be located, line_number is 0 and both offsets are -1.
    """
    located = locate_snippet(code, issue.affected_code)
    if located:
        start = code.find(located)
        end = start + len(located)
        line = line_number_at(offsets, start)
    else:
        start = end = -1
        line = 0
    confidence = issue.prediction_confidence
    return Finding(
        rule_id=ANALYZER_RULE_ID,
        severity=_parse_severity(issue.severity),
        message=issue.title,
        suggestion=issue.description,
        matched_text=located or issue.affected_code,
        line_number=line,
        start_offset=start,
        end_offset=end,
        affected_text=located or issue.affected_code,
        replacement_text=issue.replacement_code,
        category=_parse_category(issue.category),
        estimated_end_of_life=_parse_end_of_life(issue.estimated_end_of_life),
        documentation_url=issue.documentation_url,
        is_prediction=issue.is_prediction,
        prediction_confidence=int(round(confidence)) if confidence is not None else None,
        risk_factors=list(issue.risk_factors),
    )


def _dependency(d: AnalyzerDependency) -> DependencyAudit:
    return DependencyAudit(
        package_name=d.package_name,
        current_version=d.current_version,
        latest_version=d.latest_version,
        compatibility_status=_parse_status(d.compatibility_status),
        action_required=d.action_required,
    )


def classify_error(exc: BaseException) -> ExternalAnalyzerError:
    """Turn a provider/transport/parse failure into a user-facing analyzer error."""
    if isinstance(exc, ExternalAnalyzerError):
        return exc
    message = str(exc)
    lower = message.lower()
    status = getattr(exc, "status_code", 0) or 0

    if isinstance(exc, (json.JSONDecodeError, ValidationError)):
        return ExternalAnalyzerError(
            errors.MALFORMED,
            "The AI service returned a response that could not be understood. Please try again.",
            exc,
        )
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)) \
            or status in (401, 403) or "api_key" in lower or "api key" in lower:
        return ExternalAnalyzerError(
            errors.AUTH,
            "Invalid API Key. Please ensure your environment is configured correctly.",
            exc,
        )
    if isinstance(exc, openai.RateLimitError) or status == 429 or "quota" in lower or "rate limit" in lower:
        return ExternalAnalyzerError(
            errors.RATE_LIMIT,
            "Rate limit exceeded. You are sending requests too quickly. Please wait a moment.",
            exc,
        )
    if status in (502, 503, 529) or "overloaded" in lower:
        return ExternalAnalyzerError(
            errors.OVERLOADED,
            "The AI service is currently overloaded. Please try again in a few minutes.",
            exc,
        )
    if "safety" in lower or "blocked" in lower or "content_filter" in lower:
        return ExternalAnalyzerError(
            errors.BLOCKED,
            "The model declined to generate a response due to safety policies. Please modify your input.",
            exc,
        )
    if isinstance(exc, openai.APIConnectionError):
        return ExternalAnalyzerError(
            errors.NETWORK,
            "Network error. Please check your internet connection.",
            exc,
        )
    return ExternalAnalyzerError(
        errors.UNKNOWN,
        "An unexpected error occurred during analysis.",
        exc,
    )


class AIService:
    """Together.ai-backed analysis provider."""

    def __init__(
        self,
        client_factory: Callable[[], Optional[Any]] = default_client,
        policy: Optional[ScoringPolicy] = None,
    ):
        self.client_factory = client_factory
        self.policy = policy or get_scoring_policy(ANALYZER_POLICY)

    def _complete(self, client: Any, code: str, context: Optional[str]) -> str:
        r = client.chat.completions.create(
            model=get_together_model(),
            messages=[
                {"role": "system", "content": _system_prompt(context)},
                {"role": "user", "content": code[:MAX_CODE_CHARS]},
            ],
            response_format={"type": "json_object"},
            temperature=0.2,
            max_tokens=4096,
            timeout=get_analyzer_timeout(),
        )
        if not r.choices:
            raise ExternalAnalyzerError(errors.MALFORMED, "No response from AI.")
        choice = r.choices[0]
        if getattr(choice, "finish_reason", None) == "content_filter":
            raise ExternalAnalyzerError(
                errors.BLOCKED,
                "The model declined to generate a response due to safety policies. Please modify your input.",
            )
        content = choice.message.content if choice.message else None
        if not content:
            raise ExternalAnalyzerError(errors.MALFORMED, "No response from AI.")
        return content

    def analyze(self, code: str, context: Optional[str] = None) -> AnalysisReport:
        """Run the external analyzer and return a rule-engine shaped report.

        Raises ExternalAnalyzerError (with a category) on any failure.
        """
        client = self.client_factory()
        if client is None:
            raise ExternalAnalyzerError(
                errors.UNAVAILABLE,
                "The AI analyzer is not configured. Set TOGETHER_API_KEY to enable it.",
            )
        try:
            content = self._complete(client, code, context)
            payload = AnalyzerPayload.model_validate(json.loads(_strip_code_fence(content)))
        except Exception as e:
            err = classify_error(e)
            logger.warning("Analyzer request failed (%s): %s", err.category, e)
            raise err from e

        offsets = newline_offsets(code)
        findings = [issue_to_finding(i, code, offsets) for i in payload.issues]
        health = score(findings, self.policy)
        if payload.overall_health_score is not None and int(payload.overall_health_score) != health:
            logger.debug(
                "Analyzer reported score %s, recomputed %d from %d findings",
                payload.overall_health_score, health, len(findings),
            )
        logs = []
        if len(code) > MAX_CODE_CHARS:
            logger.warning(
                "Analyzer input truncated to %d of %d characters", MAX_CODE_CHARS, len(code)
            )
            logs.append(
                f"[Warn] Input truncated to {MAX_CODE_CHARS} of {len(code)} characters for analysis."
            )
        logs.append(f"[System] External analyzer returned {len(findings)} issues.")
        return assemble(
            findings,
            health,
            logs=logs,
            dependencies=[_dependency(d) for d in payload.dependencies],
            summary=payload.summary or None,
        )
