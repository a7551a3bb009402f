"""Utility functions for the API."""

from deps import HTTPException

from deprecation_engine import ExternalAnalyzerError, ProfileNotFoundError, RewriteResult
from deprecation_engine import errors
from deprecation_engine.errors import NoApplicableFixesError, SnippetNotFoundError
from .schemas import ReportResponse, ScanRequest
from .services import AIService, CheckerService

checker_svc = CheckerService()
ai_svc = AIService()

# HTTP status for each analyzer error category.
ANALYZER_HTTP_STATUS = {
    errors.AUTH: 401,
    errors.RATE_LIMIT: 429,
    errors.OVERLOADED: 503,
    errors.UNAVAILABLE: 503,
    errors.BLOCKED: 422,
    errors.MALFORMED: 502,
    errors.NETWORK: 502,
    errors.UNKNOWN: 502,
}


def profile_not_found(e: ProfileNotFoundError) -> HTTPException:
    return HTTPException(404, str(e))


def analyzer_http_error(e: ExternalAnalyzerError) -> HTTPException:
    return HTTPException(
        ANALYZER_HTTP_STATUS.get(e.category, 502),
        {"message": e.message, "category": e.category},
    )


def run_scan(req: ScanRequest) -> ReportResponse:
    """Run the rule engine. Unknown profiles become 404."""
    try:
        return checker_svc.scan(req.code, req.profile_id)
    except ProfileNotFoundError as e:
        raise profile_not_found(e) from e


def checked_rewrite(result: RewriteResult) -> RewriteResult:
    """Raise 409 when a single fix's snippet is gone, 422 when a bulk fix applied nothing."""
    try:
        return result.raise_for_status()
    except SnippetNotFoundError as e:
        raise HTTPException(409, str(e)) from e
    except NoApplicableFixesError as e:
        raise HTTPException(422, str(e)) from e