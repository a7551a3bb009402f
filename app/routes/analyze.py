"""Analyze route (external AI analyzer)."""

from fastapi import APIRouter

from deprecation_engine import ExternalAnalyzerError
from ..schemas import AnalyzeRequest, ReportResponse
from ..services.checker import report_to_out
from ..utils import ai_svc, analyzer_http_error

router = APIRouter()


@router.post("/analyze", response_model=ReportResponse)
def analyze(req: AnalyzeRequest) -> ReportResponse:
    """Analyzer report in the same shape as /scan. Errors carry a category."""
    try:
        report = ai_svc.analyze(req.code, req.context)
    except ExternalAnalyzerError as e:
        raise analyzer_http_error(e) from e
    return report_to_out(report, source="analyzer")
