"""Scan routes (rule engine only, no AI)."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from deprecation_engine import ProfileNotFoundError
from ..report_formatter import format_text_report
from ..schemas import EmulationResponse, ReportResponse, ScanRequest
from ..utils import checker_svc, profile_not_found, run_scan

router = APIRouter()


@router.post("/scan", response_model=ReportResponse)
def scan(req: ScanRequest) -> ReportResponse:
    """Rule-based scan: findings, health score and log lines."""
    return run_scan(req)


@router.post("/simulate", response_model=EmulationResponse)
def simulate(req: ScanRequest) -> EmulationResponse:
    """Shadow mode: scan, score and auto-patch every finding with a rewrite."""
    try:
        return checker_svc.simulate(req.code, req.profile_id)
    except ProfileNotFoundError as e:
        raise profile_not_found(e) from e


@router.post("/report", response_class=PlainTextResponse)
def report(req: ScanRequest) -> PlainTextResponse:
    """Markdown report of a rule-based scan."""
    result = run_scan(req)
    patched = checker_svc.simulate(req.code, req.profile_id)
    return PlainTextResponse(format_text_report(result, patched), media_type="text/markdown")
