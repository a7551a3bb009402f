"""Fix routes (single-issue and bulk rewrite)."""

from fastapi import APIRouter

from ..schemas import FixAllRequest, FixRequest, FixResponse
from ..services.checker import rewrite_to_out
from ..utils import checked_rewrite, checker_svc

router = APIRouter()


@router.post("/fix", response_model=FixResponse)
def fix(req: FixRequest) -> FixResponse:
    """Replace the first occurrence of matched_text. 409 if it is no longer there."""
    result = checker_svc.fix(req.code, req.matched_text, req.replacement_text)
    return rewrite_to_out(checked_rewrite(result))


@router.post("/fix-all", response_model=FixResponse)
def fix_all(req: FixAllRequest) -> FixResponse:
    """Apply every fix (longest first, all occurrences). 422 if none applied."""
    result = checker_svc.fix_all(req.code, req.issues)
    return rewrite_to_out(checked_rewrite(result))
