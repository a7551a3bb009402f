"""Platform profile routes."""

from typing import List

from fastapi import APIRouter

from deprecation_engine import ProfileNotFoundError
from ..schemas import ProfileOut
from ..utils import checker_svc, profile_not_found

router = APIRouter()


@router.get("/profiles", response_model=List[ProfileOut])
def profiles() -> List[ProfileOut]:
    """All target platform profiles; the first one is the default."""
    return checker_svc.profiles()


@router.get("/profiles/{profile_id}", response_model=ProfileOut)
def profile(profile_id: str) -> ProfileOut:
    try:
        return checker_svc.profile(profile_id)
    except ProfileNotFoundError as e:
        raise profile_not_found(e) from e
