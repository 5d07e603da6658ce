"""
Profile Routes

Profile strength summary for the dashboard.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from counsellor.api.dependencies import RecommendationServiceDep
from counsellor.domain.models import StudentProfileInput


router = APIRouter()


class ProfileStrengthResponse(BaseModel):
    """Profile strength response model."""
    overall: int
    academics: str
    exams: str
    sop: str


@router.post("/profiles/strength", response_model=ProfileStrengthResponse)
async def profile_strength(
    profile: StudentProfileInput,
    service: RecommendationServiceDep,
):
    """Grade the submitted profile on its own (0-100 plus labels)."""
    strength = service.profile_strength(profile)
    return ProfileStrengthResponse(**strength.to_dict())
