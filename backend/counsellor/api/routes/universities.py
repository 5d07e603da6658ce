"""
University Routes

Catalog listing plus fit-scored recommendations for a submitted profile.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from counsellor.api.dependencies import RecommendationServiceDep, UniversityRepoDep
from counsellor.domain.models import ScoredUniversity, StudentProfileInput, University


logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Response Models
# ============================================================================

class UniversityListResponse(BaseModel):
    """Catalog listing."""
    universities: List[University]
    count: int


class RecommendationResponse(BaseModel):
    """Universities ranked by fit score for one profile."""
    universities: List[ScoredUniversity]
    count: int
    message: str = "Here are your personalized university recommendations"


class ComponentScoreResponse(BaseModel):
    name: str
    earned: int
    max: int


class FitAssessmentResponse(BaseModel):
    """Fit score breakdown for the university detail page."""
    university_id: str
    fit_score: int
    category: str
    components: List[ComponentScoreResponse]


# ============================================================================
# Endpoints
# ============================================================================

@router.get("/universities", response_model=UniversityListResponse)
async def list_universities(
    repository: UniversityRepoDep,
    country: Optional[str] = Query(None, description="Exact country name"),
    budget: Optional[float] = Query(None, ge=0, description="Maximum annual cost"),
    ranking: Optional[int] = Query(None, ge=1, description="Ranking at or better than"),
    acceptance_rate: Optional[float] = Query(None, ge=0, le=100, alias="acceptanceRate"),
    search: Optional[str] = Query(None, max_length=100),
):
    """List catalog universities, optionally filtered."""
    universities = repository.list_universities(
        country=country,
        max_cost=budget,
        max_ranking=ranking,
        max_acceptance_rate=acceptance_rate,
        search=search,
    )
    return UniversityListResponse(universities=universities, count=len(universities))


@router.post("/universities/recommend", response_model=RecommendationResponse)
async def recommend_universities(
    profile: StudentProfileInput,
    service: RecommendationServiceDep,
):
    """
    Rank every catalog university for the submitted profile.

    Each entry carries a 0-100 fit score and a Dream/Target/Safe category.
    """
    recommendations = service.recommend(profile)
    logger.info(f"Ranked {len(recommendations)} universities for recommendation")
    return RecommendationResponse(universities=recommendations, count=len(recommendations))


@router.get("/universities/{university_id}", response_model=University)
async def get_university(university_id: str, repository: UniversityRepoDep):
    """Get a single university. Unknown ids answer 404."""
    return repository.get(university_id)


@router.post("/universities/{university_id}/fit", response_model=FitAssessmentResponse)
async def university_fit(
    university_id: str,
    profile: StudentProfileInput,
    service: RecommendationServiceDep,
):
    """Fit score, category and component breakdown for one university."""
    assessment = service.evaluate(profile, university_id)
    return FitAssessmentResponse(university_id=university_id, **assessment.to_dict())
