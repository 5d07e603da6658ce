"""
API Dependencies

FastAPI dependency providers for the catalog, the recommendation service
and the chat service. All of them are built once in the application
lifespan and stored on app.state; these providers only hand them out.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.ai.gemini_service import CounsellorChatService
from counsellor.infrastructure.catalog import UniversityRepository
from counsellor.infrastructure.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


def get_university_repository(request: Request) -> UniversityRepository:
    """Dependency provider for the university catalog."""
    return request.app.state.university_repository


def get_recommendation_service(request: Request) -> RecommendationService:
    """Dependency provider for RecommendationService."""
    return request.app.state.recommendation_service


def get_chat_service(request: Request) -> CounsellorChatService:
    """
    Dependency provider for the chat service.

    Raises:
        ConfigurationError: no Gemini key was configured at startup
    """
    chat_service: Optional[CounsellorChatService] = getattr(
        request.app.state, "chat_service", None
    )
    if chat_service is None:
        raise ConfigurationError(
            "AI counsellor is not configured",
            missing_keys=["GOOGLE_API_KEY"],
        )
    return chat_service


# Type aliases for route signatures
UniversityRepoDep = Annotated[UniversityRepository, Depends(get_university_repository)]
RecommendationServiceDep = Annotated[RecommendationService, Depends(get_recommendation_service)]
ChatServiceDep = Annotated[CounsellorChatService, Depends(get_chat_service)]
