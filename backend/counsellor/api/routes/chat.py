"""
Chat Routes

AI counsellor chat and profile analysis. Both answer 503 when no Gemini
key is configured.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from counsellor.api.dependencies import ChatServiceDep
from counsellor.domain.models import ChatReply, StudentProfileInput


logger = logging.getLogger(__name__)

router = APIRouter()


class ChatRequest(BaseModel):
    """Message for the counsellor, with optional profile context."""
    message: str = Field(..., min_length=1, max_length=2000)
    profile: Optional[StudentProfileInput] = None
    stage: Optional[str] = Field(None, max_length=100)


class ChatResponse(BaseModel):
    response: ChatReply
    timestamp: str


@router.post("/ai/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, service: ChatServiceDep):
    """Ask the counsellor a question."""
    reply = await service.reply(request.message, request.profile, request.stage)
    return ChatResponse(
        response=reply,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


class ProfileAnalysisResponse(BaseModel):
    analysis: str
    timestamp: str


@router.post("/ai/analyze-profile", response_model=ProfileAnalysisResponse)
async def analyze_profile(profile: StudentProfileInput, service: ChatServiceDep):
    """Short written assessment of the submitted profile."""
    analysis = await service.analyze_profile(profile)
    return ProfileAnalysisResponse(
        analysis=analysis,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
