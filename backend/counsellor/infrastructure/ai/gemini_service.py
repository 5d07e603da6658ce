"""
Gemini Counsellor Chat Service

Wraps the google.genai SDK for the chat assistant:
- Prompt with the student's profile strength and top-ranked universities
- Best-effort JSON extraction from the model's free text
- Free-text assessment of a profile on its own

The genai client is created once at application startup and passed in;
this module keeps no client state of its own.
"""

import asyncio
import json
import logging
import re
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from counsellor.domain.models import ChatReply, ChatSuggestion
from counsellor.domain.scoring import StudentProfile
from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.exceptions import (
    AIServiceError,
    ConfigurationError,
    RateLimitError,
)


logger = logging.getLogger(__name__)


SYSTEM_PROMPT = """You are an expert AI Counsellor specializing in international study-abroad admissions.
Guide the student from profile building to university selection and application.

Rules:
1. Answer in 1 or 2 sentences.
2. Friendly, expert tone. Plain text only, no markdown.
3. End with exactly 3 relevant suggestions.

Respond with valid JSON only:
{
  "message": "your answer",
  "suggestions": [
    {"text": "button label", "type": "chat|navigate", "payload": "value"}
  ]
}

Suggestion types:
- "chat": payload is a message the student will send to you.
- "navigate": payload is a route: "/universities", "/universities/{university_id}" or "/dashboard"."""

ANALYSIS_PROMPT = """You are an expert AI Counsellor specializing in international study-abroad admissions.
Analyze this student profile and give a brief 3-bullet assessment.
Cover academics, test scores and what to improve next. Plain text only, no markdown headings."""

DEFAULT_SUGGESTIONS = [
    ChatSuggestion(text="View Recommendations", type="navigate", payload="/universities"),
    ChatSuggestion(text="Check my dashboard", type="navigate", payload="/dashboard"),
]

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


def create_genai_client(api_key: Optional[str]) -> genai.Client:
    """
    Build the Gemini client.

    Raises:
        ConfigurationError: no API key configured
    """
    if not api_key:
        raise ConfigurationError(
            "Missing GOOGLE_API_KEY environment variable",
            missing_keys=["GOOGLE_API_KEY"]
        )
    return genai.Client(api_key=api_key)


def extract_json_object(text: str) -> Optional[Dict[str, Any]]:
    """
    Pull a JSON object out of model output.

    Handles markdown code fences and leading/trailing prose. Returns None
    when nothing parses to a JSON object.
    """
    cleaned = text.strip()

    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    cleaned = cleaned.strip()

    candidates = [cleaned]
    match = _JSON_OBJECT.search(cleaned)
    if match and match.group(0) != cleaned:
        candidates.append(match.group(0))

    for candidate in candidates:
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            return parsed
    return None


def parse_chat_reply(text: str) -> ChatReply:
    """Turn raw model text into a ChatReply, falling back to plain text."""
    parsed = extract_json_object(text)

    if parsed is None or not isinstance(parsed.get("message"), str):
        logger.warning("Counsellor reply was not valid JSON, returning as raw text")
        return ChatReply(message=text.strip(), suggestions=list(DEFAULT_SUGGESTIONS))

    suggestions: List[ChatSuggestion] = []
    for item in parsed.get("suggestions") or []:
        try:
            suggestions.append(ChatSuggestion.model_validate(item))
        except PydanticValidationError:
            logger.debug(f"Dropping malformed suggestion: {item!r}")

    return ChatReply(message=parsed["message"], suggestions=suggestions)


class CounsellorChatService:
    """
    Chat assistant backed by Gemini.

    Uses the recommendation service for context so the assistant sees the
    same fit scores and categories as the rest of the application.
    """

    DEFAULT_MODEL = "gemini-2.0-flash"
    TEMPERATURE = 0.7
    MAX_OUTPUT_TOKENS = 1024

    def __init__(
        self,
        client: genai.Client,
        recommendations: RecommendationService,
        model: Optional[str] = None,
        context_universities: int = 5,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ):
        self._client = client
        self._recommendations = recommendations
        self.model = model or self.DEFAULT_MODEL
        self._context_universities = context_universities
        self._temperature = self.TEMPERATURE if temperature is None else temperature
        self._max_output_tokens = max_output_tokens or self.MAX_OUTPUT_TOKENS

    def build_prompt(
        self,
        message: str,
        profile: Any = None,
        stage: Optional[str] = None,
    ) -> str:
        """Assemble system prompt, student context and the user message."""
        context = self._recommendations.advisor_context(
            profile, top_n=self._context_universities
        )
        context_parts = [
            "## Student Context",
            f"- Current Stage: {stage or 'Building Profile'}",
            f"- Profile Strength: {json.dumps(context['profile_strength']) if context['profile_strength'] else 'Not completed'}",
            f"- Best-fit Universities: {json.dumps(context['top_universities'])}",
        ]
        return f"{SYSTEM_PROMPT}\n\n" + "\n".join(context_parts) + f"\n\n## User Message\n{message}"

    def build_analysis_prompt(self, profile: Any) -> str:
        """Prompt for a short written assessment of the profile on its own."""
        student = StudentProfile.from_record(profile)
        strength = self._recommendations.profile_strength(student)
        return (
            f"{ANALYSIS_PROMPT}\n\n"
            f"## Student Profile\n{json.dumps(student.to_dict())}\n\n"
            f"## Profile Strength\n{json.dumps(strength.to_dict())}"
        )

    async def reply(
        self,
        message: str,
        profile: Any = None,
        stage: Optional[str] = None,
    ) -> ChatReply:
        """
        Answer a student message.

        Raises:
            RateLimitError: Gemini quota or rate limit hit
            AIServiceError: any other Gemini failure, or an empty answer
        """
        prompt = self.build_prompt(message, profile, stage)
        text = await self._generate(prompt, operation="chat")
        return parse_chat_reply(text)

    async def analyze_profile(self, profile: Any) -> str:
        """
        Short bullet-point assessment of a student profile.

        Raises:
            RateLimitError: Gemini quota or rate limit hit
            AIServiceError: any other Gemini failure, or an empty answer
        """
        prompt = self.build_analysis_prompt(profile)
        text = await self._generate(prompt, operation="analyze_profile")
        return text.strip()

    async def _generate(self, prompt: str, operation: str) -> str:
        try:
            response = await asyncio.to_thread(
                lambda: self._client.models.generate_content(
                    model=self.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=self._temperature,
                        max_output_tokens=self._max_output_tokens,
                    )
                )
            )
        except Exception as e:
            error_msg = str(e).lower()

            if "rate" in error_msg or "quota" in error_msg or "429" in error_msg:
                raise RateLimitError(
                    "Gemini API rate limit exceeded",
                    original_error=e
                )

            raise AIServiceError(
                f"Gemini request failed: {str(e)}",
                model=self.model,
                operation=operation,
                original_error=e
            )

        if not response.text:
            raise AIServiceError(
                "Empty response from Gemini",
                model=self.model,
                operation=operation
            )

        return response.text
