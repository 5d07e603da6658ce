"""
Domain Models for the Study-Abroad Counsellor

Pydantic records exchanged with the catalog and the HTTP boundary.
The scoring engine reads them through StudentProfile.from_record and
UniversityRequirements.from_record, so it never depends on these types.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from counsellor.domain.scoring import AdmissionCategory, SopStatus


class University(BaseModel):
    """University read model from the catalog."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    country: str
    city: str
    description: Optional[str] = None
    website: Optional[str] = None
    ranking: Optional[int] = None
    cost: float = Field(..., ge=0, description="Annual cost, currency-agnostic")
    requirements: Dict[str, Any] = Field(default_factory=dict)
    acceptance_rate: Optional[float] = Field(None, alias="acceptanceRate")
    is_public: bool = Field(True, alias="isPublic")
    is_featured: bool = Field(False, alias="isFeatured")


class StudentProfileInput(BaseModel):
    """
    Scoring-relevant profile fields as submitted by a client.

    Every field is optional; missing exams simply switch off the matching
    rubric component.
    """
    model_config = ConfigDict(populate_by_name=True)

    gpa: Optional[float] = Field(None, ge=0.0, le=4.0, description="GPA on 4.0 scale")
    ielts: Optional[float] = Field(None, ge=0.0, le=9.0)
    toefl: Optional[int] = Field(None, ge=0, le=120)
    gre: Optional[int] = Field(None, ge=260, le=340)
    gmat: Optional[int] = Field(None, ge=200, le=800)
    budget: Optional[float] = Field(None, ge=0, description="Annual budget")
    sop_status: Optional[str] = Field(None, alias="sopStatus", max_length=50)

    @field_validator("sop_status")
    @classmethod
    def validate_sop_status(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if SopStatus.normalize(v) is None:
            allowed = ", ".join(s.value for s in SopStatus)
            raise ValueError(f"sop_status must be one of: {allowed}")
        return v.strip()


class ScoredUniversity(BaseModel):
    """University with its fit score and category for one student."""
    university: University
    fit_score: int = Field(..., ge=0, le=100)
    category: AdmissionCategory

    def to_summary(self) -> Dict[str, Any]:
        """Plain-field summary for list views and LLM context."""
        return {
            "id": self.university.id,
            "name": self.university.name,
            "country": self.university.country,
            "fit_score": self.fit_score,
            "category": self.category.value,
        }


class ChatSuggestion(BaseModel):
    """Follow-up action offered under a counsellor reply."""
    text: str
    type: Literal["chat", "navigate"] = "chat"
    payload: str = ""


class ChatReply(BaseModel):
    """Counsellor reply parsed from the language model."""
    message: str
    suggestions: List[ChatSuggestion] = Field(default_factory=list)
