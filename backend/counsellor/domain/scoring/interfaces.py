"""
Scoring Interfaces for the Study-Abroad Counsellor

Defines the value objects shared by the fit and profile-strength rubrics.
All of them are transient: built from externally-owned profile and
university records, used to produce a score, then discarded.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from counsellor.domain.scoring.parsing import parse_optional_number


class AdmissionCategory(str, Enum):
    """Risk tier of a university for a given student."""
    DREAM = "Dream"
    TARGET = "Target"
    SAFE = "Safe"


class SopStatus(str, Enum):
    """Statement-of-purpose progress as stored on the profile."""
    NOT_STARTED = "Not started"
    DRAFT = "Draft"
    READY = "Ready"
    COMPLETED = "Completed"

    @classmethod
    def normalize(cls, value: Any) -> Optional["SopStatus"]:
        """Case-insensitive lookup; unknown or blank values give None."""
        if isinstance(value, SopStatus):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("_", " ")
        if key == "notstarted":
            key = "not started"
        for status in cls:
            if status.value.lower() == key:
                return status
        return None


def read_field(record: Any, *names: str) -> Any:
    """Read the first available field from a mapping or an object."""
    for name in names:
        if isinstance(record, Mapping):
            if name in record:
                return record[name]
        elif hasattr(record, name):
            return getattr(record, name)
    return None


@dataclass(frozen=True)
class StudentProfile:
    """
    Scoring-relevant subset of a student profile.

    Numeric fields are already parsed; None means "not provided".
    """
    gpa: Optional[float] = None  # 0.0-4.0
    ielts: Optional[float] = None  # 0.0-9.0
    toefl: Optional[float] = None  # 0-120
    gre: Optional[float] = None  # 260-340
    gmat: Optional[float] = None  # 200-800
    budget: Optional[float] = None  # annual, currency-agnostic
    sop_status: Optional[str] = None

    @classmethod
    def from_record(cls, record: Any) -> "StudentProfile":
        """
        Build a profile from a raw record (dict, Pydantic model, ORM row).

        Accepts camelCase or snake_case keys for the SOP status.
        """
        if isinstance(record, StudentProfile):
            return record

        sop_status = read_field(record, "sop_status", "sopStatus")
        if isinstance(sop_status, Enum):
            sop_status = sop_status.value
        if not isinstance(sop_status, str):
            sop_status = None

        return cls(
            gpa=parse_optional_number(read_field(record, "gpa")),
            ielts=parse_optional_number(read_field(record, "ielts")),
            toefl=parse_optional_number(read_field(record, "toefl")),
            gre=parse_optional_number(read_field(record, "gre")),
            gmat=parse_optional_number(read_field(record, "gmat")),
            budget=parse_optional_number(read_field(record, "budget")),
            sop_status=sop_status,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Supplied fields only."""
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class UniversityRequirements:
    """Admission requirements of a university; None skips the component."""
    gpa: Optional[float] = None
    ielts: Optional[float] = None
    toefl: Optional[float] = None
    gre: Optional[float] = None
    gmat: Optional[float] = None

    @classmethod
    def from_record(cls, record: Any) -> "UniversityRequirements":
        if isinstance(record, UniversityRequirements):
            return record
        return cls(
            gpa=parse_optional_number(read_field(record, "gpa")),
            ielts=parse_optional_number(read_field(record, "ielts")),
            toefl=parse_optional_number(read_field(record, "toefl")),
            gre=parse_optional_number(read_field(record, "gre")),
            gmat=parse_optional_number(read_field(record, "gmat")),
        )


@dataclass(frozen=True)
class FitSubject:
    """One (profile, university) comparison handed to the fit components."""
    profile: StudentProfile
    requirements: UniversityRequirements
    cost: Optional[float] = None


@dataclass(frozen=True)
class ComponentScore:
    """Points earned by one active rubric component."""
    name: str
    earned: int
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "earned": self.earned, "max": self.weight}


@dataclass(frozen=True)
class FitAssessment:
    """
    Fit score, category and the components that produced them.

    Returned to the presentation layer for transparency.
    """
    fit_score: int
    category: AdmissionCategory
    components: List[ComponentScore] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain fields for API responses and LLM context."""
        return {
            "fit_score": self.fit_score,
            "category": self.category.value,
            "components": [c.to_dict() for c in self.components],
        }


@dataclass(frozen=True)
class ProfileStrength:
    """Overall profile strength plus a label per area."""
    overall: int
    academics: str
    exams: str
    sop: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overall": self.overall,
            "academics": self.academics,
            "exams": self.exams,
            "sop": self.sop,
        }
