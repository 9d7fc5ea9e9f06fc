"""
Records passed between the catalog loader, the matcher and the UI.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Tuple


class PredictionKind(Enum):
    """Whether a prediction came from a real match or the no-match fallback."""
    MATCH = "match"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class JobPosting:
    """One catalog entry."""
    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    salary_range: str = ""
    required_skills: Tuple[str, ...] = ()
    experience_level: str = ""
    description: str = ""

    @property
    def skill_set(self) -> FrozenSet[str]:
        return frozenset(self.required_skills)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "salary_range": self.salary_range,
            "required_skills": list(self.required_skills),
            "experience_level": self.experience_level,
            "description": self.description,
        }


@dataclass(frozen=True)
class CandidateProfile:
    """
    Snapshot of a candidate. Only ``skills`` is read by the matcher; the rest
    is carried for display.
    """
    skills: Tuple[str, ...] = ()
    name: str = ""
    tenth_marks: str = ""
    twelfth_marks: str = ""
    cgpa: str = ""
    branch: str = ""
    projects: Tuple[Dict[str, str], ...] = ()
    certifications: Tuple[str, ...] = ()
    achievements: Tuple[str, ...] = ()
    internships: Tuple[Dict[str, str], ...] = ()

    def with_skill(self, skill: str) -> "CandidateProfile":
        return replace(self, skills=self.skills + (skill,))

    def without_skill(self, index: int) -> "CandidateProfile":
        return replace(self, skills=self.skills[:index] + self.skills[index + 1:])

    def with_skills(self, skills: List[str]) -> "CandidateProfile":
        return replace(self, skills=tuple(skills))


@dataclass(frozen=True)
class MatchResult:
    """Score of one posting against one candidate."""
    job: JobPosting
    match_percentage: float
    qualifies: bool
    missing_skills: Tuple[str, ...] = ()
    matched_count: int = 0


@dataclass(frozen=True)
class PredictionSummary:
    """Coarse placement outlook derived from the best qualifying match."""
    predicted_role: str
    predicted_salary_range: str
    predicted_companies: Tuple[str, ...] = field(default_factory=tuple)
    confidence: float = 0.0
    kind: PredictionKind = PredictionKind.MATCH

    @property
    def is_fallback(self) -> bool:
        return self.kind is PredictionKind.FALLBACK
