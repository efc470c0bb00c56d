from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, FrozenSet, List, Optional


class EducationLevel(str, Enum):
    TENTH = "10th"
    PUC = "PUC"
    DEGREE = "Degree"
    OTHER = "Other"


# quiz display labels -> level
_LEVEL_ALIASES = {
    "10th": EducationLevel.TENTH,
    "tenth": EducationLevel.TENTH,
    "puc": EducationLevel.PUC,
    "puc / 11-12": EducationLevel.PUC,
    "11-12": EducationLevel.PUC,
    "degree": EducationLevel.DEGREE,
    "other": EducationLevel.OTHER,
    "others": EducationLevel.OTHER,
}


def parse_level(value) -> EducationLevel:
    if isinstance(value, EducationLevel):
        return value
    return _LEVEL_ALIASES.get(str(value or "").strip().lower(), EducationLevel.OTHER)


class QuizAnswer(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: EducationLevel = EducationLevel.OTHER
    marks: str = ""  # "Above 90%" | "80% - 90%" | "70% - 80%" | "Below 70%"
    subjects: FrozenSet[str] = frozenset()
    interests: FrozenSet[str] = frozenset()
    hobbies: FrozenSet[str] = frozenset()

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, v):
        return parse_level(v)

    def tags(self) -> List[str]:
        """Every selected tag, subjects first, each group sorted."""
        return sorted(self.subjects) + sorted(self.interests) + sorted(self.hobbies)


class Skill(BaseModel):
    name: str
    links: List[str] = []


class SkillGapResult(BaseModel):
    skills_user_has: List[str]
    skills_to_learn: List[str]
    total_required: int
    already_have: int
    need_to_learn: int


class EducationRoadmap(BaseModel):
    stream: str
    ug_path: str
    pg_options: List[str]
    ideal_job_roles: List[str]
    timeline: Dict[str, str]  # keys: 10th, 12th, UG, PG, Job


class StartupRoadmap(BaseModel):
    idea: str
    why_suitable: str
    required_skills: List[str]
    roadmap: Dict[str, str]  # keys: Month 1-2, Month 3-4, Month 5-6
    monetization: str


class CareerSuggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    why: str
    path: str
    skills: List[str]
    skill_links: Dict[str, str] = {}
    roadmap: Optional[EducationRoadmap] = None
    skill_gap: Optional[SkillGapResult] = None


class QuizReport(BaseModel):
    suggestions: List[CareerSuggestion]
    missing_skills: List[str]
    startup_idea: StartupRoadmap


class StagedRoadmap(BaseModel):
    short_term: List[str]
    mid_term: List[str]
    long_term: List[str]


class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    platform: str
    link: str
    note: Optional[str] = None


class ResumeReport(BaseModel):
    career_title: str
    fit_reason: str
    required_skills: List[str]
    detected_skills: List[str]
    missing_skills: List[str]
    roadmap: StagedRoadmap
    course_recommendations: List[Course] = Field(default_factory=list)


class TextPayload(BaseModel):
    text: str = ""


class StartupRequest(BaseModel):
    interests: List[str] = []
    hobbies: List[str] = []
