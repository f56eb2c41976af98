"""Skill assessment models."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .skill import as_utc

AssessmentType = Literal["self", "manager", "peer"]


class SkillRating(BaseModel):
    """Rating change for a single skill inside an assessment."""

    skill_id: str
    previous_rating: int = Field(..., ge=1, le=5)
    new_rating: int = Field(..., ge=1, le=5)
    comments: str = ""

    class Config:
        frozen = True


class Assessment(BaseModel):
    """Immutable record of a quarterly skill validation."""

    id: str
    date: datetime
    type: AssessmentType
    assessor_id: str
    employee_id: str
    quarter: int = Field(..., ge=1, le=4)
    year: int
    skills_assessed: tuple[SkillRating, ...] = ()
    overall_comments: Optional[str] = None
    development_suggestions: tuple[str, ...] = ()

    class Config:
        frozen = True

    @field_validator("date")
    @classmethod
    def _date_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    def rating_for(self, skill_id: str) -> Optional[SkillRating]:
        """Get the rating entry for a skill, if assessed."""
        for rating in self.skills_assessed:
            if rating.skill_id == skill_id:
                return rating
        return None


class AssessmentCreate(BaseModel):
    """Schema for recording a new assessment."""

    assessor_id: str = Field(..., min_length=1)
    new_rating: int = Field(..., ge=1, le=5)
    comment: str = ""
