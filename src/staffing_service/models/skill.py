"""Skill and skill requirement models."""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


def as_utc(value: datetime) -> datetime:
    """Convert to an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Skill(BaseModel):
    """A named skill held by an employee."""

    id: str
    name: str = Field(..., min_length=1, max_length=100)
    category: Literal["hard", "soft"]
    proficiency: int = Field(..., ge=1, le=5)
    validated_by: list[str] = Field(default_factory=list)  # Employee IDs
    last_validated: datetime
    derived_from: Optional[str] = None  # e.g. "project: CRM Migration"

    class Config:
        from_attributes = True

    @field_validator("last_validated")
    @classmethod
    def _last_validated_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class SkillRequirement(BaseModel):
    """A skill a task asks for, referenced by name."""

    skill_id: Optional[str] = None
    skill_name: str = Field(..., min_length=1, max_length=100)
    minimum_proficiency: int = Field(..., ge=1, le=5)
    importance: int = Field(1, ge=1, le=5)  # How critical the skill is


class SkillMatchDetail(BaseModel):
    """Per-requirement breakdown of a skill match."""

    skill_name: str
    required: int
    actual: int = 0
    gap: int
    match: int = Field(..., ge=0, le=100)
