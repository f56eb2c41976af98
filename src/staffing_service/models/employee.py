"""Employee model."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .experience import Experience
from .license import License
from .skill import Skill

ProjectPhase = Literal["inception", "development", "mature", "maintenance", "none"]


class BusinessUnitKnowledge(BaseModel):
    """What an employee knows about a business unit."""

    business_unit_id: str
    business_unit_name: str
    knowledge_level: int = Field(..., ge=1, le=5)
    years_of_experience: float = Field(0, ge=0)
    relevant_projects: list[str] = Field(default_factory=list)  # Project IDs


class EmployeeBase(BaseModel):
    """Base employee attributes."""

    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = None
    department: Optional[str] = None
    position: str = ""
    location: str
    capacity: int = Field(..., ge=0, le=100)  # Percent available


class Employee(EmployeeBase):
    """Complete employee profile used for matching."""

    id: str
    hard_skills: list[Skill] = Field(default_factory=list)
    soft_skills: list[Skill] = Field(default_factory=list)
    licenses: list[License] = Field(default_factory=list)
    past_experience: list[Experience] = Field(default_factory=list)
    career_aspirations: list[str] = Field(default_factory=list)
    interests: list[str] = Field(default_factory=list)
    development_goals: list[str] = Field(default_factory=list)
    current_project_phase: Optional[ProjectPhase] = None
    business_unit_knowledge: list[BusinessUnitKnowledge] = Field(default_factory=list)
    preferred_work_style: list[str] = Field(default_factory=list)
    availability_date: Optional[date] = None

    class Config:
        from_attributes = True

    def find_skill(self, skill_id: str) -> Optional[Skill]:
        """Find an owned skill (hard or soft) by ID."""
        for skill in [*self.hard_skills, *self.soft_skills]:
            if skill.id == skill_id:
                return skill
        return None


class EmployeeSummary(EmployeeBase):
    """Employee fields returned by listing endpoints."""

    id: str
    current_project_phase: Optional[ProjectPhase] = None
