"""Task analysis models."""

from typing import Optional

from pydantic import BaseModel, Field

from .skill import SkillRequirement
from .task import Complexity, Variability


class TaskRecommendations(BaseModel):
    """Rule-based staffing recommendations for a task."""

    team_structure: str
    skill_development: list[str] = Field(default_factory=list)
    risk_mitigation: list[str] = Field(default_factory=list)


class SkillRequirementSummary(BaseModel):
    hard_skills: list[SkillRequirement] = Field(default_factory=list)
    soft_skills: list[SkillRequirement] = Field(default_factory=list)
    total_skills_required: int = 0


class ResourceRequirements(BaseModel):
    estimated_duration: Optional[int] = None
    estimated_effort: Optional[int] = None
    capacity_required: int = 0
    location_requirements: list[str] = Field(default_factory=list)
    license_requirements: list[str] = Field(default_factory=list)


class TaskAnalysis(BaseModel):
    """Complexity and variability report for a task."""

    task_id: str
    description: str
    purpose: str = ""
    outcomes: list[str] = Field(default_factory=list)
    complexity: Complexity
    complexity_level: str
    variability: Variability
    variability_level: str
    skill_requirements: SkillRequirementSummary
    resource_requirements: ResourceRequirements
    dependencies: list[str] = Field(default_factory=list)
    recommendations: TaskRecommendations
