"""Task model and its nested requirement blocks."""

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .skill import SkillRequirement


class ComplexityFactors(BaseModel):
    """Named factors behind a task's complexity."""

    technical_difficulty: int = Field(3, ge=1, le=5)
    stakeholder_management: int = Field(3, ge=1, le=5)
    decision_making: int = Field(3, ge=1, le=5)
    problem_solving: int = Field(3, ge=1, le=5)
    cross_functional_coordination: int = Field(3, ge=1, le=5)


class VariabilityFactors(BaseModel):
    """Named factors behind a task's variability."""

    requirements_stability: int = Field(3, ge=1, le=5)
    process_definition: int = Field(3, ge=1, le=5)
    external_dependencies: int = Field(3, ge=1, le=5)
    timeline_predictability: int = Field(3, ge=1, le=5)


class Complexity(BaseModel):
    """Overall complexity (1-5, clamped for tier lookup) plus factors."""

    overall: float = Field(..., ge=0)
    factors: ComplexityFactors = Field(default_factory=ComplexityFactors)


class Variability(BaseModel):
    """Overall variability (1-5, clamped for tier lookup) plus factors."""

    overall: float = Field(..., ge=0)
    factors: VariabilityFactors = Field(default_factory=VariabilityFactors)


class ProjectContext(BaseModel):
    """Project the task belongs to."""

    project_phase: Literal["inception", "development", "mature", "maintenance"] = "inception"
    project_type: Literal["prototype", "product", "service", "internal", "research"] = "prototype"
    project_goals: list[str] = Field(default_factory=list)
    target_delivery_date: Optional[date] = None


class BusinessUnitRelevance(BaseModel):
    """How relevant a business unit is to the work."""

    business_unit_id: str
    business_unit_name: str
    relevance_level: int = Field(..., ge=1, le=5)
    knowledge_required: bool = False


class Task(BaseModel):
    """A unit of work employees are matched against."""

    id: str
    description: str
    purpose: str = ""
    outcomes: list[str] = Field(default_factory=list)

    required_hard_skills: list[SkillRequirement] = Field(default_factory=list)
    required_soft_skills: list[SkillRequirement] = Field(default_factory=list)

    complexity: Complexity
    variability: Variability

    estimated_duration: Optional[int] = Field(None, ge=0)  # Days
    estimated_effort: Optional[int] = Field(None, ge=0)  # Person-days
    capacity_required: int = Field(0, ge=0, le=100)  # Percent of full-time

    dependencies: list[str] = Field(default_factory=list)  # Task IDs
    location_requirements: list[str] = Field(default_factory=list)
    license_requirements: list[str] = Field(default_factory=list)  # License IDs

    business_context: str = ""
    project_context: Optional[ProjectContext] = None
    business_unit_relevance: list[BusinessUnitRelevance] = Field(default_factory=list)

    class Config:
        from_attributes = True
