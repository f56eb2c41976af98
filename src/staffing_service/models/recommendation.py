"""Free-text recommendation request and response models."""

from typing import Optional

from pydantic import BaseModel, Field

from .employee import Employee
from .task import ProjectContext, Task
from .team import TeamRecommendation


class ChatRequest(BaseModel):
    """Natural-language request from a manager or HR representative."""

    message: str = Field(..., min_length=1)


class ExtractedRequirements(BaseModel):
    """Structured requirements pulled out of a free-text request."""

    task_description: Optional[str] = None
    task_purpose: Optional[str] = None
    required_hard_skills: list[str] = Field(default_factory=list)
    required_soft_skills: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    project_context: Optional[ProjectContext] = None
    business_units: list[str] = Field(default_factory=list)
    knowledge_required: bool = False
    roles: list[str] = Field(default_factory=list)


class RecommendationResult(BaseModel):
    """Matches, tasks and narratives for a free-text request."""

    matching_employees: list[Employee] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    reasoning: str
    project_context: Optional[ProjectContext] = None
    team_recommendation: Optional[TeamRecommendation] = None
