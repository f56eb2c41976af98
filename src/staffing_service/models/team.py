"""Team assembly models."""

from pydantic import BaseModel, Field

from .employee import Employee
from .task import BusinessUnitRelevance


class TeamAssembly(BaseModel):
    """Outcome of assigning candidates to roles."""

    assignments: dict[str, str] = Field(default_factory=dict)  # employee_id -> role
    team_members: list[Employee] = Field(default_factory=list)
    unfilled_roles: list[str] = Field(default_factory=list)


class TeamAssemblyRequest(BaseModel):
    """Schema for assembling a team from an explicit candidate pool."""

    candidate_ids: list[str] = Field(..., min_length=1)
    roles: list[str] = Field(default_factory=list)
    business_unit_relevance: list[BusinessUnitRelevance] = Field(default_factory=list)


class TeamRecommendation(TeamAssembly):
    """Team assembly plus generated narratives."""

    team_dynamics: str = ""
    business_unit_insights: str = ""
