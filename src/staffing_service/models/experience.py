"""Past experience model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Experience(BaseModel):
    """A project or role an employee held in the past."""

    id: str
    employee_id: str
    project_name: str
    role: str
    start: Optional[date] = None
    end: Optional[date] = None  # None = ongoing
    skills_utilized: list[str] = Field(default_factory=list)  # Skill IDs
    outcomes: list[str] = Field(default_factory=list)
    department: Optional[str] = None
    team_size: Optional[int] = Field(None, ge=1)
    description: str = ""

    class Config:
        from_attributes = True
