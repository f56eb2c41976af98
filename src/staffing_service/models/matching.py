"""Match result models."""

from pydantic import BaseModel, Field

from .employee import Employee
from .skill import SkillMatchDetail
from .task import Task


class MatchResult(BaseModel):
    """Fit between one employee and one task."""

    employee_id: str
    task_id: str
    overall: int = Field(..., ge=0, le=100)
    hard_skills_score: int = Field(..., ge=0, le=100)
    soft_skills_score: int = Field(..., ge=0, le=100)
    license_score: int = Field(..., ge=0, le=100)
    location_score: int = Field(..., ge=0, le=100)
    capacity_score: int = Field(..., ge=0, le=100)
    hard_skills_details: list[SkillMatchDetail] = Field(default_factory=list)
    soft_skills_details: list[SkillMatchDetail] = Field(default_factory=list)


class EmployeeMatch(BaseModel):
    """An employee ranked against a task."""

    employee: Employee
    match_score: int
    match_details: MatchResult


class TaskMatch(BaseModel):
    """A task ranked against an employee."""

    task: Task
    match_score: int
    match_details: MatchResult
