"""Pydantic models for staffing entities."""

from .skill import Skill, SkillRequirement, SkillMatchDetail
from .license import License
from .experience import Experience
from .employee import BusinessUnitKnowledge, Employee, EmployeeSummary
from .task import (
    BusinessUnitRelevance,
    Complexity,
    ComplexityFactors,
    ProjectContext,
    Task,
    Variability,
    VariabilityFactors,
)
from .assessment import Assessment, AssessmentCreate, SkillRating
from .matching import EmployeeMatch, MatchResult, TaskMatch
from .analysis import TaskAnalysis, TaskRecommendations
from .team import TeamAssembly, TeamAssemblyRequest, TeamRecommendation
from .recommendation import ChatRequest, ExtractedRequirements, RecommendationResult

__all__ = [
    "Skill",
    "SkillRequirement",
    "SkillMatchDetail",
    "License",
    "Experience",
    "BusinessUnitKnowledge",
    "Employee",
    "EmployeeSummary",
    "BusinessUnitRelevance",
    "Complexity",
    "ComplexityFactors",
    "ProjectContext",
    "Task",
    "Variability",
    "VariabilityFactors",
    "Assessment",
    "AssessmentCreate",
    "SkillRating",
    "EmployeeMatch",
    "MatchResult",
    "TaskMatch",
    "TaskAnalysis",
    "TaskRecommendations",
    "TeamAssembly",
    "TeamAssemblyRequest",
    "TeamRecommendation",
    "ChatRequest",
    "ExtractedRequirements",
    "RecommendationResult",
]
