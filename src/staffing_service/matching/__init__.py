"""Matching and scoring engine."""

from .skill_match import (
    ExactSkillMatcher,
    SkillMatcher,
    SubstringSkillMatcher,
    calculate_skills_match,
    skill_match_details,
)
from .constraints import (
    calculate_capacity_match,
    calculate_license_match,
    calculate_location_match,
)
from .aggregator import TaskFitAggregator, weighted_overall
from .task_analyzer import TaskAnalyzer, analyze, complexity_level, variability_level
from .team_assembler import assemble_team, default_roles_for, team_formation_attributes
from .validation_ledger import SkillValidationLedger

__all__ = [
    "ExactSkillMatcher",
    "SkillMatcher",
    "SubstringSkillMatcher",
    "calculate_skills_match",
    "skill_match_details",
    "calculate_capacity_match",
    "calculate_license_match",
    "calculate_location_match",
    "TaskFitAggregator",
    "weighted_overall",
    "TaskAnalyzer",
    "analyze",
    "complexity_level",
    "variability_level",
    "assemble_team",
    "default_roles_for",
    "team_formation_attributes",
    "SkillValidationLedger",
]
