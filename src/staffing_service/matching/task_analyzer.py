"""Task complexity/variability classification and rule-based recommendations."""

import math
from typing import Callable, NamedTuple

from ..database import DataContext
from ..models.analysis import (
    ResourceRequirements,
    SkillRequirementSummary,
    TaskAnalysis,
    TaskRecommendations,
)
from ..models.task import Task

COMPLEXITY_LEVELS = ["Very Low", "Low", "Moderate", "High", "Very High"]
VARIABILITY_LEVELS = [
    "Very Predictable",
    "Predictable",
    "Moderate Variability",
    "Variable",
    "Highly Variable",
]


class Rule(NamedTuple):
    predicate: Callable[[Task], bool]
    recommendation: Callable[[Task], str]


def _fixed(text: str) -> Callable[[Task], str]:
    return lambda task: text


def _high_proficiency_skills(task: Task) -> list[str]:
    return [
        s.skill_name
        for s in [*task.required_hard_skills, *task.required_soft_skills]
        if s.minimum_proficiency >= 4
    ]


# First matching rule wins; the combined branch is listed first.
TEAM_STRUCTURE_RULES = [
    Rule(
        lambda t: t.complexity.overall >= 4 and t.variability.overall >= 4,
        _fixed(
            "Adaptive team with diverse skills and senior leadership. "
            "Consider cross-functional composition with regular coordination."
        ),
    ),
    Rule(
        lambda t: t.complexity.overall >= 4,
        _fixed(
            "Specialized team with deep technical expertise. "
            "Consider including subject matter experts."
        ),
    ),
    Rule(
        lambda t: t.variability.overall >= 4,
        _fixed(
            "Flexible team with strong problem-solving skills. "
            "Consider agile methodology with frequent checkpoints."
        ),
    ),
]

DEFAULT_TEAM_STRUCTURE = (
    "Standard team structure with clear roles and responsibilities. "
    "Consider established processes and workflows."
)

# Every matching rule contributes, in table order.
SKILL_DEVELOPMENT_RULES = [
    Rule(
        lambda t: bool(_high_proficiency_skills(t)),
        lambda t: f"Consider skill development programs for {', '.join(_high_proficiency_skills(t))}",
    ),
    Rule(
        lambda t: t.complexity.factors.technical_difficulty >= 4,
        _fixed("Technical training programs may be beneficial for team members"),
    ),
    Rule(
        lambda t: t.complexity.factors.stakeholder_management >= 4,
        _fixed("Stakeholder management and communication training recommended"),
    ),
]

RISK_MITIGATION_RULES = [
    Rule(
        lambda t: t.variability.factors.requirements_stability <= 2,
        _fixed("Establish clear requirements documentation and change management process"),
    ),
    Rule(
        lambda t: t.variability.factors.external_dependencies >= 4,
        _fixed("Create contingency plans for external dependencies and establish regular coordination"),
    ),
    Rule(
        lambda t: t.complexity.factors.technical_difficulty >= 4,
        _fixed("Consider technical proof of concept or prototype before full implementation"),
    ),
]


def tier_index(value: float) -> int:
    """Map a 1-5 value onto a 0-4 tier index, clamping out-of-range input."""
    return min(max(math.floor(value) - 1, 0), 4)


def complexity_level(value: float) -> str:
    return COMPLEXITY_LEVELS[tier_index(value)]


def variability_level(value: float) -> str:
    return VARIABILITY_LEVELS[tier_index(value)]


def first_match(rules: list[Rule], task: Task, default: str) -> str:
    for rule in rules:
        if rule.predicate(task):
            return rule.recommendation(task)
    return default


def all_matches(rules: list[Rule], task: Task) -> list[str]:
    return [rule.recommendation(task) for rule in rules if rule.predicate(task)]


def recommend(task: Task) -> TaskRecommendations:
    """Generate team structure, skill development and risk recommendations."""
    return TaskRecommendations(
        team_structure=first_match(TEAM_STRUCTURE_RULES, task, DEFAULT_TEAM_STRUCTURE),
        skill_development=all_matches(SKILL_DEVELOPMENT_RULES, task),
        risk_mitigation=all_matches(RISK_MITIGATION_RULES, task),
    )


def analyze(task: Task) -> TaskAnalysis:
    """Build the full analysis report for a task."""
    return TaskAnalysis(
        task_id=task.id,
        description=task.description,
        purpose=task.purpose,
        outcomes=task.outcomes,
        complexity=task.complexity,
        complexity_level=complexity_level(task.complexity.overall),
        variability=task.variability,
        variability_level=variability_level(task.variability.overall),
        skill_requirements=SkillRequirementSummary(
            hard_skills=task.required_hard_skills,
            soft_skills=task.required_soft_skills,
            total_skills_required=len(task.required_hard_skills) + len(task.required_soft_skills),
        ),
        resource_requirements=ResourceRequirements(
            estimated_duration=task.estimated_duration,
            estimated_effort=task.estimated_effort,
            capacity_required=task.capacity_required,
            location_requirements=task.location_requirements,
            license_requirements=task.license_requirements,
        ),
        dependencies=task.dependencies,
        recommendations=recommend(task),
    )


class TaskAnalyzer:
    """Analyzes tasks held in a data context."""

    def __init__(self, context: DataContext):
        self.context = context

    def analyze_task(self, task_id: str) -> TaskAnalysis:
        """Analyze task complexity and variability by task ID."""
        return analyze(self.context.get_task(task_id))
