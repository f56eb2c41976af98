"""Task fit aggregator.

Combines skill, license, location and capacity scores into a single
weighted fit score per (employee, task) pair and ranks in both directions.
Searching employees for a task falls back to the top 3 when nobody clears
the threshold; searching tasks for an employee has no fallback.
"""

from ..database import DataContext
from ..models.employee import Employee
from ..models.matching import EmployeeMatch, MatchResult, TaskMatch
from ..models.task import Task
from .constraints import (
    calculate_capacity_match,
    calculate_license_match,
    calculate_location_match,
)
from .skill_match import (
    DEFAULT_MATCHER,
    SkillMatcher,
    calculate_skills_match,
    round_score,
    skill_match_details,
)

WEIGHTS = {
    "hard_skills": 0.4,
    "soft_skills": 0.3,
    "licenses": 0.1,
    "location": 0.1,
    "capacity": 0.1,
}

EMPLOYEE_THRESHOLD = 50
TASK_THRESHOLD = 70
FALLBACK_SIZE = 3


def weighted_overall(hard: int, soft: int, licenses: int, location: int, capacity: int) -> int:
    """Weighted sum of the five sub-scores, rounded."""
    return round_score(
        hard * WEIGHTS["hard_skills"]
        + soft * WEIGHTS["soft_skills"]
        + licenses * WEIGHTS["licenses"]
        + location * WEIGHTS["location"]
        + capacity * WEIGHTS["capacity"]
    )


class TaskFitAggregator:
    """Scores employees against tasks held in a data context."""

    def __init__(self, context: DataContext, matcher: SkillMatcher = DEFAULT_MATCHER):
        self.context = context
        self.matcher = matcher

    def score(self, employee: Employee, task: Task) -> MatchResult:
        """Calculate how well an employee fits a task."""
        hard = calculate_skills_match(employee.hard_skills, task.required_hard_skills, self.matcher)
        soft = calculate_skills_match(employee.soft_skills, task.required_soft_skills, self.matcher)
        licenses = calculate_license_match(employee.licenses, task.license_requirements)
        location = calculate_location_match(employee.location, task.location_requirements)
        capacity = calculate_capacity_match(employee.capacity, task.capacity_required)

        return MatchResult(
            employee_id=employee.id,
            task_id=task.id,
            overall=weighted_overall(hard, soft, licenses, location, capacity),
            hard_skills_score=hard,
            soft_skills_score=soft,
            license_score=licenses,
            location_score=location,
            capacity_score=capacity,
            hard_skills_details=skill_match_details(
                employee.hard_skills, task.required_hard_skills, self.matcher
            ),
            soft_skills_details=skill_match_details(
                employee.soft_skills, task.required_soft_skills, self.matcher
            ),
        )

    def employees_for_task(self, task_id: str, threshold: int = EMPLOYEE_THRESHOLD) -> list[EmployeeMatch]:
        """Rank employees for a task, never empty while employees exist."""
        task = self.context.get_task(task_id)

        ranked = []
        for employee in self.context.employees:
            result = self.score(employee, task)
            ranked.append(EmployeeMatch(employee=employee, match_score=result.overall, match_details=result))
        ranked.sort(key=lambda m: m.match_score, reverse=True)

        matches = [m for m in ranked if m.match_score >= threshold]
        if not matches:
            return ranked[:FALLBACK_SIZE]
        return matches

    def tasks_for_employee(self, employee_id: str, threshold: int = TASK_THRESHOLD) -> list[TaskMatch]:
        """Rank tasks for an employee; may be empty."""
        employee = self.context.get_employee(employee_id)

        matches = []
        for task in self.context.tasks:
            result = self.score(employee, task)
            if result.overall >= threshold:
                matches.append(TaskMatch(task=task, match_score=result.overall, match_details=result))
        matches.sort(key=lambda m: m.match_score, reverse=True)
        return matches
