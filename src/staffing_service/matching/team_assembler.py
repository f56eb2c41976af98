"""Greedy team assembly.

Each role, in order, takes the highest-scoring candidate not yet assigned.
There is no backtracking, so an early role can take a candidate who would
have suited a later role better. Short teams are backfilled with generic
"Team Member" seats up to ``min(3, len(pool))``.
"""

from typing import Optional, Sequence

from ..models.employee import Employee
from ..models.task import BusinessUnitRelevance
from ..models.team import TeamAssembly

BACKFILL_ROLE = "Team Member"
MIN_TEAM_SIZE = 3

POSITION_BONUS = 10
EXPERIENCE_BONUS = 5
ASPIRATION_BONUS = 3
CAPACITY_BONUS_FLOOR = 50

DEFAULT_ROLES = {
    "prototype": ["developer", "designer", "business analyst"],
    "product": ["product manager", "developer", "designer", "qa engineer"],
}
FALLBACK_ROLES = ["project manager", "developer", "business analyst"]


def default_roles_for(project_type: Optional[str]) -> list[str]:
    """Roles to staff when a request names none."""
    return list(DEFAULT_ROLES.get(project_type or "", FALLBACK_ROLES))


def role_score(
    employee: Employee,
    role: str,
    business_unit_relevance: Sequence[BusinessUnitRelevance] = (),
) -> float:
    """Heuristic fit of an employee for a role label."""
    role = role.lower()
    score = 0.0

    if role in employee.position.lower():
        score += POSITION_BONUS

    for experience in employee.past_experience:
        if role in experience.role.lower():
            score += EXPERIENCE_BONUS

    for aspiration in employee.career_aspirations:
        if role in aspiration.lower():
            score += ASPIRATION_BONUS

    for knowledge in employee.business_unit_knowledge:
        for relevance in business_unit_relevance:
            if knowledge.business_unit_name == relevance.business_unit_name:
                score += knowledge.knowledge_level * relevance.relevance_level

    if employee.capacity >= CAPACITY_BONUS_FLOOR:
        score += employee.capacity / 10

    return score


def assemble_team(
    pool: Sequence[Employee],
    roles: Sequence[str],
    business_unit_relevance: Optional[Sequence[BusinessUnitRelevance]] = None,
) -> TeamAssembly:
    """Assign the best-fit candidate from the pool to each role."""
    relevance = business_unit_relevance or []
    assignments: dict[str, str] = {}
    team_members: list[Employee] = []
    unfilled_roles: list[str] = []

    for role in roles:
        best_match = None
        best_score = 0.0

        for employee in pool:
            if employee.id in assignments:
                continue
            score = role_score(employee, role, relevance)
            if score > best_score:
                best_score = score
                best_match = employee

        if best_match is None:
            unfilled_roles.append(role)
            continue

        assignments[best_match.id] = role
        team_members.append(best_match)

    floor = min(MIN_TEAM_SIZE, len(pool))
    for employee in pool:
        if len(team_members) >= floor:
            break
        if employee.id not in assignments:
            assignments[employee.id] = BACKFILL_ROLE
            team_members.append(employee)

    return TeamAssembly(
        assignments=assignments,
        team_members=team_members,
        unfilled_roles=unfilled_roles,
    )


def skill_level_label(proficiency: int) -> str:
    if proficiency >= 4:
        return "high"
    if proficiency >= 2:
        return "medium"
    return "low"


# Soft skill name fragments -> team formation attribute
ATTRIBUTE_KEYWORDS = {
    "collaboration": ("collaborat",),
    "communication": ("communicat",),
    "leadership": ("lead", "manage"),
    "adaptability": ("adapt", "flexib"),
    "problem_solving": ("problem", "solv"),
}


def team_formation_attributes(employee: Employee) -> dict:
    """Summarize soft skills as team formation attributes for narratives."""
    attributes: dict = {
        "collaboration": "medium",
        "communication": "medium",
        "leadership": "low",
        "adaptability": "medium",
        "problem_solving": "medium",
    }

    for skill in employee.soft_skills:
        name = skill.name.lower()
        for attribute, keywords in ATTRIBUTE_KEYWORDS.items():
            if any(k in name for k in keywords):
                attributes[attribute] = skill_level_label(skill.proficiency)

    attributes["work_style"] = employee.preferred_work_style or "balanced"
    return attributes
