"""Skill match calculator.

Scores an employee's capability set against a task's requirement set.
Requirements reference skills by name, not by ID: skills come from HR
systems that share no identifiers, so names are compared through a
pluggable ``SkillMatcher``. The default ``SubstringSkillMatcher`` is
permissive and accepts a match when either lowercased name contains the
other. That means "Java" will also match "JavaScript"; use
``ExactSkillMatcher`` where such false positives matter.
"""

import math
from typing import Optional, Protocol, Sequence

from ..models.skill import Skill, SkillMatchDetail, SkillRequirement


def round_score(value: float) -> int:
    """Round half up to an integer score."""
    return math.floor(value + 0.5)


class SkillMatcher(Protocol):
    """Strategy deciding whether a held skill satisfies a required name."""

    def matches(self, capability_name: str, required_name: str) -> bool: ...


class SubstringSkillMatcher:
    """Case-insensitive substring match in either direction."""

    def matches(self, capability_name: str, required_name: str) -> bool:
        held = capability_name.lower()
        wanted = required_name.lower()
        return wanted in held or held in wanted


class ExactSkillMatcher:
    """Case-insensitive equality."""

    def matches(self, capability_name: str, required_name: str) -> bool:
        return capability_name.lower() == required_name.lower()


DEFAULT_MATCHER: SkillMatcher = SubstringSkillMatcher()


def find_capability(
    capabilities: Sequence[Skill],
    requirement: SkillRequirement,
    matcher: SkillMatcher = DEFAULT_MATCHER,
) -> Optional[Skill]:
    """Return the first capability satisfying the requirement's name."""
    for skill in capabilities:
        if matcher.matches(skill.name, requirement.skill_name):
            return skill
    return None


def calculate_skills_match(
    capabilities: Sequence[Skill],
    requirements: Sequence[SkillRequirement],
    matcher: SkillMatcher = DEFAULT_MATCHER,
) -> int:
    """Calculate an importance-weighted 0-100 skill match score.

    Args:
        capabilities: Employee skills with proficiency 1-5
        requirements: Required skills with minimum proficiency and importance
        matcher: Name matching strategy

    Returns:
        Match score; 100 when nothing is required
    """
    if not requirements:
        return 100

    total_importance = 0
    total_score = 0.0

    for requirement in requirements:
        importance = requirement.importance
        total_importance += importance

        skill = find_capability(capabilities, requirement, matcher)
        if skill is None:
            continue

        if skill.proficiency >= requirement.minimum_proficiency:
            total_score += importance
        else:
            total_score += importance * (skill.proficiency / requirement.minimum_proficiency)

    return round_score((total_score / total_importance) * 100)


def skill_match_details(
    capabilities: Sequence[Skill],
    requirements: Sequence[SkillRequirement],
    matcher: SkillMatcher = DEFAULT_MATCHER,
) -> list[SkillMatchDetail]:
    """Break a skill match down per requirement."""
    details = []
    for requirement in requirements:
        required = requirement.minimum_proficiency
        skill = find_capability(capabilities, requirement, matcher)

        if skill is None:
            details.append(
                SkillMatchDetail(
                    skill_name=requirement.skill_name,
                    required=required,
                    actual=0,
                    gap=required,
                    match=0,
                )
            )
            continue

        if skill.proficiency >= required:
            match = 100
        else:
            match = round_score((skill.proficiency / required) * 100)

        details.append(
            SkillMatchDetail(
                skill_name=requirement.skill_name,
                required=required,
                actual=skill.proficiency,
                gap=max(0, required - skill.proficiency),
                match=match,
            )
        )
    return details
