"""Tests for the skill match calculator."""

import pytest
from pydantic import ValidationError

from staffing_service.models import SkillRequirement
from staffing_service.matching.skill_match import (
    ExactSkillMatcher,
    SubstringSkillMatcher,
    calculate_skills_match,
    find_capability,
    round_score,
    skill_match_details,
)


def test_round_score_rounds_half_up():
    assert round_score(66.5) == 67
    assert round_score(66.49) == 66
    assert round_score(0.5) == 1
    assert round_score(100) == 100


def test_full_match(make_skill, make_requirement):
    """Proficiency at the minimum earns full credit."""
    score = calculate_skills_match([make_skill("React", 4)], [make_requirement("React", 4)])
    assert score == 100


def test_partial_match(make_skill, make_requirement):
    """Proficiency below the minimum earns proportional credit."""
    score = calculate_skills_match([make_skill("React", 2)], [make_requirement("React", 4)])
    assert score == 50


def test_missing_skill_scores_zero(make_skill, make_requirement):
    score = calculate_skills_match([make_skill("Python", 5)], [make_requirement("React", 3)])
    assert score == 0


def test_no_requirements_scores_full(make_skill):
    assert calculate_skills_match([make_skill("React", 1)], []) == 100
    assert calculate_skills_match([], []) == 100


def test_importance_weights_requirements(make_skill, make_requirement):
    """Heavier requirements dominate the score."""
    capabilities = [make_skill("React", 4)]
    requirements = [
        make_requirement("React", 4, importance=3),
        make_requirement("SQL", 3, importance=1),
    ]
    assert calculate_skills_match(capabilities, requirements) == 75


def test_name_match_is_case_insensitive(make_skill, make_requirement):
    score = calculate_skills_match([make_skill("react", 4)], [make_requirement("REACT", 4)])
    assert score == 100


def test_substring_matcher_accepts_java_for_javascript(make_skill, make_requirement):
    """Substring matching lets Java satisfy a JavaScript requirement."""
    capabilities = [make_skill("Java", 5)]
    requirements = [make_requirement("JavaScript", 4)]

    assert calculate_skills_match(capabilities, requirements) == 100
    assert calculate_skills_match(capabilities, requirements, ExactSkillMatcher()) == 0


def test_first_matching_capability_wins(make_skill, make_requirement):
    capabilities = [make_skill("Java", 2), make_skill("JavaScript", 5)]
    found = find_capability(capabilities, make_requirement("JavaScript", 4))
    assert found.name == "Java"

    exact = find_capability(capabilities, make_requirement("JavaScript", 4), ExactSkillMatcher())
    assert exact.name == "JavaScript"


@pytest.mark.parametrize(
    "held,wanted,expected",
    [
        ("Machine Learning", "machine learning", True),
        ("SQL", "PostgreSQL", True),
        ("PostgreSQL", "SQL", True),
        ("Go", "Rust", False),
    ],
)
def test_substring_matcher(held, wanted, expected):
    assert SubstringSkillMatcher().matches(held, wanted) is expected


def test_match_details(make_skill, make_requirement):
    capabilities = [make_skill("React", 2), make_skill("SQL", 5)]
    requirements = [
        make_requirement("React", 4),
        make_requirement("SQL", 3),
        make_requirement("Kubernetes", 2),
    ]

    details = skill_match_details(capabilities, requirements)

    assert [(d.skill_name, d.actual, d.gap, d.match) for d in details] == [
        ("React", 2, 2, 50),
        ("SQL", 5, 0, 100),
        ("Kubernetes", 0, 2, 0),
    ]


def test_importance_defaults_to_one_and_must_be_positive(make_skill):
    requirements = [
        SkillRequirement(skill_name="React", minimum_proficiency=4),
        SkillRequirement(skill_name="SQL", minimum_proficiency=3),
    ]
    assert [r.importance for r in requirements] == [1, 1]
    assert calculate_skills_match([make_skill("React", 4)], requirements) == 50

    with pytest.raises(ValidationError):
        SkillRequirement(skill_name="React", minimum_proficiency=4, importance=0)
