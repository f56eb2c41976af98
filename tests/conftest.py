"""Pytest configuration and fixtures."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from staffing_service.database import DataContext
from staffing_service.models import (
    Complexity,
    Employee,
    License,
    Skill,
    SkillRequirement,
    Task,
    Variability,
)


@pytest.fixture
def make_skill():
    """Factory for skills held by an employee."""

    def _make(name, proficiency, category="hard", skill_id=None):
        return Skill(
            id=skill_id or f"skill-{name.lower().replace(' ', '-')}",
            name=name,
            category=category,
            proficiency=proficiency,
            last_validated=datetime(2024, 1, 1),
        )

    return _make


@pytest.fixture
def make_requirement():
    """Factory for task skill requirements."""

    def _make(name, minimum, importance=1):
        return SkillRequirement(skill_name=name, minimum_proficiency=minimum, importance=importance)

    return _make


@pytest.fixture
def make_employee():
    """Factory for employees with sensible defaults."""

    def _make(employee_id, **fields):
        data = {
            "id": employee_id,
            "name": f"Employee {employee_id}",
            "location": "Seattle",
            "capacity": 100,
        }
        data.update(fields)
        return Employee(**data)

    return _make


@pytest.fixture
def make_task():
    """Factory for tasks with neutral complexity and variability."""

    def _make(task_id, complexity=3, variability=3, **fields):
        data = {
            "id": task_id,
            "description": f"Task {task_id}",
            "complexity": Complexity(overall=complexity),
            "variability": Variability(overall=variability),
        }
        data.update(fields)
        return Task(**data)

    return _make


@pytest.fixture
def frontend_dev(make_employee, make_skill):
    """Seattle React developer holding a validated AWS license."""
    return make_employee(
        "emp001",
        name="Jane Smith",
        position="Senior Software Engineer",
        capacity=85,
        hard_skills=[
            make_skill("JavaScript", 5),
            make_skill("React", 4, skill_id="skill-react"),
        ],
        soft_skills=[make_skill("Communication", 4, category="soft")],
        licenses=[License(id="lic001", name="AWS Certified Developer", validation_status=True)],
    )


@pytest.fixture
def junior_dev(make_employee, make_skill):
    """Remote-unfriendly Boston developer with weak React."""
    return make_employee(
        "emp002",
        name="Sam Lee",
        position="Developer",
        location="Boston",
        capacity=40,
        hard_skills=[make_skill("React", 2)],
        soft_skills=[make_skill("Communication", 2, category="soft")],
    )


@pytest.fixture
def analyst(make_employee, make_skill):
    return make_employee(
        "emp003",
        name="Priya Patel",
        position="Business Analyst",
        location="New York",
        capacity=90,
        hard_skills=[make_skill("Data Analysis", 4)],
        soft_skills=[make_skill("Problem Solving", 4, category="soft")],
    )


@pytest.fixture
def dashboard_task(make_task, make_requirement):
    return make_task(
        "task001",
        complexity=4,
        variability=3,
        description="Build customer dashboard",
        required_hard_skills=[make_requirement("React", 4)],
        required_soft_skills=[make_requirement("Communication", 3)],
        location_requirements=["Seattle"],
        capacity_required=80,
    )


@pytest.fixture
def context(frontend_dev, junior_dev, analyst, dashboard_task, make_task, make_requirement):
    """Data context with three employees and two tasks."""
    report_task = make_task(
        "task002",
        description="Quarterly churn report",
        required_hard_skills=[make_requirement("Data Analysis", 3)],
    )
    return DataContext(
        employees=[frontend_dev, junior_dev, analyst],
        tasks=[dashboard_task, report_task],
    )


@pytest.fixture
def generator():
    """Mock text generator."""
    mock = AsyncMock()
    mock.generate.return_value = "Generated narrative."
    return mock
