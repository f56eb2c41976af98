"""In-memory data context and loading."""

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Optional

from .errors import NotFoundError
from .models.assessment import Assessment
from .models.employee import Employee
from .models.task import Task

logger = logging.getLogger("data_context")

SAMPLE_DATA = "sample_data.json"


class DataContext:
    """Holds employees, tasks and assessments for one application instance.

    A context is created explicitly and passed to each component; there is
    no module-level data.
    """

    def __init__(
        self,
        employees: Optional[list[Employee]] = None,
        tasks: Optional[list[Task]] = None,
        assessments: Optional[list[Assessment]] = None,
    ):
        self.employees: list[Employee] = list(employees or [])
        self.tasks: list[Task] = list(tasks or [])
        self.assessments: list[Assessment] = list(assessments or [])

    def get_employee(self, employee_id: str) -> Employee:
        """Get an employee by ID or raise NotFoundError."""
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        raise NotFoundError("Employee", employee_id)

    def get_task(self, task_id: str) -> Task:
        """Get a task by ID or raise NotFoundError."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        raise NotFoundError("Task", task_id)

    @classmethod
    def from_dict(cls, data: dict) -> "DataContext":
        """Build a context from raw records, validating every entity."""
        return cls(
            employees=[Employee.model_validate(e) for e in data.get("employees", [])],
            tasks=[Task.model_validate(t) for t in data.get("tasks", [])],
            assessments=[Assessment.model_validate(a) for a in data.get("assessments", [])],
        )


def load_context(path: Optional[str] = None) -> DataContext:
    """Load a data context from a JSON file, or the bundled sample dataset."""
    if path:
        raw = Path(path).read_text(encoding="utf-8")
        source = path
    else:
        raw = resources.files("staffing_service.data").joinpath(SAMPLE_DATA).read_text(encoding="utf-8")
        source = SAMPLE_DATA

    context = DataContext.from_dict(json.loads(raw))
    logger.info(
        f"Loaded {len(context.employees)} employees, {len(context.tasks)} tasks, "
        f"{len(context.assessments)} assessments from {source}"
    )
    return context

