"""Task repository over the in-memory data context."""

from ..database import DataContext
from ..models.task import Task

DEFAULT_TASK_COUNT = 3


class TaskRepository:
    """Read queries for tasks."""

    def __init__(self, context: DataContext):
        self.context = context

    def list_all(self, skip: int = 0, limit: int = 100) -> list[Task]:
        """List tasks with pagination, in dataset order."""
        return self.context.tasks[skip : skip + limit]

    def get_by_id(self, task_id: str) -> Task:
        """Get a task by ID."""
        return self.context.get_task(task_id)

    def find_by_skills(self, skills: list[str]) -> list[Task]:
        """Tasks requiring any of the named skills.

        Names match by substring in either direction, case-insensitively.
        No skills returns every task; no match returns the first few tasks.
        """
        if not skills:
            return list(self.context.tasks)

        wanted = [s.lower() for s in skills]

        def requires_any(task: Task) -> bool:
            for requirement in [*task.required_hard_skills, *task.required_soft_skills]:
                name = requirement.skill_name.lower()
                if any(skill in name or name in skill for skill in wanted):
                    return True
            return False

        matching = [t for t in self.context.tasks if requires_any(t)]
        if not matching:
            return self.context.tasks[:DEFAULT_TASK_COUNT]
        return matching
