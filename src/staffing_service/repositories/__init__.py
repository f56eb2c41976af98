"""Repository modules for in-memory data access."""

from .employee_repo import EmployeeRepository
from .task_repo import TaskRepository

__all__ = [
    "EmployeeRepository",
    "TaskRepository",
]
