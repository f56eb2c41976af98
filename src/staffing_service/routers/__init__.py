"""API routers."""

from .employees import router as employees_router
from .tasks import router as tasks_router
from .chat import router as chat_router
from .teams import router as teams_router

__all__ = [
    "employees_router",
    "tasks_router",
    "chat_router",
    "teams_router",
]
