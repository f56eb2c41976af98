"""Task API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..database import DataContext
from ..dependencies import get_aggregator, get_analyzer, get_context
from ..errors import NotFoundError
from ..matching.aggregator import TaskFitAggregator
from ..matching.task_analyzer import TaskAnalyzer
from ..models.analysis import TaskAnalysis
from ..models.matching import EmployeeMatch, MatchResult
from ..models.task import Task
from ..repositories.task_repo import TaskRepository

router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    context: DataContext = Depends(get_context),
) -> list[Task]:
    """List all tasks with pagination."""
    return TaskRepository(context).list_all(skip=skip, limit=limit)


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: str, context: DataContext = Depends(get_context)) -> Task:
    """Get a task by ID."""
    try:
        return TaskRepository(context).get_by_id(task_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.get("/{task_id}/employees", response_model=list[EmployeeMatch])
async def get_employees_for_task(
    task_id: str,
    threshold: Optional[int] = Query(None, ge=0, le=100),
    aggregator: TaskFitAggregator = Depends(get_aggregator),
) -> list[EmployeeMatch]:
    """Employees fitting a task, best first. Falls back to the top 3."""
    if threshold is None:
        threshold = get_settings().employee_match_threshold
    try:
        return aggregator.employees_for_task(task_id, threshold)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.get("/{task_id}/analysis", response_model=TaskAnalysis)
async def analyze_task(task_id: str, analyzer: TaskAnalyzer = Depends(get_analyzer)) -> TaskAnalysis:
    """Analyze task complexity and variability."""
    try:
        return analyzer.analyze_task(task_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.get("/{task_id}/score/{employee_id}", response_model=MatchResult)
async def score_pair(
    task_id: str,
    employee_id: str,
    context: DataContext = Depends(get_context),
    aggregator: TaskFitAggregator = Depends(get_aggregator),
) -> MatchResult:
    """Score a single employee against a task."""
    try:
        task = context.get_task(task_id)
        employee = context.get_employee(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return aggregator.score(employee, task)
