"""Employee API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..config import get_settings
from ..database import DataContext
from ..dependencies import get_aggregator, get_context, get_ledger
from ..errors import InvalidInputError, NotFoundError
from ..matching.aggregator import TaskFitAggregator
from ..matching.validation_ledger import SkillValidationLedger
from ..models.assessment import Assessment, AssessmentCreate
from ..models.employee import Employee, EmployeeSummary
from ..models.experience import Experience
from ..models.matching import TaskMatch
from ..repositories.employee_repo import EmployeeRepository

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get("", response_model=list[EmployeeSummary])
async def list_employees(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    context: DataContext = Depends(get_context),
) -> list[Employee]:
    """List all employees with pagination."""
    return EmployeeRepository(context).list_all(skip=skip, limit=limit)


@router.get("/search", response_model=list[EmployeeSummary])
async def search_employees(
    q: str = Query(..., min_length=1),
    limit: int = Query(20, ge=1, le=100),
    context: DataContext = Depends(get_context),
) -> list[Employee]:
    """Search employees by name, position or location."""
    return EmployeeRepository(context).search(q, limit=limit)


@router.get("/by-project-phase/{phase}", response_model=list[Employee])
async def list_by_project_phase(phase: str, context: DataContext = Depends(get_context)) -> list[Employee]:
    """Employees currently on a project in the given phase."""
    return EmployeeRepository(context).by_project_phase(phase)


@router.get("/by-business-unit/{business_unit}", response_model=list[Employee])
async def list_by_business_unit(
    business_unit: str, context: DataContext = Depends(get_context)
) -> list[Employee]:
    """Employees with knowledge of a business unit."""
    return EmployeeRepository(context).by_business_unit(business_unit)


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str, context: DataContext = Depends(get_context)) -> Employee:
    """Get a full employee profile."""
    try:
        return EmployeeRepository(context).get_by_id(employee_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Employee not found")


@router.get("/{employee_id}/tasks", response_model=list[TaskMatch])
async def get_tasks_for_employee(
    employee_id: str,
    threshold: Optional[int] = Query(None, ge=0, le=100),
    aggregator: TaskFitAggregator = Depends(get_aggregator),
) -> list[TaskMatch]:
    """Tasks an employee fits, best first. May be empty."""
    if threshold is None:
        threshold = get_settings().task_match_threshold
    try:
        return aggregator.tasks_for_employee(employee_id, threshold)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Employee not found")


@router.get("/{employee_id}/assessments", response_model=list[Assessment])
async def get_assessments(
    employee_id: str,
    context: DataContext = Depends(get_context),
    ledger: SkillValidationLedger = Depends(get_ledger),
) -> list[Assessment]:
    """Assessment history of an employee."""
    try:
        context.get_employee(employee_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Employee not found")
    return ledger.assessments_for(employee_id)


@router.get("/{employee_id}/experiences", response_model=list[Experience])
async def get_experiences(employee_id: str, context: DataContext = Depends(get_context)) -> list[Experience]:
    """Past experience of an employee."""
    try:
        return EmployeeRepository(context).experiences_for(employee_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Employee not found")


@router.post("/{employee_id}/skills/{skill_id}/assessments", response_model=Assessment, status_code=201)
async def record_assessment(
    employee_id: str,
    skill_id: str,
    data: AssessmentCreate,
    ledger: SkillValidationLedger = Depends(get_ledger),
) -> Assessment:
    """Record a skill assessment for an employee."""
    try:
        return ledger.record_assessment(
            employee_id, skill_id, data.assessor_id, data.new_rating, data.comment
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
