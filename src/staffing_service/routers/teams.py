"""Team assembly endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from ..database import DataContext
from ..dependencies import get_context
from ..errors import NotFoundError
from ..matching.team_assembler import assemble_team
from ..models.team import TeamAssembly, TeamAssemblyRequest
from ..repositories.employee_repo import EmployeeRepository

router = APIRouter(prefix="/teams", tags=["Teams"])


@router.post("/assemble", response_model=TeamAssembly)
async def assemble(data: TeamAssemblyRequest, context: DataContext = Depends(get_context)) -> TeamAssembly:
    """Assign candidates from an explicit pool to roles."""
    try:
        pool = EmployeeRepository(context).get_many(data.candidate_ids)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return assemble_team(pool, data.roles, data.business_unit_relevance)
