# Standard library imports
from uuid import UUID

# Third-party imports
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicdesk.core.db import get_async_session
from civicdesk.core.exceptions import NotFoundError
from civicdesk.schemas.complaints.department_schemas import DepartmentResponse
from civicdesk.services.departments import department_services

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=list[DepartmentResponse])
async def list_departments(db: AsyncSession = Depends(get_async_session)):
    """All departments, sorted by name"""
    departments = await department_services.list_departments(db)
    return [DepartmentResponse.model_validate(department) for department in departments]


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(department_id: UUID, db: AsyncSession = Depends(get_async_session)):
    department = await department_services.get_department(db, department_id)
    if not department:
        raise NotFoundError("Department not found")
    return DepartmentResponse.model_validate(department)
