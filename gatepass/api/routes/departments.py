from fastapi import APIRouter, Depends, status

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.departments import (
    DepartmentListResponse,
    ListDepartmentsUseCase,
)
from gatepass.depends import get_unit_of_work

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", status_code=status.HTTP_200_OK, response_model=DepartmentListResponse)
async def list_departments(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List department names for the visit request form"""
    result = await ListDepartmentsUseCase(uow).execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
