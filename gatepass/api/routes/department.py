from datetime import timedelta

from fastapi import APIRouter, Depends, status

from config import ApplicationConfig
from gatepass.api.error import raise_for_error
from gatepass.api.routes._params import DecisionRequest, parse_application_id
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications import (
    ApplicationResponse,
    ApproveApplicationUseCase,
    RejectApplicationUseCase,
)
from gatepass.app.use_cases.views import DepartmentViewResponse, DepartmentViewUseCase
from gatepass.depends import get_current_actor, get_unit_of_work
from gatepass.domain.actor import ActorContext

router = APIRouter(prefix="/department", tags=["Department"])


@router.get(
    "/applications",
    status_code=status.HTTP_200_OK,
    response_model=DepartmentViewResponse,
)
async def department_dashboard(
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Department dashboard for the caller's own department"""
    result = await DepartmentViewUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/approve",
    status_code=status.HTTP_200_OK,
    response_model=ApplicationResponse,
)
async def approve_application(
    application_id: str,
    request: DecisionRequest,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve Application and Issue Gate Pass

    Raises:
        - 403 Forbidden: caller is not an agent of the application's department
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: INVALID_STATE (not forwarded) or UPDATE_FAILED
    """
    app_uuid = parse_application_id(application_id)

    use_case = ApproveApplicationUseCase(
        uow,
        company_name=ApplicationConfig.COMPANY_NAME,
        validity=timedelta(hours=ApplicationConfig.CREDENTIAL_VALIDITY_HOURS),
    )
    result = await use_case.execute(app_uuid, request.comments, actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/reject",
    status_code=status.HTTP_200_OK,
    response_model=ApplicationResponse,
)
async def reject_application(
    application_id: str,
    request: DecisionRequest,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Reject Application at Department

    Raises:
        - 403 Forbidden: caller is not an agent of the application's department
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: INVALID_STATE (not forwarded) or UPDATE_FAILED
    """
    app_uuid = parse_application_id(application_id)

    result = await RejectApplicationUseCase(uow).execute(
        app_uuid, request.comments, actor
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
