from fastapi import APIRouter, Depends, status

from gatepass.api.error import raise_for_error
from gatepass.api.routes._params import DecisionRequest, parse_application_id
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications import (
    ApplicationResponse,
    ForwardApplicationUseCase,
    RejectAtSecurityUseCase,
)
from gatepass.app.use_cases.views import SecurityViewResponse, SecurityViewUseCase
from gatepass.depends import get_current_actor, get_unit_of_work
from gatepass.domain.actor import ActorContext

router = APIRouter(prefix="/security", tags=["Security"])


@router.get(
    "/applications", status_code=status.HTTP_200_OK, response_model=SecurityViewResponse
)
async def security_dashboard(
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Security dashboard: pending, rejected at security, processed"""
    result = await SecurityViewUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/applications/{application_id}/forward",
    status_code=status.HTTP_200_OK,
    response_model=ApplicationResponse,
)
async def forward_application(
    application_id: str,
    request: DecisionRequest,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Forward Application to its Department

    Raises:
        - 403 Forbidden: caller is not security
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: INVALID_STATE (not pending) or UPDATE_FAILED
    """
    app_uuid = parse_application_id(application_id)

    result = await ForwardApplicationUseCase(uow).execute(
        app_uuid, request.comments, actor
    )

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
    Reject Application at Security

    Raises:
        - 403 Forbidden: caller is not security
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: INVALID_STATE (not pending) or UPDATE_FAILED
    """
    app_uuid = parse_application_id(application_id)

    result = await RejectAtSecurityUseCase(uow).execute(
        app_uuid, request.comments, actor
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
