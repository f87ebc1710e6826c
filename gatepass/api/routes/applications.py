from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from gatepass.api.error import raise_for_error
from gatepass.api.routes._params import parse_application_id
from gatepass.app.services.credential_encoder import CredentialEncoder
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications import (
    ApplicationResponse,
    RenderCredentialUseCase,
    SubmitApplicationCommand,
    SubmitApplicationUseCase,
)
from gatepass.app.use_cases.views import VisitorViewResponse, VisitorViewUseCase
from gatepass.depends import get_credential_encoder, get_current_actor, get_unit_of_work
from gatepass.domain.actor import ActorContext

router = APIRouter(prefix="/applications", tags=["Applications"])


class SubmitApplicationRequest(BaseModel):
    """
    Submit application HTTP request payload

    Date, time and duration are free-form strings.
    """

    purpose: str = Field(..., description="Reason for the visit")
    department: str = Field(..., description="Department being visited")
    visit_date: str = Field(..., description="Visit date, e.g. 2025-06-01")
    visit_time: str = Field(..., description="Visit time, e.g. 10:00")
    duration: str = Field(..., description="Expected duration, e.g. 2 hours")
    vehicle_number: Optional[str] = Field(None, description="Vehicle registration")


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=ApplicationResponse
)
async def submit_application(
    request: SubmitApplicationRequest,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Visit Application

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, UNKNOWN_DEPARTMENT
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: caller is not a visitor
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    command = SubmitApplicationCommand(**request.model_dump())

    use_case = SubmitApplicationUseCase(uow)
    result = await use_case.execute(actor, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=VisitorViewResponse)
async def list_my_applications(
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Visitor dashboard: own applications, newest first"""
    result = await VisitorViewUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{application_id}/credential.png",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def render_credential(
    application_id: str,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
    encoder: CredentialEncoder = Depends(get_credential_encoder),
):
    """
    Gate Pass QR Code

    Raises:
        - 403 Forbidden: caller may not view this pass
        - 404 Not Found: APPLICATION_NOT_FOUND
        - 409 Conflict: CREDENTIAL_NOT_ISSUED
    """
    app_uuid = parse_application_id(application_id)

    result = await RenderCredentialUseCase(uow, encoder).execute(app_uuid, actor)

    if result.is_err():
        raise_for_error(result.error)

    return Response(content=result.value, media_type="image/png")
