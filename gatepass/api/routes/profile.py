from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.accounts import (
    CompleteProfileCommand,
    CompleteProfileUseCase,
    GetProfileUseCase,
    ProfileResponse,
)
from gatepass.depends import get_current_actor, get_unit_of_work
from gatepass.domain.actor import ActorContext

router = APIRouter(prefix="/profile", tags=["Profile"])


class CompleteProfileRequest(BaseModel):
    """Complete profile HTTP request payload"""

    date_of_birth: str = Field(..., max_length=32, description="Date of birth")
    gender: str = Field(..., max_length=32)
    government_id_type: str = Field(..., max_length=64, description="e.g. aadhaar, pan")
    government_id_number: str = Field(..., max_length=64)
    address: str = Field(..., max_length=500, description="Street address")
    city: str = Field(..., max_length=128)
    state: str = Field(..., max_length=128)
    pincode: str = Field(..., max_length=16)
    emergency_contact_name: str = Field(..., max_length=255)
    emergency_contact_phone: str = Field(..., max_length=32)
    emergency_contact_relation: str = Field(..., max_length=64)
    employee_id: Optional[str] = Field(None, max_length=64)
    designation: Optional[str] = Field(None, max_length=128)
    company_name: Optional[str] = Field(None, max_length=255)
    name: Optional[str] = Field(None, max_length=255, description="New display name")
    phone: Optional[str] = Field(None, max_length=32, description="New phone number")


@router.get("", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Current account with its profile details"""
    result = await GetProfileUseCase(uow).execute(actor)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def complete_profile(
    request: CompleteProfileRequest,
    actor: ActorContext = Depends(get_current_actor),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Complete Profile

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    command = CompleteProfileCommand(**request.model_dump())

    result = await CompleteProfileUseCase(uow).execute(actor, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
