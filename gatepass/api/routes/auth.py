from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from gatepass.api.error import raise_for_error
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.accounts import (
    LoginResponse,
    LoginUseCase,
    RegisterAccountCommand,
    RegisterAccountResponse,
    RegisterAccountUseCase,
)
from gatepass.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterAccountCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Account email address")
    phone: str = Field(..., min_length=1, max_length=32, description="Phone number")
    password: str = Field(..., description="Password (min 6 chars)")
    role: str = Field(..., description="visitor, security or department_agent")
    department: Optional[str] = Field(
        None, description="Department name, required for department_agent"
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterAccountResponse,
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register Account

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, DEPARTMENT_REQUIRED, UNKNOWN_DEPARTMENT
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: Malformed input (handled by FastAPI)
    """
    command = RegisterAccountCommand(
        name=request.name,
        email=request.email,
        phone=request.phone,
        password=request.password,
        role=request.role,
        department=request.department,
    )

    use_case = RegisterAccountUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Login

    Returns a bearer token carrying the actor's role and department.

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
