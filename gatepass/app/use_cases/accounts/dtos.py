"""
Account Use Case DTOs (Data Transfer Objects)

Command and Response classes for registration and login.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterAccountCommand(BaseModel):
    """Registration intent, created by the API layer after validation"""

    name: str
    email: str
    phone: str
    password: str
    role: str
    department: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AccountInfo(BaseModel):
    """Public account details"""

    id: str
    email: str
    name: str
    phone: str
    role: str
    department: Optional[str] = None


class RegisterAccountResponse(BaseModel):
    """Response for register account use case"""

    account: AccountInfo


class LoginResponse(BaseModel):
    """Response for login use case"""

    access_token: str
    token_type: str = "bearer"
    account: AccountInfo


# ============================================================================
# Profile DTOs
# ============================================================================


class CompleteProfileCommand(BaseModel):
    """Profile details supplied after registration"""

    date_of_birth: str
    gender: str
    government_id_type: str
    government_id_number: str
    address: str
    city: str
    state: str
    pincode: str
    emergency_contact_name: str
    emergency_contact_phone: str
    emergency_contact_relation: str
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    company_name: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class ProfileResponse(BaseModel):
    """Account details together with the extended profile"""

    account: AccountInfo
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    government_id_type: Optional[str] = None
    government_id_number: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    emergency_contact_relation: Optional[str] = None
    employee_id: Optional[str] = None
    designation: Optional[str] = None
    company_name: Optional[str] = None
    profile_completed: bool = False
