"""
Account Use Cases

Registration, login and the account profile.
"""

from .dtos import (
    AccountInfo,
    CompleteProfileCommand,
    LoginResponse,
    ProfileResponse,
    RegisterAccountCommand,
    RegisterAccountResponse,
)
from .login_use_case import LoginUseCase
from .profile_use_cases import CompleteProfileUseCase, GetProfileUseCase
from .register_account_use_case import RegisterAccountUseCase

__all__ = [
    "RegisterAccountUseCase",
    "LoginUseCase",
    "GetProfileUseCase",
    "CompleteProfileUseCase",
    "RegisterAccountCommand",
    "RegisterAccountResponse",
    "LoginResponse",
    "AccountInfo",
    "CompleteProfileCommand",
    "ProfileResponse",
]
