"""
Login Use Case

Authenticates an account and issues a JWT carrying the actor context.
"""

import bcrypt

from gatepass.libs.result import Error, Result, Return
from gatepass.api.utils.jwt import generate_jwt
from gatepass.app.services.unit_of_work import UnitOfWork

from .dtos import LoginResponse
from .register_account_use_case import to_account_info


class LoginUseCase:
    """
    Use case for login and JWT issuance.

    Business Rules:
    - Email lookup is case-insensitive
    - Password check runs even for unknown emails to keep timing flat
    - JWT claims carry account_id, role, department and name
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_email(email.strip().lower())

            if account is None:
                bcrypt.checkpw(b"dummy_password", bcrypt.hashpw(b"x", bcrypt.gensalt(12)))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not bcrypt.checkpw(password.encode(), account.password_hash.encode()):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            access_token = generate_jwt(
                account.id, account.role.value, account.name, account.department
            )

            return Return.ok(
                LoginResponse(access_token=access_token, account=to_account_info(account))
            )
