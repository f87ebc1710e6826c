"""
Register Account Use Case

Creates visitor, security and department agent accounts.
"""

import logging

import bcrypt

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import Account, AccountRole

from .dtos import AccountInfo, RegisterAccountCommand, RegisterAccountResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def to_account_info(account: Account) -> AccountInfo:
    return AccountInfo(
        id=str(account.id),
        email=account.email,
        name=account.name,
        phone=account.phone,
        role=account.role.value,
        department=account.department,
    )


class RegisterAccountUseCase:
    """
    Use case for account registration.

    Business Rules:
    - name, email, phone, password and role are required
    - Password must be at least 6 characters
    - Email is normalized to lowercase and must be unique
    - department_agent requires a department; other roles never keep one
    - Department must be known when departments are configured
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: RegisterAccountCommand
    ) -> Result[RegisterAccountResponse]:
        """
        Execute register account use case.

        Args:
            command: RegisterAccountCommand with validated input

        Returns:
            Result with RegisterAccountResponse DTO, or Error
        """
        try:
            role = AccountRole(command.role)
        except ValueError:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Invalid role: {command.role}. "
                    "Must be one of: visitor, security, department_agent",
                )
            )

        name = command.name.strip()
        email = command.email.strip().lower()
        phone = command.phone.strip()
        if not (name and email and phone and command.password):
            return Return.err(Error("VALIDATION_ERROR", "All fields are required"))

        if len(command.password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        department = None
        if role == AccountRole.department_agent:
            department = (command.department or "").strip()
            if not department:
                return Return.err(
                    Error(
                        "DEPARTMENT_REQUIRED",
                        "Department is required for department agents",
                    )
                )

        async with self.uow:
            if department is not None:
                known = await self.uow.departments.list_all()
                if known and department not in {d.name for d in known}:
                    return Return.err(
                        Error("UNKNOWN_DEPARTMENT", f"Unknown department: {department}")
                    )

            existing = await self.uow.accounts.get_by_email(email)
            if existing is not None:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(rounds=12)
            ).decode("utf-8")

            account = Account(
                email=email,
                name=name,
                phone=phone,
                password_hash=password_hash,
                role=role,
                department=department,
            )
            account = await self.uow.accounts.create(account)
            await self.uow.commit()

            logger.info("Registered %s account %s", role.value, account.id)

            return Return.ok(RegisterAccountResponse(account=to_account_info(account)))
