"""
Profile Use Cases

Reading and completing the caller's own profile.
"""

import logging

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import Account

from .dtos import CompleteProfileCommand, ProfileResponse
from .register_account_use_case import to_account_info

logger = logging.getLogger(__name__)

REQUIRED_PROFILE_FIELDS = (
    "date_of_birth",
    "gender",
    "government_id_type",
    "government_id_number",
    "address",
    "city",
    "state",
    "pincode",
    "emergency_contact_name",
    "emergency_contact_phone",
    "emergency_contact_relation",
)

OPTIONAL_PROFILE_FIELDS = ("employee_id", "designation", "company_name")


def to_profile_response(account: Account) -> ProfileResponse:
    return ProfileResponse(
        account=to_account_info(account),
        profile_completed=account.profile_completed,
        **{
            field: getattr(account, field)
            for field in REQUIRED_PROFILE_FIELDS + OPTIONAL_PROFILE_FIELDS
        },
    )


class GetProfileUseCase:
    """Returns the caller's account and profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext) -> Result[ProfileResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(actor.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            return Return.ok(to_profile_response(account))


class CompleteProfileUseCase:
    """
    Use case for completing (or editing) the caller's profile.

    Business Rules:
    - Personal, government id, address and emergency contact fields are required
    - Employment fields are optional; blank values are stored as None
    - name and phone may be changed; applications already submitted keep
      the values captured at submission
    - Email, role and department cannot be changed here
    - Marks the profile as completed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, command: CompleteProfileCommand
    ) -> Result[ProfileResponse]:
        values = {
            field: getattr(command, field).strip() for field in REQUIRED_PROFILE_FIELDS
        }
        missing = [field for field, value in values.items() if not value]
        if missing:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Please fill all required fields: {', '.join(missing)}",
                )
            )

        for field in OPTIONAL_PROFILE_FIELDS:
            values[field] = (getattr(command, field) or "").strip() or None

        for field in ("name", "phone"):
            value = getattr(command, field)
            if value is None:
                continue
            if not value.strip():
                return Return.err(
                    Error("VALIDATION_ERROR", f"{field} cannot be blank")
                )
            values[field] = value.strip()

        async with self.uow:
            account = await self.uow.accounts.get_by_id(actor.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            for field, value in values.items():
                setattr(account, field, value)
            account.profile_completed = True

            account = await self.uow.accounts.update(account)
            await self.uow.commit()

            logger.info("Profile completed for account %s", account.id)

            return Return.ok(to_profile_response(account))
