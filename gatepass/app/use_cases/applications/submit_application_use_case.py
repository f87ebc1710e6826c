"""
Submit Application Use Case

Handles a visitor creating a new visit request.
"""

import logging

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import AccountRole, Application, ApplicationStatus

from .dtos import ApplicationResponse, SubmitApplicationCommand

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("purpose", "department", "visit_date", "visit_time", "duration")


class SubmitApplicationUseCase:
    """
    Use case for submitting a visit request.

    Business Rules:
    - Only visitors submit applications
    - purpose, department, visit_date, visit_time, duration are required
    - The owning account must exist
    - Department must be a known department when departments are configured
    - Visitor name/email/phone are copied from the account at this instant
    - New applications start in status=pending
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: ActorContext, command: SubmitApplicationCommand
    ) -> Result[ApplicationResponse]:
        """
        Execute submit application use case.

        Args:
            actor: Authenticated visitor
            command: Visit request fields

        Returns:
            Result with ApplicationResponse DTO, or Error
        """
        if actor.role != AccountRole.visitor:
            return Return.err(
                Error("FORBIDDEN", "Only visitors can submit applications")
            )

        missing = [f for f in REQUIRED_FIELDS if not getattr(command, f).strip()]
        if missing:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Missing required fields: {', '.join(missing)}",
                )
            )

        async with self.uow:
            account = await self.uow.accounts.get_by_id(actor.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            department = command.department.strip()
            known = await self.uow.departments.list_all()
            if known and department not in {d.name for d in known}:
                return Return.err(
                    Error("UNKNOWN_DEPARTMENT", f"Unknown department: {department}")
                )

            vehicle_number = (command.vehicle_number or "").strip() or None

            application = Application(
                owner_id=account.id,
                visitor_name=account.name,
                visitor_email=account.email,
                visitor_phone=account.phone,
                purpose=command.purpose.strip(),
                department=department,
                visit_date=command.visit_date.strip(),
                visit_time=command.visit_time.strip(),
                duration=command.duration.strip(),
                vehicle_number=vehicle_number,
                status=ApplicationStatus.pending,
            )

            application = await self.uow.applications.create(application)
            await self.uow.commit()

            logger.info(
                "Application %s submitted by %s for %s",
                application.id,
                account.id,
                department,
            )

            return Return.ok(ApplicationResponse.from_entity(application))
