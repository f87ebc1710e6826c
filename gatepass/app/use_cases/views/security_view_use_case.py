"""
Security View Use Case

Partitions every application for the security desk.
"""

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications.dtos import to_responses
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import AccountRole
from gatepass.domain.views import security_partitions

from .dtos import SecurityViewResponse


class SecurityViewUseCase:
    """
    Use case for the security dashboard.

    Business Rules:
    - Caller must have role=security
    - No department filter: security sees everything
    - pending / rejected-at-security / processed (forwarded or approved)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext) -> Result[SecurityViewResponse]:
        if actor.role != AccountRole.security:
            return Return.err(
                Error("FORBIDDEN", "Only security can view all applications")
            )

        async with self.uow:
            applications = await self.uow.applications.list_all()

            partitions = security_partitions(applications)
            return Return.ok(
                SecurityViewResponse(
                    pending=to_responses(partitions["pending"]),
                    rejected=to_responses(partitions["rejected"]),
                    processed=to_responses(partitions["processed"]),
                )
            )
