"""
Visitor View Use Case

Lists the applications a visitor has submitted.
"""

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications.dtos import to_responses
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import AccountRole
from gatepass.domain.views import visitor_applications

from .dtos import VisitorViewResponse


class VisitorViewUseCase:
    """
    Use case for the visitor dashboard.

    Business Rules:
    - Only the visitor's own applications are returned, any status
    - Ordered newest first
    - Approved entries carry their credential
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext) -> Result[VisitorViewResponse]:
        if actor.role != AccountRole.visitor:
            return Return.err(Error("FORBIDDEN", "Only visitors have a visitor view"))

        async with self.uow:
            applications = await self.uow.applications.list_by_owner(actor.account_id)

            owned = visitor_applications(applications, actor.account_id)
            return Return.ok(VisitorViewResponse(applications=to_responses(owned)))
