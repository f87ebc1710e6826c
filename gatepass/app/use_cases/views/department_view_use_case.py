"""
Department View Use Case

Partitions a department's applications for its agents.
"""

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.app.use_cases.applications.dtos import to_responses
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import AccountRole
from gatepass.domain.views import department_partitions

from .dtos import DepartmentViewResponse


class DepartmentViewUseCase:
    """
    Use case for the department dashboard.

    Business Rules:
    - Caller must be a department_agent; the view is always the
      caller's own department
    - forwarded (actionable) / processed (approved or rejected)
    - Pending applications are invisible to departments
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor: ActorContext) -> Result[DepartmentViewResponse]:
        if actor.role != AccountRole.department_agent or not actor.department:
            return Return.err(
                Error("FORBIDDEN", "Only department agents have a department view")
            )

        async with self.uow:
            applications = await self.uow.applications.list_by_department(
                actor.department
            )

            partitions = department_partitions(applications, actor.department)
            return Return.ok(
                DepartmentViewResponse(
                    department=actor.department,
                    forwarded=to_responses(partitions["forwarded"]),
                    processed=to_responses(partitions["processed"]),
                )
            )
