"""
Approve Application Use Case

Department agent approves a forwarded application and issues the gate pass.
"""

from datetime import datetime, timedelta
from typing import Any, Dict
from uuid import UUID

from gatepass.libs.result import Result
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.actor import ActorContext
from gatepass.domain.credential import build_gate_pass_payload, serialize_payload
from gatepass.domain.entities import Application
from gatepass.domain.lifecycle import Transition

from .dtos import ApplicationResponse
from .transition_base import TransitionUseCase


class ApproveApplicationUseCase(TransitionUseCase):
    """
    Use case for approving an application.

    Business Rules:
    - Actor must be a department_agent of the application's department
    - Application must be forwarded (approved is terminal, so a second
      approve fails instead of reissuing the pass)
    - Sets department_comment and approved_by = actor name
    - Generates the GATE_PASS credential, valid for 24 hours by default
    """

    transition = Transition.department_approve

    def __init__(
        self,
        uow: UnitOfWork,
        company_name: str,
        validity: timedelta = timedelta(hours=24),
    ):
        super().__init__(uow)
        self.company_name = company_name
        self.validity = validity

    async def execute(
        self, application_id: UUID, comments: str, actor: ActorContext
    ) -> Result[ApplicationResponse]:
        """
        Execute approve application use case.

        Args:
            application_id: Application to approve
            comments: Department comment shown to the visitor
            actor: Approving department agent

        Returns:
            Result with the approved ApplicationResponse, or Error
        """

        def build_values(application: Application, now: datetime) -> Dict[str, Any]:
            payload = build_gate_pass_payload(
                application,
                approved_by=actor.name,
                approved_at=now,
                company_name=self.company_name,
                validity=self.validity,
            )
            return {
                "department_comment": comments or "",
                "approved_by": actor.name,
                "credential": serialize_payload(payload),
            }

        return await self._apply(application_id, actor, build_values)
