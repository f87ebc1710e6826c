"""
Reject Application Use Case

Department agent turns down a forwarded application.
"""

from uuid import UUID

from gatepass.libs.result import Result
from gatepass.domain.actor import ActorContext
from gatepass.domain.lifecycle import Transition

from .dtos import ApplicationResponse
from .transition_base import TransitionUseCase


class RejectApplicationUseCase(TransitionUseCase):
    """
    Use case for rejecting an application at the department stage.

    Business Rules:
    - Actor must be a department_agent of the application's department
    - Application must be forwarded
    - Sets department_comment and approved_by = actor name; no credential
    """

    transition = Transition.department_reject

    async def execute(
        self, application_id: UUID, comments: str, actor: ActorContext
    ) -> Result[ApplicationResponse]:
        return await self._apply(
            application_id,
            actor,
            lambda application, now: {
                "department_comment": comments or "",
                "approved_by": actor.name,
            },
        )
