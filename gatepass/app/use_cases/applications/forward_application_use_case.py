"""
Forward Application Use Case

Security passes a pending application to its department.
"""

from uuid import UUID

from gatepass.libs.result import Result
from gatepass.domain.actor import ActorContext
from gatepass.domain.lifecycle import Transition

from .dtos import ApplicationResponse
from .transition_base import TransitionUseCase


class ForwardApplicationUseCase(TransitionUseCase):
    """
    Use case for forwarding an application to its department.

    Business Rules:
    - Actor must have role=security (any department)
    - Application must be pending
    - Sets security_comment (empty string allowed)
    """

    transition = Transition.security_forward

    async def execute(
        self, application_id: UUID, comments: str, actor: ActorContext
    ) -> Result[ApplicationResponse]:
        return await self._apply(
            application_id,
            actor,
            lambda application, now: {"security_comment": comments or ""},
        )
