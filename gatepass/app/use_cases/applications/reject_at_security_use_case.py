"""
Reject At Security Use Case

Security turns down a pending application without forwarding it.
"""

from uuid import UUID

from gatepass.libs.result import Result
from gatepass.domain.actor import ActorContext
from gatepass.domain.lifecycle import Transition

from .dtos import ApplicationResponse
from .transition_base import TransitionUseCase


class RejectAtSecurityUseCase(TransitionUseCase):
    """
    Use case for rejecting an application at the security stage.

    Business Rules:
    - Actor must have role=security
    - Application must be pending
    - Sets security_comment; department fields stay empty
    """

    transition = Transition.security_reject

    async def execute(
        self, application_id: UUID, comments: str, actor: ActorContext
    ) -> Result[ApplicationResponse]:
        return await self._apply(
            application_id,
            actor,
            lambda application, now: {"security_comment": comments or ""},
        )
