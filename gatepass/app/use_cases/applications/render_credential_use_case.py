"""
Render Credential Use Case

Produces the scannable QR image for an approved application.
"""

from uuid import UUID

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.credential_encoder import CredentialEncoder
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.actor import ActorContext
from gatepass.domain.credential import simplify_payload
from gatepass.domain.entities import AccountRole, ApplicationStatus


class RenderCredentialUseCase:
    """
    Use case for rendering a gate pass QR code.

    Business Rules:
    - The owning visitor, security, or an agent of the application's
      department may render the pass
    - Only approved applications carry a credential
    - Long payloads are simplified before encoding
    """

    def __init__(self, uow: UnitOfWork, encoder: CredentialEncoder):
        self.uow = uow
        self.encoder = encoder

    async def execute(self, application_id: UUID, actor: ActorContext) -> Result[bytes]:
        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None:
                return Return.err(
                    Error("APPLICATION_NOT_FOUND", "Application not found")
                )

            allowed = (
                (actor.role == AccountRole.visitor and application.owner_id == actor.account_id)
                or actor.role == AccountRole.security
                or (
                    actor.role == AccountRole.department_agent
                    and actor.department == application.department
                )
            )
            if not allowed:
                return Return.err(
                    Error("FORBIDDEN", "You cannot view this gate pass")
                )

            if application.status != ApplicationStatus.approved or not application.credential:
                return Return.err(
                    Error("CREDENTIAL_NOT_ISSUED", "No gate pass has been issued yet")
                )

            return Return.ok(self.encoder.encode(simplify_payload(application.credential)))
