"""
Shared lifecycle transition flow.

Every stage decision is the same read-check-write sequence:
load by id, authorize the actor, check the source state, then a
conditional update keyed on the expected status.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict
from uuid import UUID

from gatepass.libs.result import Error, Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import Application
from gatepass.domain.lifecycle import (
    TRANSITIONS,
    Transition,
    authorize,
    check_source_state,
)

from .dtos import ApplicationResponse

logger = logging.getLogger(__name__)


class TransitionUseCase:
    """Base class for the four stage decisions"""

    transition: Transition

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _apply(
        self,
        application_id: UUID,
        actor: ActorContext,
        build_values: Callable[[Application, datetime], Dict[str, Any]],
    ) -> Result[ApplicationResponse]:
        rule = TRANSITIONS[self.transition]

        async with self.uow:
            application = await self.uow.applications.get_by_id(application_id)
            if application is None:
                return Return.err(
                    Error("APPLICATION_NOT_FOUND", "Application not found")
                )

            error = authorize(actor, application, self.transition)
            if error is None:
                error = check_source_state(application, self.transition)
            if error is not None:
                logger.warning(
                    "Refused %s on application %s by %s: %s",
                    self.transition.value,
                    application_id,
                    actor.account_id,
                    error.code,
                )
                return Return.err(error)

            now = datetime.utcnow()
            values = build_values(application, now)
            values["status"] = rule.target
            values["updated_at"] = now

            updated = await self.uow.applications.transition(
                application_id, rule.source, values
            )
            if updated is None:
                logger.warning(
                    "Concurrent update lost %s on application %s",
                    self.transition.value,
                    application_id,
                )
                return Return.err(
                    Error(
                        "UPDATE_FAILED",
                        "Application was changed by another request, reload and retry",
                    )
                )

            await self.uow.commit()

            logger.info(
                "Application %s %s -> %s by %s",
                application_id,
                rule.source.value,
                rule.target.value,
                actor.account_id,
            )

            return Return.ok(ApplicationResponse.from_entity(updated))
