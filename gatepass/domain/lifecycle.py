"""
Application Lifecycle

Transition table and authorization guard for visit applications.

    pending --security_forward--> forwarded --department_approve--> approved
       |                              |
       +--security_reject--> rejected <--department_reject--+
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from gatepass.libs.result import Error

from .actor import ActorContext
from .entities.application import Application
from .entities.enums import AccountRole, ApplicationStatus


class Transition(str, Enum):
    """Events that move an application between states"""

    security_forward = "security_forward"
    security_reject = "security_reject"
    department_approve = "department_approve"
    department_reject = "department_reject"


@dataclass(frozen=True)
class TransitionRule:
    source: ApplicationStatus
    target: ApplicationStatus
    role: AccountRole
    same_department: bool = False


TRANSITIONS: Dict[Transition, TransitionRule] = {
    Transition.security_forward: TransitionRule(
        ApplicationStatus.pending, ApplicationStatus.forwarded, AccountRole.security
    ),
    Transition.security_reject: TransitionRule(
        ApplicationStatus.pending, ApplicationStatus.rejected, AccountRole.security
    ),
    Transition.department_approve: TransitionRule(
        ApplicationStatus.forwarded,
        ApplicationStatus.approved,
        AccountRole.department_agent,
        same_department=True,
    ),
    Transition.department_reject: TransitionRule(
        ApplicationStatus.forwarded,
        ApplicationStatus.rejected,
        AccountRole.department_agent,
        same_department=True,
    ),
}

TERMINAL_STATUSES = frozenset({ApplicationStatus.approved, ApplicationStatus.rejected})


def authorize(
    actor: ActorContext, application: Application, transition: Transition
) -> Optional[Error]:
    """
    Check whether actor may apply transition to application.

    Returns:
        None when allowed, otherwise a FORBIDDEN Error
    """
    rule = TRANSITIONS[transition]

    if actor.role != rule.role:
        return Error(
            "FORBIDDEN",
            f"Role {actor.role.value} cannot perform {transition.value}",
        )

    if rule.same_department and actor.department != application.department:
        return Error(
            "FORBIDDEN",
            "Application belongs to a different department",
        )

    return None


def check_source_state(
    application: Application, transition: Transition
) -> Optional[Error]:
    """Return INVALID_STATE unless application sits in the transition's source state"""
    rule = TRANSITIONS[transition]
    if application.status != rule.source:
        return Error(
            "INVALID_STATE",
            f"Application is {application.status.value}, "
            f"expected {rule.source.value} for {transition.value}",
        )
    return None


def target_status(transition: Transition) -> ApplicationStatus:
    return TRANSITIONS[transition].target
