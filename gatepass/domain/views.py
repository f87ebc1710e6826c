"""
Role views over the application collection.

Pure filters; callers pass applications already ordered newest first
and each partition keeps that order.
"""

from typing import Dict, Iterable, List
from uuid import UUID

from .entities.application import Application
from .entities.enums import ApplicationStatus


def visitor_applications(
    applications: Iterable[Application], owner_id: UUID
) -> List[Application]:
    return [a for a in applications if a.owner_id == owner_id]


def security_partitions(
    applications: Iterable[Application],
) -> Dict[str, List[Application]]:
    """
    Split all applications for the security desk.

    - pending: awaiting triage
    - rejected: rejected at the security stage (no department decision)
    - processed: forwarded or approved
    """
    partitions: Dict[str, List[Application]] = {
        "pending": [],
        "rejected": [],
        "processed": [],
    }
    for app in applications:
        if app.status == ApplicationStatus.pending:
            partitions["pending"].append(app)
        elif app.status == ApplicationStatus.rejected and app.approved_by is None:
            partitions["rejected"].append(app)
        elif app.status in (ApplicationStatus.forwarded, ApplicationStatus.approved):
            partitions["processed"].append(app)
    return partitions


def department_partitions(
    applications: Iterable[Application], department: str
) -> Dict[str, List[Application]]:
    """
    Split one department's applications.

    - forwarded: awaiting the department's decision
    - processed: approved or rejected

    Pending applications are not visible to departments.
    """
    partitions: Dict[str, List[Application]] = {"forwarded": [], "processed": []}
    for app in applications:
        if app.department != department:
            continue
        if app.status == ApplicationStatus.forwarded:
            partitions["forwarded"].append(app)
        elif app.status in (ApplicationStatus.approved, ApplicationStatus.rejected):
            partitions["processed"].append(app)
    return partitions
