"""
Application Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the application lifecycle.
Provides type safety and clear contracts between layers.
"""

from typing import List, Optional

from pydantic import BaseModel

from gatepass.domain.entities import Application


# ============================================================================
# Command DTOs
# ============================================================================


class SubmitApplicationCommand(BaseModel):
    """Visit request fields supplied by the visitor"""

    purpose: str
    department: str
    visit_date: str
    visit_time: str
    duration: str
    vehicle_number: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ApplicationResponse(BaseModel):
    """Application as returned to any role"""

    id: str
    owner_id: str
    visitor_name: str
    visitor_email: str
    visitor_phone: str
    purpose: str
    department: str
    visit_date: str
    visit_time: str
    duration: str
    vehicle_number: Optional[str] = None
    status: str
    security_comment: Optional[str] = None
    department_comment: Optional[str] = None
    approved_by: Optional[str] = None
    credential: Optional[str] = None
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=str(application.id),
            owner_id=str(application.owner_id),
            visitor_name=application.visitor_name,
            visitor_email=application.visitor_email,
            visitor_phone=application.visitor_phone,
            purpose=application.purpose,
            department=application.department,
            visit_date=application.visit_date,
            visit_time=application.visit_time,
            duration=application.duration,
            vehicle_number=application.vehicle_number,
            status=application.status.value,
            security_comment=application.security_comment,
            department_comment=application.department_comment,
            approved_by=application.approved_by,
            credential=application.credential,
            created_at=application.created_at.isoformat() + "Z",
            updated_at=application.updated_at.isoformat() + "Z",
        )


def to_responses(applications: List[Application]) -> List[ApplicationResponse]:
    return [ApplicationResponse.from_entity(a) for a in applications]
