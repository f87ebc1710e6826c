"""
Application Entity

One visit request and its approval trail.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import ApplicationStatus


class Application(SQLModel, table=True):
    """
    Application entity - a visitor's request to enter the premises.

    Business Rules:
    - Created by a visitor in status=pending
    - pending -> forwarded | rejected (security stage)
    - forwarded -> approved | rejected (department stage)
    - credential is set if and only if status=approved
    - visitor_name/email/phone are copied at submission and never updated
    - visit_date, visit_time and duration are free-form strings
    """

    __tablename__ = "applications"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    owner_id: UUID = Field(foreign_key="accounts.id", nullable=False, index=True)

    # Snapshot of the visitor at submission time
    visitor_name: str = Field(max_length=255)
    visitor_email: str = Field(max_length=255)
    visitor_phone: str = Field(max_length=32)

    purpose: str = Field(sa_column=Column(Text, nullable=False))
    department: str = Field(max_length=255, index=True)
    visit_date: str = Field(max_length=64)
    visit_time: str = Field(max_length=64)
    duration: str = Field(max_length=64)
    vehicle_number: Optional[str] = Field(default=None, max_length=64)

    status: ApplicationStatus = Field(default=ApplicationStatus.pending)

    security_comment: Optional[str] = Field(default=None, sa_column=Column(Text))
    department_comment: Optional[str] = Field(default=None, sa_column=Column(Text))
    approved_by: Optional[str] = Field(default=None, max_length=255)

    # Serialized GATE_PASS payload
    credential: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_application_status", "status"),
        Index("idx_application_department_status", "department", "status"),
        Index("idx_application_created_at", "created_at"),
    )
