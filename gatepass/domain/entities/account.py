"""
Account Entity

Represents a person interacting with the gate pass system.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from .enums import AccountRole


class Account(SQLModel, table=True):
    """
    Account entity - a visitor, security reviewer or department agent.

    Business Rules:
    - Email is unique across all accounts and stored lowercase
    - Exactly one role per account
    - department is required for department_agent and absent otherwise
    - Role and department never change after registration
    - Password stored as bcrypt hash
    - Profile edits never reach applications already submitted
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    name: str = Field(max_length=255)
    phone: str = Field(max_length=32)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: AccountRole = Field(nullable=False)
    department: Optional[str] = Field(default=None, max_length=255)

    # Profile, filled in after registration
    date_of_birth: Optional[str] = Field(default=None, max_length=32)
    gender: Optional[str] = Field(default=None, max_length=32)
    government_id_type: Optional[str] = Field(default=None, max_length=64)
    government_id_number: Optional[str] = Field(default=None, max_length=64)
    address: Optional[str] = Field(default=None, max_length=500)
    city: Optional[str] = Field(default=None, max_length=128)
    state: Optional[str] = Field(default=None, max_length=128)
    pincode: Optional[str] = Field(default=None, max_length=16)
    emergency_contact_name: Optional[str] = Field(default=None, max_length=255)
    emergency_contact_phone: Optional[str] = Field(default=None, max_length=32)
    emergency_contact_relation: Optional[str] = Field(default=None, max_length=64)
    employee_id: Optional[str] = Field(default=None, max_length=64)
    designation: Optional[str] = Field(default=None, max_length=128)
    company_name: Optional[str] = Field(default=None, max_length=255)
    profile_completed: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (Index("idx_account_role", "role"),)
