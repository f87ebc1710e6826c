"""
Gate Pass Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class AccountRole(str, Enum):
    """Role an account plays in the approval workflow"""

    visitor = "visitor"
    security = "security"
    department_agent = "department_agent"


class ApplicationStatus(str, Enum):
    """Lifecycle status of a visit application"""

    pending = "pending"
    forwarded = "forwarded"
    approved = "approved"
    rejected = "rejected"
