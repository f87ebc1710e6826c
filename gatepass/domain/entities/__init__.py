"""
Gate Pass Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import AccountRole, ApplicationStatus

# Export all entities
from .account import Account
from .application import Application
from .department import Department

__all__ = [
    # Enums
    "AccountRole",
    "ApplicationStatus",
    # Entities
    "Account",
    "Application",
    "Department",
]
