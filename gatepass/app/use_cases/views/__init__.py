"""
Role View Use Cases

Read-side projections of the application collection per role.
"""

from .department_view_use_case import DepartmentViewUseCase
from .dtos import DepartmentViewResponse, SecurityViewResponse, VisitorViewResponse
from .security_view_use_case import SecurityViewUseCase
from .visitor_view_use_case import VisitorViewUseCase

__all__ = [
    "VisitorViewUseCase",
    "SecurityViewUseCase",
    "DepartmentViewUseCase",
    "VisitorViewResponse",
    "SecurityViewResponse",
    "DepartmentViewResponse",
]
