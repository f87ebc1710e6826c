"""
Role View DTOs

Read projections returned to each role's dashboard.
"""

from typing import List

from pydantic import BaseModel

from gatepass.app.use_cases.applications.dtos import ApplicationResponse


class VisitorViewResponse(BaseModel):
    """A visitor's own applications, newest first"""

    applications: List[ApplicationResponse]


class SecurityViewResponse(BaseModel):
    """Security desk partitions over all applications"""

    pending: List[ApplicationResponse]
    rejected: List[ApplicationResponse]
    processed: List[ApplicationResponse]


class DepartmentViewResponse(BaseModel):
    """One department's partitions"""

    department: str
    forwarded: List[ApplicationResponse]
    processed: List[ApplicationResponse]
