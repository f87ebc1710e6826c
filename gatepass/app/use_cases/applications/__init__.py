"""
Application Lifecycle Use Cases

Submission, the four stage decisions, and gate pass rendering.
"""

from .approve_application_use_case import ApproveApplicationUseCase
from .dtos import ApplicationResponse, SubmitApplicationCommand
from .forward_application_use_case import ForwardApplicationUseCase
from .reject_application_use_case import RejectApplicationUseCase
from .reject_at_security_use_case import RejectAtSecurityUseCase
from .render_credential_use_case import RenderCredentialUseCase
from .submit_application_use_case import SubmitApplicationUseCase

__all__ = [
    "SubmitApplicationUseCase",
    "ForwardApplicationUseCase",
    "RejectAtSecurityUseCase",
    "ApproveApplicationUseCase",
    "RejectApplicationUseCase",
    "RenderCredentialUseCase",
    "SubmitApplicationCommand",
    "ApplicationResponse",
]
