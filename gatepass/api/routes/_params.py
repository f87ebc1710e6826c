from uuid import UUID

from fastapi import status
from pydantic import BaseModel, Field

from gatepass.libs.result import Error
from gatepass.api.error import ClientError


class DecisionRequest(BaseModel):
    """Comment attached to a security or department decision"""

    comments: str = Field("", max_length=2000, description="Reviewer comment")


def parse_application_id(application_id: str) -> UUID:
    try:
        return UUID(application_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_APPLICATION_ID", "Invalid application ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
