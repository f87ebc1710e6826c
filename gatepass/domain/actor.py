"""
Actor Context

The authenticated actor of one request, passed explicitly into use cases.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .entities.enums import AccountRole


class ActorContext(BaseModel):
    """Identity, role and department of the caller"""

    model_config = ConfigDict(frozen=True)

    account_id: UUID
    role: AccountRole
    name: str
    department: Optional[str] = None
