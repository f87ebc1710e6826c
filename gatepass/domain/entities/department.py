"""
Department Entity

Named destination of a visit.
"""

from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Department(SQLModel, table=True):
    """Department entity - a flat, unique department name"""

    __tablename__ = "departments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=255)
