import logging
from typing import Iterable
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from gatepass.adapter.services.qr_code_encoder import QrCodeEncoder
from gatepass.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gatepass.api.utils.jwt import verify_jwt
from gatepass.app.services.credential_encoder import CredentialEncoder
from gatepass.app.use_cases.departments import SeedDepartmentsUseCase
from gatepass.domain.actor import ActorContext

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def init_database(departments: Iterable[str]):
    """Create tables and seed the department catalogue"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await SeedDepartmentsUseCase(SqlAlchemyUnitOfWork(session)).execute(departments)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_credential_encoder() -> CredentialEncoder:
    return QrCodeEncoder()


async def get_current_actor(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> ActorContext:
    """
    Dependency to extract the request-scoped actor from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        ActorContext with account_id, role, name and department

    Raises:
        HTTPException: 401 if token is invalid, expired or malformed
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        return ActorContext(
            account_id=UUID(payload["account_id"]),
            role=payload["role"],
            name=payload["name"],
            department=payload.get("department"),
        )
    except (KeyError, ValueError, ValidationError):
        logger.warning("Rejected token with malformed claims")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )
