from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.application_repository import IApplicationRepository
from gatepass.domain.entities import Application, ApplicationStatus


class ApplicationRepository(IApplicationRepository):
    """Application repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        stmt = select(Application).where(Application.id == application_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, application: Application) -> Application:
        """Create a new application"""
        self.session.add(application)
        await self.session.flush()
        await self.session.refresh(application)
        return application

    async def list_all(self) -> List[Application]:
        """All applications, newest first"""
        stmt = select(Application).order_by(Application.created_at.desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_owner(self, owner_id: UUID) -> List[Application]:
        """Applications submitted by one visitor, newest first"""
        stmt = (
            select(Application)
            .where(Application.owner_id == owner_id)
            .order_by(Application.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_department(self, department: str) -> List[Application]:
        """Applications targeting one department (any status), newest first"""
        stmt = (
            select(Application)
            .where(Application.department == department)
            .order_by(Application.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def transition(
        self,
        application_id: UUID,
        expected_status: ApplicationStatus,
        values: Dict[str, Any],
    ) -> Optional[Application]:
        """Conditional update: only applies while status == expected_status"""
        stmt = (
            update(Application)
            .where(
                Application.id == application_id,
                Application.status == expected_status,
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount != 1:
            return None

        application = await self.get_by_id(application_id)
        if application is not None:
            await self.session.refresh(application)
        return application
