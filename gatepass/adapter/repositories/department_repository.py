from typing import List

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.app.repositories.department_repository import IDepartmentRepository
from gatepass.domain.entities import Department


class DepartmentRepository(IDepartmentRepository):
    """Department repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[Department]:
        """All departments ordered by name"""
        stmt = select(Department).order_by(Department.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, department: Department) -> Department:
        """Create a new department"""
        self.session.add(department)
        await self.session.flush()
        await self.session.refresh(department)
        return department
