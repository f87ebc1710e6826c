from sqlmodel.ext.asyncio.session import AsyncSession

from gatepass.adapter.repositories.account_repository import AccountRepository
from gatepass.adapter.repositories.application_repository import ApplicationRepository
from gatepass.adapter.repositories.department_repository import DepartmentRepository
from gatepass.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.accounts = AccountRepository(self.session)
        self.applications = ApplicationRepository(self.session)
        self.departments = DepartmentRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
