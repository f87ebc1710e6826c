from abc import ABC, abstractmethod

from gatepass.app.repositories.account_repository import IAccountRepository
from gatepass.app.repositories.application_repository import IApplicationRepository
from gatepass.app.repositories.department_repository import IDepartmentRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    applications: IApplicationRepository
    departments: IDepartmentRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
