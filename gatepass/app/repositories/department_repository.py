from abc import ABC, abstractmethod
from typing import List

from gatepass.domain.entities import Department


class IDepartmentRepository(ABC):
    """Department repository interface - application layer"""

    @abstractmethod
    async def list_all(self) -> List[Department]:
        """All departments ordered by name"""
        pass

    @abstractmethod
    async def create(self, department: Department) -> Department:
        """Create a new department"""
        pass
