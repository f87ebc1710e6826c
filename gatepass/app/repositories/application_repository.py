from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from gatepass.domain.entities import Application, ApplicationStatus


class IApplicationRepository(ABC):
    """Application repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, application_id: UUID) -> Optional[Application]:
        """Get application by ID"""
        pass

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """Create a new application"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Application]:
        """All applications, newest first"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: UUID) -> List[Application]:
        """Applications submitted by one visitor, newest first"""
        pass

    @abstractmethod
    async def list_by_department(self, department: str) -> List[Application]:
        """Applications targeting one department (any status), newest first"""
        pass

    @abstractmethod
    async def transition(
        self,
        application_id: UUID,
        expected_status: ApplicationStatus,
        values: Dict[str, Any],
    ) -> Optional[Application]:
        """
        Apply values only if the application is still in expected_status.

        Returns the updated application, or None when no row matched.
        """
        pass
