"""
Department Use Cases

Listing departments for the request form and seeding them at startup.
"""

import logging
from typing import Iterable, List

from pydantic import BaseModel

from gatepass.libs.result import Result, Return
from gatepass.app.services.unit_of_work import UnitOfWork
from gatepass.domain.entities import Department

logger = logging.getLogger(__name__)


class DepartmentListResponse(BaseModel):
    departments: List[str]


class ListDepartmentsUseCase:
    """Department names in ascending order"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DepartmentListResponse]:
        async with self.uow:
            departments = await self.uow.departments.list_all()
            return Return.ok(
                DepartmentListResponse(departments=sorted(d.name for d in departments))
            )


class SeedDepartmentsUseCase:
    """Creates the configured departments when none exist yet"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, names: Iterable[str]) -> Result[int]:
        async with self.uow:
            if await self.uow.departments.list_all():
                return Return.ok(0)

            created = 0
            for name in dict.fromkeys(n.strip() for n in names if n.strip()):
                await self.uow.departments.create(Department(name=name))
                created += 1
            await self.uow.commit()

        logger.info("Seeded %d departments", created)
        return Return.ok(created)
