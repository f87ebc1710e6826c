from .list_departments_use_case import (
    DepartmentListResponse,
    ListDepartmentsUseCase,
    SeedDepartmentsUseCase,
)

__all__ = ["ListDepartmentsUseCase", "SeedDepartmentsUseCase", "DepartmentListResponse"]
