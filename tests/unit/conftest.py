from uuid import uuid4

import pytest
from unittest.mock import AsyncMock, MagicMock

from gatepass.domain.actor import ActorContext
from gatepass.domain.entities import AccountRole, Application, ApplicationStatus


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock()
    uow.accounts.get_by_email = AsyncMock()
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)

    uow.applications = MagicMock()
    uow.applications.get_by_id = AsyncMock()
    uow.applications.create = AsyncMock(side_effect=lambda application: application)
    uow.applications.list_all = AsyncMock(return_value=[])
    uow.applications.list_by_owner = AsyncMock(return_value=[])
    uow.applications.list_by_department = AsyncMock(return_value=[])
    uow.applications.transition = AsyncMock()

    uow.departments = MagicMock()
    uow.departments.list_all = AsyncMock(return_value=[])
    uow.departments.create = AsyncMock(side_effect=lambda department: department)
    return uow


@pytest.fixture
def visitor():
    return ActorContext(account_id=uuid4(), role=AccountRole.visitor, name="Demo User")


@pytest.fixture
def security_actor():
    return ActorContext(
        account_id=uuid4(), role=AccountRole.security, name="Security Admin"
    )


@pytest.fixture
def it_agent():
    return ActorContext(
        account_id=uuid4(),
        role=AccountRole.department_agent,
        name="IT Admin",
        department="IT",
    )


@pytest.fixture
def hr_agent():
    return ActorContext(
        account_id=uuid4(),
        role=AccountRole.department_agent,
        name="HR Admin",
        department="HR",
    )


@pytest.fixture
def make_application():
    def _make(**overrides):
        fields = dict(
            id=uuid4(),
            owner_id=uuid4(),
            visitor_name="Demo User",
            visitor_email="user@example.com",
            visitor_phone="+1234567890",
            purpose="Server maintenance",
            department="IT",
            visit_date="2025-06-01",
            visit_time="10:00",
            duration="2 hours",
            status=ApplicationStatus.pending,
        )
        fields.update(overrides)
        return Application(**fields)

    return _make


@pytest.fixture
def apply_transition():
    """Builds a side_effect for uow.applications.transition that mimics the conditional update"""

    def _factory(application):
        async def _transition(application_id, expected_status, values):
            if application.status != expected_status:
                return None
            for key, value in values.items():
                setattr(application, key, value)
            return application

        return _transition

    return _factory
