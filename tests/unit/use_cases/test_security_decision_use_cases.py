from uuid import uuid4

import pytest

from gatepass.app.use_cases.applications import (
    ForwardApplicationUseCase,
    RejectAtSecurityUseCase,
)
from gatepass.domain.entities import ApplicationStatus


@pytest.mark.asyncio
async def test_forward_pending_application(
    mock_uow, security_actor, make_application, apply_transition
):
    """Scenario 2: forward sets status and security comment, no credential"""
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    result = await ForwardApplicationUseCase(mock_uow).execute(
        application.id, "Checked ID", security_actor
    )

    assert result.is_ok()
    assert result.value.status == "forwarded"
    assert result.value.security_comment == "Checked ID"
    assert result.value.credential is None
    args = mock_uow.applications.transition.call_args.args
    assert args[1] == ApplicationStatus.pending
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_forward_allows_empty_comment(
    mock_uow, security_actor, make_application, apply_transition
):
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    result = await ForwardApplicationUseCase(mock_uow).execute(
        application.id, "", security_actor
    )

    assert result.is_ok()
    assert result.value.security_comment == ""


@pytest.mark.asyncio
async def test_reject_at_security(
    mock_uow, security_actor, make_application, apply_transition
):
    """Scenario 4: rejection at security leaves department fields empty"""
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    result = await RejectAtSecurityUseCase(mock_uow).execute(
        application.id, "Incomplete purpose", security_actor
    )

    assert result.is_ok()
    assert result.value.status == "rejected"
    assert result.value.security_comment == "Incomplete purpose"
    assert result.value.department_comment is None
    assert result.value.approved_by is None
    assert result.value.credential is None


@pytest.mark.asyncio
async def test_forward_missing_application(mock_uow, security_actor):
    mock_uow.applications.get_by_id.return_value = None

    result = await ForwardApplicationUseCase(mock_uow).execute(
        uuid4(), "Checked ID", security_actor
    )

    assert result.is_err()
    assert result.error.code == "APPLICATION_NOT_FOUND"
    mock_uow.applications.transition.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_forward_already_forwarded(mock_uow, security_actor, make_application):
    application = make_application(status=ApplicationStatus.forwarded)
    mock_uow.applications.get_by_id.return_value = application

    result = await ForwardApplicationUseCase(mock_uow).execute(
        application.id, "again", security_actor
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATE"
    mock_uow.applications.transition.assert_not_called()


@pytest.mark.asyncio
async def test_visitor_cannot_reject_at_security(mock_uow, visitor, make_application):
    application = make_application(owner_id=visitor.account_id)
    mock_uow.applications.get_by_id.return_value = application

    result = await RejectAtSecurityUseCase(mock_uow).execute(
        application.id, "nope", visitor
    )

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    assert application.status == ApplicationStatus.pending
    mock_uow.applications.transition.assert_not_called()


@pytest.mark.asyncio
async def test_concurrent_decision_reports_update_failed(
    mock_uow, security_actor, make_application
):
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.return_value = None

    result = await ForwardApplicationUseCase(mock_uow).execute(
        application.id, "Checked ID", security_actor
    )

    assert result.is_err()
    assert result.error.code == "UPDATE_FAILED"
    mock_uow.commit.assert_not_called()
