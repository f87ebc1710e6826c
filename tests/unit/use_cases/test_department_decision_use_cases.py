import json
from datetime import datetime, timedelta

import pytest

from gatepass.app.use_cases.applications import (
    ApproveApplicationUseCase,
    ForwardApplicationUseCase,
    RejectApplicationUseCase,
)
from gatepass.domain.entities import ApplicationStatus

COMPANY = "SAIL - Steel Authority of India Limited"
ISO_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def _approve_use_case(uow):
    return ApproveApplicationUseCase(uow, company_name=COMPANY)


@pytest.mark.asyncio
async def test_approve_forwarded_application(
    mock_uow, it_agent, make_application, apply_transition
):
    """Scenario 3: approval issues the credential"""
    application = make_application(
        status=ApplicationStatus.forwarded, security_comment="Checked ID"
    )
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    result = await _approve_use_case(mock_uow).execute(
        application.id, "Approved for server room", it_agent
    )

    assert result.is_ok()
    app = result.value
    assert app.status == "approved"
    assert app.department_comment == "Approved for server room"
    assert app.approved_by == "IT Admin"
    assert app.security_comment == "Checked ID"

    payload = json.loads(app.credential)
    assert payload["type"] == "GATE_PASS"
    assert payload["id"] == str(application.id)
    assert payload["department"] == "IT"
    assert payload["approvedBy"] == "IT Admin"
    assert payload["companyName"] == COMPANY
    assert payload["approvedAt"].endswith("Z")
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_approve_uses_configured_validity(
    mock_uow, it_agent, make_application, apply_transition
):
    application = make_application(status=ApplicationStatus.forwarded)
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    use_case = ApproveApplicationUseCase(
        mock_uow, company_name=COMPANY, validity=timedelta(hours=2)
    )
    result = await use_case.execute(application.id, "", it_agent)

    payload = json.loads(result.value.credential)
    approved_at = datetime.strptime(payload["approvedAt"], ISO_FORMAT)
    valid_until = datetime.strptime(payload["validUntil"], ISO_FORMAT)
    assert valid_until - approved_at == timedelta(hours=2)


@pytest.mark.asyncio
async def test_approve_pending_application_is_invalid_state(
    mock_uow, it_agent, make_application
):
    """Scenario 5: approving a never-forwarded application fails without changes"""
    application = make_application(status=ApplicationStatus.pending)
    mock_uow.applications.get_by_id.return_value = application

    result = await _approve_use_case(mock_uow).execute(application.id, "ok", it_agent)

    assert result.is_err()
    assert result.error.code == "INVALID_STATE"
    assert application.status == ApplicationStatus.pending
    assert application.credential is None
    mock_uow.applications.transition.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_second_approve_is_rejected(mock_uow, it_agent, make_application):
    application = make_application(
        status=ApplicationStatus.approved, credential='{"type":"GATE_PASS"}'
    )
    mock_uow.applications.get_by_id.return_value = application

    result = await _approve_use_case(mock_uow).execute(application.id, "again", it_agent)

    assert result.is_err()
    assert result.error.code == "INVALID_STATE"
    assert application.credential == '{"type":"GATE_PASS"}'


@pytest.mark.asyncio
async def test_agent_of_other_department_cannot_approve(
    mock_uow, hr_agent, make_application
):
    application = make_application(status=ApplicationStatus.forwarded, department="IT")
    mock_uow.applications.get_by_id.return_value = application

    result = await _approve_use_case(mock_uow).execute(application.id, "ok", hr_agent)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_uow.applications.transition.assert_not_called()


@pytest.mark.asyncio
async def test_department_reject(mock_uow, it_agent, make_application, apply_transition):
    application = make_application(status=ApplicationStatus.forwarded)
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    result = await RejectApplicationUseCase(mock_uow).execute(
        application.id, "No slot available", it_agent
    )

    assert result.is_ok()
    assert result.value.status == "rejected"
    assert result.value.department_comment == "No slot available"
    assert result.value.approved_by == "IT Admin"
    assert result.value.credential is None


@pytest.mark.asyncio
async def test_department_reject_pending_is_invalid_state(
    mock_uow, it_agent, make_application
):
    application = make_application(status=ApplicationStatus.pending)
    mock_uow.applications.get_by_id.return_value = application

    result = await RejectApplicationUseCase(mock_uow).execute(
        application.id, "no", it_agent
    )

    assert result.is_err()
    assert result.error.code == "INVALID_STATE"


@pytest.mark.asyncio
async def test_credential_only_when_approved(
    mock_uow, security_actor, it_agent, make_application, apply_transition
):
    """credential present iff status == approved, after every step"""
    application = make_application()
    mock_uow.applications.get_by_id.return_value = application
    mock_uow.applications.transition.side_effect = apply_transition(application)

    steps = [
        (ForwardApplicationUseCase(mock_uow), security_actor),
        (_approve_use_case(mock_uow), it_agent),
    ]
    for use_case, actor in steps:
        result = await use_case.execute(application.id, "", actor)
        assert result.is_ok()
        assert (result.value.credential is not None) == (result.value.status == "approved")
