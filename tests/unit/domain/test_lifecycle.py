import pytest

from gatepass.domain.entities import ApplicationStatus
from gatepass.domain.lifecycle import (
    TERMINAL_STATUSES,
    TRANSITIONS,
    Transition,
    authorize,
    check_source_state,
    target_status,
)


def test_transition_table_is_monotonic():
    """No transition leaves a terminal state or produces pending"""
    for rule in TRANSITIONS.values():
        assert rule.source not in TERMINAL_STATUSES
        assert rule.target != ApplicationStatus.pending
        assert rule.source != rule.target


def test_pending_cannot_be_approved_directly():
    sources = {
        rule.source
        for t, rule in TRANSITIONS.items()
        if rule.target == ApplicationStatus.approved
    }
    assert sources == {ApplicationStatus.forwarded}


def test_targets():
    assert target_status(Transition.security_forward) == ApplicationStatus.forwarded
    assert target_status(Transition.security_reject) == ApplicationStatus.rejected
    assert target_status(Transition.department_approve) == ApplicationStatus.approved
    assert target_status(Transition.department_reject) == ApplicationStatus.rejected


@pytest.mark.parametrize(
    "transition", [Transition.security_forward, Transition.security_reject]
)
def test_security_may_act_on_any_department(security_actor, make_application, transition):
    application = make_application(department="Finance")
    assert authorize(security_actor, application, transition) is None


def test_visitor_cannot_forward(visitor, make_application):
    error = authorize(visitor, make_application(), Transition.security_forward)
    assert error.code == "FORBIDDEN"


def test_department_agent_cannot_act_at_security_stage(it_agent, make_application):
    error = authorize(it_agent, make_application(), Transition.security_reject)
    assert error.code == "FORBIDDEN"


def test_agent_of_other_department_cannot_approve(hr_agent, make_application):
    application = make_application(status=ApplicationStatus.forwarded)
    error = authorize(hr_agent, application, Transition.department_approve)
    assert error.code == "FORBIDDEN"


def test_agent_of_same_department_can_decide(it_agent, make_application):
    application = make_application(status=ApplicationStatus.forwarded)
    assert authorize(it_agent, application, Transition.department_approve) is None
    assert authorize(it_agent, application, Transition.department_reject) is None


def test_security_cannot_approve(security_actor, make_application):
    application = make_application(status=ApplicationStatus.forwarded)
    error = authorize(security_actor, application, Transition.department_approve)
    assert error.code == "FORBIDDEN"


@pytest.mark.parametrize(
    "status,transition",
    [
        (ApplicationStatus.pending, Transition.department_approve),
        (ApplicationStatus.pending, Transition.department_reject),
        (ApplicationStatus.forwarded, Transition.security_forward),
        (ApplicationStatus.approved, Transition.department_approve),
        (ApplicationStatus.rejected, Transition.security_reject),
        (ApplicationStatus.rejected, Transition.department_reject),
    ],
)
def test_wrong_source_state_is_invalid(make_application, status, transition):
    error = check_source_state(make_application(status=status), transition)
    assert error.code == "INVALID_STATE"


def test_matching_source_state(make_application):
    assert check_source_state(make_application(), Transition.security_forward) is None
    forwarded = make_application(status=ApplicationStatus.forwarded)
    assert check_source_state(forwarded, Transition.department_approve) is None
