import pytest
from httpx import AsyncClient

async def _submit(client, headers, test_data, **overrides):
    body = test_data.get_copy("application")
    body.update(overrides)
    response = await client.post("/api/applications", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["id"]

@pytest.mark.asyncio
async def test_role_views(client: AsyncClient, login_as, test_data):
    """Each role sees its own projection of the same applications

    Given applications in every state across IT and HR
    Then security sees pending / rejected-at-security / processed
    And the HR agent sees only HR applications that were forwarded
    And each visitor sees only their own applications
    """
    visitor = await login_as("visitor")
    other = await login_as("other_visitor")
    security = await login_as("security")
    it_agent = await login_as("it_agent")
    hr_agent = await login_as("hr_agent")

    pending_it = await _submit(client, visitor, test_data)
    pending_hr = await _submit(client, other, test_data, department="HR")
    forwarded_hr = await _submit(client, visitor, test_data, department="HR")
    rejected_sec = await _submit(client, other, test_data, department="HR")
    approved_it = await _submit(client, other, test_data)

    async def decide(path, app_id, headers):
        response = await client.post(
            f"/api/{path.format(id=app_id)}", json={"comments": "c"}, headers=headers
        )
        assert response.status_code == 200, response.text

    await decide("security/applications/{id}/forward", forwarded_hr, security)
    await decide("security/applications/{id}/reject", rejected_sec, security)
    await decide("security/applications/{id}/forward", approved_it, security)
    await decide("department/applications/{id}/approve", approved_it, it_agent)

    # Security
    response = await client.get("/api/security/applications", headers=security)
    assert response.status_code == 200
    view = response.json()
    assert {a["id"] for a in view["pending"]} == {pending_it, pending_hr}
    assert [a["id"] for a in view["rejected"]] == [rejected_sec]
    assert {a["id"] for a in view["processed"]} == {forwarded_hr, approved_it}
    assert all(a["status"] == "pending" for a in view["pending"])

    # HR department
    response = await client.get("/api/department/applications", headers=hr_agent)
    assert response.status_code == 200
    view = response.json()
    assert view["department"] == "HR"
    assert [a["id"] for a in view["forwarded"]] == [forwarded_hr]
    assert [a["id"] for a in view["processed"]] == [rejected_sec]
    for app in view["forwarded"] + view["processed"]:
        assert app["department"] == "HR"
        assert app["status"] != "pending"

    # IT department
    response = await client.get("/api/department/applications", headers=it_agent)
    view = response.json()
    assert view["forwarded"] == []
    assert [a["id"] for a in view["processed"]] == [approved_it]

    # Visitors, newest first
    response = await client.get("/api/applications", headers=visitor)
    assert [a["id"] for a in response.json()["applications"]] == [
        forwarded_hr,
        pending_it,
    ]
    response = await client.get("/api/applications", headers=other)
    assert [a["id"] for a in response.json()["applications"]] == [
        approved_it,
        rejected_sec,
        pending_hr,
    ]

@pytest.mark.asyncio
async def test_views_are_role_gated(client: AsyncClient, login_as):
    visitor = await login_as("visitor")
    security = await login_as("security")

    response = await client.get("/api/security/applications", headers=visitor)
    assert response.status_code == 403

    response = await client.get("/api/department/applications", headers=security)
    assert response.status_code == 403

    response = await client.get("/api/applications", headers=security)
    assert response.status_code == 403
