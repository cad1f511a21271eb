"""
tests.test_web

End-to-end page tests: portal app (ASGI) in front of the fake petition API.

Responsibilities:
- Route guard redirects, login/logout lifecycle, and the main page scenarios.
"""

from __future__ import annotations

import pytest
from fakes import ADMIN, CITIZEN, HEALTH_OFFICER, FakePetitionApi

from petition_portal.settings import Settings


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "path", ["/", "/dashboard", "/petitions", "/petitions/1", "/petitions/create"]
)
async def test_anonymous_visitor_is_sent_to_login(portal, path: str) -> None:
    async with portal() as client:
        r = await client.get(path)
    assert r.status_code == 303
    assert r.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_wrong_role_is_sent_to_dashboard(portal) -> None:
    async with portal(ADMIN) as client:
        r = await client.get("/petitions/create")
    assert r.status_code == 303
    assert r.headers["location"] == "/dashboard"


@pytest.mark.asyncio
async def test_tampered_cookie_counts_as_no_session(portal, settings: Settings) -> None:
    async with portal() as client:
        client.cookies.set(settings.session_cookie_name, "not-a-jwt")
        r = await client.get("/dashboard")
    assert r.status_code == 303
    assert r.headers["location"] == "/login"


@pytest.mark.asyncio
async def test_login_then_logout(portal, fake_api: FakePetitionApi, settings: Settings) -> None:
    async with portal() as client:
        r = await client.post("/login", data={"email": "asha@example.org", "password": "pw"})
        assert r.status_code == 303
        assert r.headers["location"] == "/dashboard"
        assert client.cookies.get(settings.session_cookie_name)

        r = await client.get("/dashboard")
        assert r.status_code == 200
        assert "Welcome, Asha!" in r.text
        (stats_request,) = fake_api.requests_to("GET", "/api/petitions/stats")
        assert stats_request.headers["Authorization"] == "Bearer tok-citizen"

        r = await client.get("/login")
        assert r.status_code == 303

        r = await client.post("/logout")
        assert r.status_code == 303
        assert r.headers["location"] == "/login"

        r = await client.get("/dashboard")
        assert r.status_code == 303


@pytest.mark.asyncio
async def test_login_failure_shows_server_message(portal) -> None:
    async with portal() as client:
        r = await client.post("/login", data={"email": "nobody@example.org", "password": "pw"})
    assert r.status_code == 401
    assert "Invalid credentials" in r.text


@pytest.mark.asyncio
async def test_dashboard_renders_admin_branch_only(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(title="Clinic hours", urgency=True)
    async with portal(ADMIN) as client:
        r = await client.get("/dashboard")
    assert r.status_code == 200
    assert "Pending Assignments" in r.text
    assert "My Petitions" not in r.text
    assert "Assigned Petitions" not in r.text


@pytest.mark.asyncio
async def test_list_passes_filters_through(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(title="Pothole on Main St", status="received", urgency=True)
    fake_api.add_petition(title="Park cleanup", status="resolved")
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions", params={"status": "received", "department": ""})
    assert r.status_code == 200
    assert "Pothole on Main St" in r.text
    assert "Park cleanup" not in r.text
    assert "Create New Petition" in r.text
    assert "badge-error" in r.text
    (request,) = fake_api.requests_to("GET", "/api/petitions")
    assert dict(request.url.params) == {"status": "received"}


@pytest.mark.asyncio
async def test_citizen_creates_petition_and_is_redirected(
    portal, fake_api: FakePetitionApi
) -> None:
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions/create")
        assert r.status_code == 200

        r = await client.post(
            "/petitions/create",
            data={"title": "Pothole on Main St", "description": "Large pothole causing damage"},
        )
    assert r.status_code == 201
    assert "Petition created successfully!" in r.text
    assert '<meta http-equiv="refresh" content="2;url=/petitions">' in r.text
    (request,) = fake_api.requests_to("POST", "/api/petitions")
    assert request.headers["Authorization"] == "Bearer tok-citizen"


@pytest.mark.asyncio
async def test_create_with_missing_fields_is_rejected(portal, fake_api: FakePetitionApi) -> None:
    async with portal(CITIZEN) as client:
        r = await client.post("/petitions/create", data={"title": "Only a title"})
    assert r.status_code == 400
    assert "Title and description are required" in r.text
    assert "http-equiv" not in r.text
    assert fake_api.requests_to("POST", "/api/petitions") == []


@pytest.mark.asyncio
async def test_admin_assigns_department(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="12", title="Clinic hours", status="received")
    async with portal(ADMIN) as client:
        r = await client.get("/petitions/12")
        assert "Assign Department" in r.text
        assert "Update Status" not in r.text

        r = await client.post("/petitions/12/assign", data={"department": "health"})
    assert r.status_code == 200
    assert "Department assigned" in r.text
    assert fake_api.petitions["12"]["status"] == "assigned"
    assert "badge-info" in r.text


@pytest.mark.asyncio
async def test_assign_without_department_sends_nothing(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="12", title="Clinic hours", status="received")
    async with portal(ADMIN) as client:
        r = await client.post("/petitions/12/assign", data={"department": ""})
    assert r.status_code == 400
    assert fake_api.requests_to("PUT", "/api/petitions/12/assign") == []


@pytest.mark.asyncio
async def test_officer_updates_status(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(
        id="3", title="Clinic hours", status="assigned", assignedDepartment="health"
    )
    async with portal(HEALTH_OFFICER) as client:
        r = await client.get("/petitions/3")
        assert "Update Status" in r.text
        assert "Assign Department" not in r.text

        r = await client.post(
            "/petitions/3/status", data={"status": "under_review", "remarks": "Site visit"}
        )
    assert r.status_code == 200
    assert "Site visit" in r.text
    assert fake_api.petitions["3"]["status"] == "under_review"


@pytest.mark.asyncio
async def test_citizen_cannot_post_status_update(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="3", status="assigned", assignedDepartment="health")
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions/3")
        assert "Update Status" not in r.text

        r = await client.post("/petitions/3/status", data={"status": "resolved"})
    assert r.status_code == 400
    assert fake_api.requests_to("PUT", "/api/petitions/3/status") == []


@pytest.mark.asyncio
async def test_missing_petition_shows_only_the_error(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="1", title="Some other petition")
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions/999")
    assert r.status_code == 200
    assert "Petition not found" in r.text
    assert "Petition Details" not in r.text.split("</title>", 1)[1]
    assert "Some other petition" not in r.text


@pytest.mark.asyncio
async def test_petition_id_from_the_url_stays_one_upstream_segment(
    portal, fake_api: FakePetitionApi
) -> None:
    fake_api.add_petition(id="1", title="Some other petition")
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions/%2E%2E")
        assert r.status_code == 200
        assert "Failed to fetch petition details" in r.text

        r = await client.get("/petitions/1%3Fstatus=resolved")
        assert r.status_code == 200
        assert "Petition not found" in r.text
        assert "Some other petition" not in r.text

    (request,) = fake_api.requests
    assert request.url.raw_path == b"/api/petitions/1%3Fstatus%3Dresolved"
    assert request.url.query == b""


@pytest.mark.asyncio
async def test_assign_button_waits_for_a_department(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="12", status="received")
    fake_api.add_petition(id="13", status="assigned", assignedDepartment="housing")
    async with portal(ADMIN) as client:
        unassigned = await client.get("/petitions/12")
        assigned = await client.get("/petitions/13")
    assert 'id="assign-submit" disabled' in unassigned.text
    assert 'id="assign-submit">' in assigned.text


@pytest.mark.asyncio
async def test_detail_shows_urgent_and_duplicate_badges(
    portal, fake_api: FakePetitionApi
) -> None:
    fake_api.add_petition(id="8", urgency=True, isDuplicate=True)
    async with portal(CITIZEN) as client:
        r = await client.get("/petitions/8")
    assert '<span class="badge badge-error">Urgent</span>' in r.text
    assert '<span class="badge badge-secondary">Duplicate</span>' in r.text


@pytest.mark.asyncio
async def test_assign_whose_reload_fails_answers_400(portal, fake_api: FakePetitionApi) -> None:
    fake_api.add_petition(id="12", status="received")
    fake_api.fail(
        "GET", "/api/petitions/12", 503, {}, after=("PUT", "/api/petitions/12/assign")
    )
    async with portal(ADMIN) as client:
        r = await client.post("/petitions/12/assign", data={"department": "health"})
    assert r.status_code == 400
    assert "Department assigned" not in r.text
    assert "Failed to fetch petition details" in r.text
    assert fake_api.petitions["12"]["assignedDepartment"] == "health"
