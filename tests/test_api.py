"""
End-to-end tests for the HTTP surface using the in-memory backend.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from homecare.infrastructure.memory.auth_backend import MemoryAuthBackend
from homecare.infrastructure.memory.profile_store import MemoryProfileStore
from homecare.infrastructure.memory.service_area_store import MemoryServiceAreaStore
from homecare.main import create_app
from homecare.wiring.dependencies import Backend, build_container

PASSWORD = "secret123"


def _client() -> TestClient:
    backend = Backend(
        auth=MemoryAuthBackend(),
        profiles=MemoryProfileStore(),
        service_areas=MemoryServiceAreaStore(),
    )
    return TestClient(create_app(build_container(backend=backend)))


def _register_and_sign_in(client: TestClient, email: str, role: str) -> dict:
    resp = client.post("/auth/sign-up", json={"email": email, "password": PASSWORD, "role": role})
    assert resp.status_code == 200, resp.text
    user_id = resp.json()["user"]["id"]

    resp = client.post(
        "/registration",
        json={
            "user_id": user_id,
            "email": email,
            "role": role,
            "name": "Meena",
            "phone": "9876543210",
            "address": "12 Anna Salai, Chennai",
        },
    )
    assert resp.status_code == 200, resp.text

    resp = client.post("/auth/sign-in", json={"email": email, "password": PASSWORD})
    assert resp.status_code == 200, resp.text
    return resp.json()


def test_health():
    with _client() as client:
        assert client.get("/health").json() == {"status": "ok"}


def test_initial_state_is_unauthenticated():
    with _client() as client:
        state = client.get("/auth/state").json()
        assert state["status"] == "unauthenticated"
        assert state["user"] is None
        assert state["loading"] is False


def test_content_in_both_languages():
    with _client() as client:
        en = client.get("/content", params={"lang": "en"}).json()
        ta = client.get("/content", params={"lang": "ta"}).json()

        assert en["toggle"] == "ta"
        assert ta["toggle"] == "en"
        assert en["content"]["nav"]["home"] == "HOME"
        assert ta["content"]["nav"]["home"] == "முகப்பு"

        services = client.get("/services", params={"lang": "en"}).json()
        assert [s["id"] for s in services] == ["home-care", "rehabilitation", "primary-care", "medical-equipment"]
        assert services[0]["sub_services"][0]["price"] == 500

        assert client.get("/content", params={"lang": "fr"}).status_code == 422


def test_nurse_flow_reaches_dashboard():
    with _client() as client:
        state = _register_and_sign_in(client, "meena@example.com", "nurse")

        assert state["status"] == "authenticated_with_profile"
        assert state["dashboard"] == "/dashboard/nurse"
        assert state["profile"]["role"] == "nurse"

        dashboard = client.get("/dashboard/nurse").json()
        assert dashboard["welcome"] == "Welcome, Meena"
        assert "areas" in [tab["id"] for tab in dashboard["tabs"]]
        assert client.get("/dashboard/patient").status_code == 403


def test_dashboard_requires_sign_in():
    with _client() as client:
        assert client.get("/dashboard/patient").status_code == 401
        assert client.get("/dashboard/nurse/service-areas").status_code == 401


def test_sign_in_with_bad_password():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")
        client.post("/auth/sign-out")

        resp = client.post("/auth/sign-in", json={"email": "meena@example.com", "password": "wrong"})
        assert resp.status_code == 401

        state = client.get("/auth/state").json()
        assert state["status"] == "errored"
        assert state["error"] == "Invalid login credentials"

        state = client.post("/auth/clear-error").json()
        assert state["error"] is None
        assert state["status"] == "unauthenticated"


def test_duplicate_sign_up_is_rejected():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")
        client.post("/auth/sign-out")

        resp = client.post(
            "/auth/sign-up",
            json={"email": "meena@example.com", "password": PASSWORD, "role": "patient"},
        )
        assert resp.status_code == 409
        assert "already exists" in resp.json()["detail"]


def test_service_areas_upsert_keeps_one_row():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")

        client.post(
            "/dashboard/nurse/service-areas",
            json={"pincode": "600001", "service_id": "home-care", "is_available": True},
        )
        screen = client.post(
            "/dashboard/nurse/service-areas",
            json={"pincode": "600001", "service_id": "home-care", "is_available": False},
        ).json()

        assert screen["error"] == ""
        assert len(screen["areas"]) == 1
        row = screen["areas"][0]
        assert (row["pincode"], row["service_id"], row["status"]) == ("600001", "home-care", "Unavailable")


def test_service_areas_validation_and_clear():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")

        screen = client.post("/dashboard/nurse/service-areas", json={"pincode": "", "service_id": "home-care"}).json()
        assert screen["error"] == "Please enter a pincode"

        client.post("/dashboard/nurse/service-areas", json={"pincode": "600001", "service_id": "home-care"})
        client.post("/dashboard/nurse/service-areas", json={"pincode": "600002", "service_id": "rehabilitation"})

        screen = client.post("/dashboard/nurse/service-areas/clear/confirm").json()
        assert len(screen["areas"]) == 2

        screen = client.post("/dashboard/nurse/service-areas/clear/request").json()
        assert screen["confirm_clear"] is True
        screen = client.post("/dashboard/nurse/service-areas/clear/confirm").json()
        assert screen["areas"] == []
        assert screen["confirm_clear"] is False

        assert client.get("/dashboard/nurse/service-areas").json()["areas"] == []


def test_delete_service_area():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")
        client.post("/dashboard/nurse/service-areas", json={"pincode": "600001", "service_id": "home-care"})

        screen = client.delete("/dashboard/nurse/service-areas/600001/home-care").json()
        assert screen["areas"] == []

        screen = client.delete("/dashboard/nurse/service-areas/600009/home-care").json()
        assert screen["areas"] == []
        assert screen["error"] == ""


def test_patient_cannot_manage_service_areas():
    with _client() as client:
        _register_and_sign_in(client, "asha@example.com", "patient")

        assert client.get("/dashboard/patient").status_code == 200
        assert client.get("/dashboard/nurse/service-areas").status_code == 403


def test_locale_toggle_does_not_touch_session_or_areas():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")
        client.post("/dashboard/nurse/service-areas", json={"pincode": "600001", "service_id": "home-care"})

        state_before = client.get("/auth/state").json()
        areas_before = client.get("/dashboard/nurse/service-areas").json()

        client.get("/content", params={"lang": "ta"})
        client.get("/content", params={"lang": "en"})

        assert client.get("/auth/state").json() == state_before
        assert client.get("/dashboard/nurse/service-areas").json() == areas_before


def test_clear_confirmation_does_not_carry_over_to_next_nurse():
    with _client() as client:
        _register_and_sign_in(client, "meena@example.com", "nurse")
        client.post("/dashboard/nurse/service-areas", json={"pincode": "600001", "service_id": "home-care"})
        assert client.post("/dashboard/nurse/service-areas/clear/request").json()["confirm_clear"] is True
        client.post("/auth/sign-out")

        _register_and_sign_in(client, "kavya@example.com", "nurse")
        screen = client.post("/dashboard/nurse/service-areas/clear/confirm").json()

        assert screen["confirm_clear"] is False
        assert [row["pincode"] for row in screen["areas"]] == ["600001"]


def test_registration_only_for_the_signed_up_account():
    with _client() as client:
        resp = client.post(
            "/auth/sign-up",
            json={"email": "real@example.com", "password": PASSWORD, "role": "nurse"},
        )
        user_id = resp.json()["user"]["id"]

        resp = client.post("/registration", json={"user_id": "someone-else", "name": "Mallory", "phone": "9000000000"})
        assert resp.status_code == 400

        resp = client.post(
            "/registration",
            json={"user_id": user_id, "name": "Real", "email": "other@example.com", "role": "patient", "address": "x"},
        )
        assert resp.status_code == 400

        resp = client.post("/registration", json={"user_id": user_id, "name": "Real", "phone": "9000000000"})
        assert resp.status_code == 200, resp.text
        assert resp.json()["email"] == "real@example.com"
        assert resp.json()["role"] == "nurse"
