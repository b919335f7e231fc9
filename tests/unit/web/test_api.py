#!/usr/bin/env python3
"""
Unit tests for the JobSwipe HTTP API.

The app runs on an AppContext built over in-memory SQLite with inline
background tasks and a scripted completion backend.
"""

import pytest
from fastapi.testclient import TestClient

from core.app_context import AppContext
from core.config_loader import AppConfig
from tests.fixtures.jobs import (
    make_application,
    make_job,
    make_profile,
    store_application,
    store_job,
    store_profile,
)
from tests.mocks.store_mocks import ScriptedLLMProvider
from web.backend.app import app
from web.backend.dependencies import get_context, get_session_manager
from web.backend.services.session_service import SessionManager

pytestmark = pytest.mark.db


@pytest.fixture
def llm():
    return ScriptedLLMProvider(*[{"refinedMatchScore": 88, "reasoning": "fit"}] * 10)


@pytest.fixture
def context(sql_store, inline_config, llm):
    ctx = AppContext.build(inline_config, store=sql_store, llm=llm)
    yield ctx
    ctx.shutdown()


@pytest.fixture
def client(context):
    manager = SessionManager(context)
    app.dependency_overrides[get_context] = lambda: context
    app.dependency_overrides[get_session_manager] = lambda: manager
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded(context):
    store = context.store
    store_job(store, make_job("j1", title="Backend Engineer"))
    store_job(store, make_job("j2", title="Data Engineer"))
    store_profile(store, make_profile("c1"))
    return store


def open_session(client, candidate_id="c1"):
    response = client.post("/api/sessions", json={"candidate_id": candidate_id})
    assert response.status_code == 201
    return response.json()


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestFeed:

    def test_feed_lists_live_jobs(self, client, seeded):
        data = client.get("/api/candidates/c1/feed").json()
        assert data["success"] is True
        assert data["count"] == 2
        assert {job["job_id"] for job in data["jobs"]} == {"j1", "j2"}

    def test_feed_falls_back_to_demo(self, client):
        data = client.get("/api/candidates/c1/feed").json()
        assert data["count"] > 0
        assert all(job["is_demo"] for job in data["jobs"])


class TestSessions:

    def test_create_session(self, client, seeded):
        data = open_session(client)
        assert data["state"] == "ready"
        assert data["remaining"] == 2
        assert data["top"]["job_id"] == data["stack"][0]["job_id"]
        assert data["history"] == []

    def test_unknown_session_is_404(self, client):
        response = client.get("/api/sessions/nope")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["type"] == "SessionNotFoundError"

    def test_right_swipe_records_application(self, client, seeded):
        session = open_session(client)
        top = session["top"]["job_id"]

        response = client.post(f"/api/sessions/{session['session_id']}/swipe", json={"direction": "right"})
        data = response.json()
        assert response.status_code == 200
        assert data["action"] == "committed"
        assert data["job_id"] == top
        assert data["session"]["remaining"] == 1

        applications = client.get("/api/candidates/c1/applications").json()
        assert applications["count"] == 1
        assert applications["applications"][0]["job_id"] == top
        assert applications["applications"][0]["status"] == "pending"
        assert applications["applications"][0]["match_score"] == 88.0

    def test_invalid_direction_is_400(self, client, seeded):
        session = open_session(client)
        response = client.post(f"/api/sessions/{session['session_id']}/swipe", json={"direction": "up"})
        assert response.status_code == 400
        assert response.json()["type"] == "InvalidDirectionError"

    def test_swipe_on_exhausted_deck_is_400(self, client, seeded):
        session_id = open_session(client)["session_id"]
        client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"})
        client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"})

        response = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"})
        assert response.status_code == 400
        assert response.json()["type"] == "SessionStateError"

    def test_release_below_threshold_snaps_back(self, client, seeded):
        session_id = open_session(client)["session_id"]
        response = client.post(f"/api/sessions/{session_id}/release", json={"offset_x": 30, "velocity_x": 100})
        data = response.json()
        assert data["action"] == "snapped_back"
        assert data["session"]["remaining"] == 2

    def test_release_past_threshold_commits(self, client, seeded):
        session_id = open_session(client)["session_id"]
        response = client.post(f"/api/sessions/{session_id}/release", json={"offset_x": -200})
        data = response.json()
        assert data["action"] == "committed"
        assert data["direction"] == "left"
        assert data["session"]["swiping"] is False

    def test_release_while_swipe_in_flight_is_ignored(self, client, context, seeded):
        session_id = open_session(client)["session_id"]
        manager = app.dependency_overrides[get_session_manager]()
        session = manager.get(session_id)
        session.begin_commit("left")

        response = client.post(f"/api/sessions/{session_id}/release", json={"offset_x": 300})
        data = response.json()
        assert data["action"] == "ignored"
        assert data["session"]["remaining"] == 2
        assert data["session"]["history"] == []
        assert session.pending_direction is not None

        # The in-flight swipe is still finished by its own caller
        record = session.finish_commit()
        assert record.direction.value == "left"

    def test_undo(self, client, seeded):
        session_id = open_session(client)["session_id"]
        first = client.post(f"/api/sessions/{session_id}/swipe", json={"direction": "left"}).json()

        data = client.post(f"/api/sessions/{session_id}/undo").json()
        assert data["action"] == "undone"
        assert data["job_id"] == first["job_id"]
        assert data["session"]["top"]["job_id"] == first["job_id"]

    def test_undo_without_history_is_400(self, client, seeded):
        session_id = open_session(client)["session_id"]
        assert client.post(f"/api/sessions/{session_id}/undo").status_code == 400

    def test_close_session(self, client, seeded):
        session_id = open_session(client)["session_id"]
        assert client.delete(f"/api/sessions/{session_id}").json()["success"] is True
        assert client.get(f"/api/sessions/{session_id}").status_code == 404


class TestApplications:

    def test_job_applicants_best_first(self, client, seeded):
        store_application(seeded, make_application("c2", "j1", match_score=60))
        store_application(seeded, make_application("c3", "j1", match_score=95))

        data = client.get("/api/jobs/j1/applications").json()
        assert [a["candidate_id"] for a in data["applications"]] == ["c3", "c2"]

    def test_accept_application(self, client, seeded):
        application = store_application(seeded, make_application("c2", "j1"))
        response = client.post(f"/api/applications/{application.id}/status", json={"status": "accepted"})
        assert response.status_code == 200
        assert response.json()["application"]["status"] == "accepted"

    def test_invalid_status_is_422(self, client, seeded):
        application = store_application(seeded, make_application("c2", "j1"))
        response = client.post(f"/api/applications/{application.id}/status", json={"status": "pending"})
        assert response.status_code == 422

    def test_unknown_application_is_404(self, client):
        response = client.post("/api/applications/nope/status", json={"status": "rejected"})
        assert response.status_code == 404

    def test_refine_application(self, client, seeded):
        application = store_application(seeded, make_application("c1", "j1", match_score=70))
        data = client.post(f"/api/applications/{application.id}/refine").json()
        assert data["refined_match_score"] == 88.0
        assert data["fallback"] is False

    def test_refine_disabled_is_503(self, sql_store):
        ctx = AppContext.build(
            AppConfig(swipe={"background_tasks": "inline"}, refiner={"enabled": False}),
            store=sql_store
        )
        app.dependency_overrides[get_context] = lambda: ctx
        try:
            response = TestClient(app).post("/api/applications/any/refine")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code == 503
