"""Tests for the FastAPI routes."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from focus_timer.motivation.quotes import MOTIVATION_QUOTES, TIMER_QUOTES
from focus_timer.timer.ticker import FakeTicker
from focus_timer.web.app import create_app


@pytest.fixture
def ticker() -> FakeTicker:
    return FakeTicker()


@pytest.fixture
def client(config, ticker):
    with TestClient(create_app(config, ticker=ticker)) as c:
        yield c


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        resp = client.get("/api/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["database_connected"] is True
        assert data["total_tasks"] == 0


class TestTimerRoutes:
    def test_initial_state(self, client: TestClient) -> None:
        data = client.get("/api/timer").json()
        assert data["phase"] == "idle"
        assert data["text"] == "25:00"
        assert data["progress"] == 0.0
        assert data["remaining_seconds"] == 1500
        assert data["notifications"] == []

    def test_start_pause_resume(self, client: TestClient, ticker: FakeTicker) -> None:
        assert client.post("/api/timer/start").json()["running"] is True
        client.post("/api/timer/start")
        ticker.advance(90)
        data = client.post("/api/timer/pause").json()
        assert data["phase"] == "paused"
        assert data["remaining_seconds"] == 1410
        assert data["text"] == "23:30"

        ticker.advance(30)
        assert client.get("/api/timer").json()["remaining_seconds"] == 1410

        client.post("/api/timer/start")
        ticker.advance(10)
        assert client.get("/api/timer").json()["remaining_seconds"] == 1400

    def test_completion_records_notification(self, client: TestClient, ticker: FakeTicker) -> None:
        client.put("/api/timer/task", json={"label": "Essay"})
        client.post("/api/timer/start")
        ticker.advance(1500)

        data = client.get("/api/timer").json()
        assert data["phase"] == "completed"
        assert data["text"] == "DONE"
        assert data["progress"] == 1.0
        assert data["stroke_offset"] == 0.0
        assert data["message"] == "✅ Great job finishing Essay!"
        assert len(data["notifications"]) == 1
        assert "Essay" in data["notifications"][0]["message"]
        assert data["notifications"][0]["acknowledged"] is False

        data = client.post("/api/timer/acknowledge").json()
        assert data["notifications"][0]["acknowledged"] is True

    def test_blank_label_clears(self, client: TestClient) -> None:
        client.put("/api/timer/task", json={"label": "Essay"})
        data = client.put("/api/timer/task", json={"label": "   "}).json()
        assert data["task_label"] is None

    def test_reset(self, client: TestClient, ticker: FakeTicker) -> None:
        client.post("/api/timer/start")
        ticker.advance(100)
        data = client.post("/api/timer/reset").json()
        assert data["phase"] == "idle"
        assert data["remaining_seconds"] == 1500
        assert data["message"] in TIMER_QUOTES
        assert ticker.active_count == 0


class TestTaskRoutes:
    def test_create_and_list(self, client: TestClient) -> None:
        resp = client.post("/api/tasks", json={"name": "Write", "minutes": "40"})
        assert resp.status_code == 201
        created = resp.json()
        assert created["category"] == "General"
        assert created["minutes"] == 40

        client.post("/api/tasks", json={"name": "Call", "category": "Admin", "minutes": 5})
        names = [t["name"] for t in client.get("/api/tasks", params={"sort_by": "time"}).json()]
        assert names == ["Call", "Write"]

    def test_fractional_minutes_truncate(self, client: TestClient) -> None:
        resp = client.post("/api/tasks", json={"name": "Stretch", "minutes": 3.7})
        assert resp.status_code == 201
        assert resp.json()["minutes"] == 3

    def test_blank_name_rejected(self, client: TestClient) -> None:
        resp = client.post("/api/tasks", json={"name": "  "})
        assert resp.status_code == 422
        assert resp.json()["detail"] == "Please enter a task name!"

    def test_invalid_sort(self, client: TestClient) -> None:
        assert client.get("/api/tasks", params={"sort_by": "colour"}).status_code == 422

    def test_toggle_and_delete(self, client: TestClient) -> None:
        task_id = client.post("/api/tasks", json={"name": "x"}).json()["id"]
        assert client.post(f"/api/tasks/{task_id}/toggle").json()["completed"] is True
        assert client.delete(f"/api/tasks/{task_id}").status_code == 204
        assert client.get("/api/tasks").json() == []

    def test_unknown_task(self, client: TestClient) -> None:
        assert client.post("/api/tasks/42/toggle").status_code == 404
        assert client.delete("/api/tasks/42").status_code == 404


class TestQuoteAndMotivationRoutes:
    def test_random_quote(self, client: TestClient) -> None:
        data = client.get("/api/quotes/random").json()
        assert data["quote"] in MOTIVATION_QUOTES
        assert data["formatted"] == f'"{data["quote"]}"'

    def test_blank_mood(self, client: TestClient) -> None:
        data = client.post("/api/motivation", json={"mood": ""}).json()
        assert data["message"] == "Please describe how you're feeling."
