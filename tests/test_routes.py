"""Tests for the HTTP API (FastAPI TestClient)."""

from datetime import datetime, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.game import GameSession
from backend.routes.deps import get_session

ROSTER_PATH = Path(__file__).parent.parent / "presets" / "characters.json"
DATE = "2024-06-15"  # target: sanji


@pytest.fixture
def app(tmp_path):
    return create_app(data_dir=tmp_path, roster_path=ROSTER_PATH)


@pytest.fixture
def client(app):
    return TestClient(app)


def _guess(client, entity_id, date=DATE):
    return client.post("/api/daily/guess", json={"entity_id": entity_id, "date": date})


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


# ── Characters ──────────────────────────────────────────────


def test_search(client):
    resp = client.get("/api/characters", params={"q": "zoro"})
    assert resp.status_code == 200
    assert resp.json()[0]["id"] == "zoro"


def test_search_empty(client):
    assert client.get("/api/characters").json() == []


def test_search_limit_from_settings(client):
    client.patch("/api/settings", json={"search_limit": 2})
    assert len(client.get("/api/characters", params={"q": "a"}).json()) == 2


def test_categories(client):
    labels = client.get("/api/categories").json()
    assert labels[0] == "Gender"
    assert labels[-1] == "First Arc"


# ── Daily ───────────────────────────────────────────────────


def test_daily_state(client):
    body = client.get("/api/daily", params={"date": DATE}).json()
    assert body["game_number"] == 167
    assert body["state"]["guesses"] == []


def test_daily_invalid_date(client):
    assert client.get("/api/daily", params={"date": "June 15"}).status_code == 422


@pytest.mark.parametrize("date", ["20240615", "2024-W24-6", "2024-6-15", "2024-06-15T00:00"])
def test_daily_non_canonical_date(client, date):
    assert client.get("/api/daily", params={"date": date}).status_code == 422
    assert _guess(client, "luffy", date).status_code == 422
    assert client.get("/api/share", params={"mode": "daily", "date": date}).status_code == 422


def test_daily_one_round_per_day(client):
    assert _guess(client, "luffy").status_code == 200
    assert _guess(client, "luffy", "20240615").status_code == 422
    assert _guess(client, "luffy").status_code == 409


def test_daily_guess_flow(client):
    resp = _guess(client, "zoro")
    assert resp.status_code == 200
    body = resp.json()
    assert body["result"]["entity_id"] == "zoro"
    assert body["result"]["is_correct"] is False
    assert [c["key"] for c in body["result"]["categories"]][0] == "gender"

    assert _guess(client, "zoro").status_code == 409  # duplicate
    assert client.get("/api/daily/answer", params={"date": DATE}).status_code == 403

    won = _guess(client, "sanji").json()
    assert won["state"]["is_won"] is True
    assert _guess(client, "nami").status_code == 409  # finished

    answer = client.get("/api/daily/answer", params={"date": DATE}).json()
    assert answer["id"] == "sanji"
    assert client.get("/api/stats").json()["daily_streak"] == 1


def test_daily_unknown_entity(client):
    assert _guess(client, "gol-d-roger").status_code == 404


def test_daily_defaults_to_today(app):
    clock = lambda: datetime(2024, 6, 15, 12, tzinfo=timezone.utc)  # noqa: E731
    app.dependency_overrides[get_session] = lambda: GameSession(
        app.state.store, app.state.roster, clock=clock,
    )
    client = TestClient(app)
    client.post("/api/daily/guess", json={"entity_id": "sanji"})
    assert client.get("/api/daily").json()["state"]["date"] == DATE
    assert client.get("/api/daily/answer").json()["id"] == "sanji"


# ── Infinite ────────────────────────────────────────────────


def test_infinite_flow(client):
    state = client.get("/api/infinite").json()
    assert state["guesses"] == []
    assert client.get("/api/infinite/answer").status_code == 403

    for entity_id in ["luffy", "zoro", "nami", "usopp", "sanji", "chopper", "robin"]:
        resp = client.post("/api/infinite/guess", json={"entity_id": entity_id})
        if resp.status_code == 409 or resp.json()["state"]["is_finished"]:
            break
    finished = client.get("/api/infinite").json()
    assert finished["is_finished"] is True
    assert client.get("/api/infinite/answer").status_code == 200

    fresh = client.post("/api/infinite/new")
    assert fresh.status_code == 201
    assert fresh.json()["round_id"] != state["round_id"]
    assert fresh.json()["total_games"] == 1


def test_infinite_unknown_entity(client):
    assert client.post("/api/infinite/guess", json={"entity_id": "nobody"}).status_code == 404


# ── Share / settings ────────────────────────────────────────


def test_share_not_finished(client):
    assert client.get("/api/share", params={"mode": "daily", "date": DATE}).status_code == 409


def test_share_daily(client):
    _guess(client, "sanji")
    text = client.get("/api/share", params={"mode": "daily", "date": DATE}).json()["text"]
    assert text.split("\n")[0] == "OnePiecedle #167 1/6"


def test_share_uses_settings(client):
    client.patch("/api/settings", json={"game_name": "Grand Linedle", "share_link": "https://example.com"})
    _guess(client, "sanji")
    text = client.get("/api/share", params={"mode": "daily", "date": DATE}).json()["text"]
    assert text.startswith("Grand Linedle #167 1/6")
    assert text.endswith("https://example.com")


def test_settings_roundtrip(client):
    assert client.get("/api/settings").json()["game_name"] == "OnePiecedle"
    updated = client.patch("/api/settings", json={"search_limit": 4}).json()
    assert updated["search_limit"] == 4
    assert client.get("/api/settings").json()["search_limit"] == 4


@pytest.mark.parametrize("limit", [0, -1])
def test_search_limit_must_be_positive(client, limit):
    assert client.get("/api/characters", params={"q": "a", "limit": limit}).status_code == 422
    assert client.patch("/api/settings", json={"search_limit": limit}).status_code == 422
    assert client.get("/api/settings").json()["search_limit"] == 10
