"""Tests for the HTTP session API."""

import pytest
from fastapi.testclient import TestClient

from shampoo.webapp import SESSIONS, app


@pytest.fixture
def client():
    SESSIONS.clear()
    with TestClient(app) as c:
        yield c
    SESSIONS.clear()


def new_sid(client, seed=7):
    resp = client.get("/", params={"seed": seed}, follow_redirects=False)
    assert resp.status_code == 303
    return resp.headers["location"].rsplit("/", 1)[-1]


def test_root_creates_session_and_redirects(client):
    sid = new_sid(client)
    assert sid in SESSIONS

    resp = client.get(f"/game/{sid}")
    assert resp.status_code == 200
    body = resp.json()
    assert body["sid"] == sid
    assert body["state"]["current_day"] == 0
    assert body["state"]["hair_health"] == 100
    assert len(body["state"]["schedule"]) == 10


def test_unknown_game_redirects_home(client):
    resp = client.get("/game/nope", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"


def test_play_a_turn(client):
    sid = new_sid(client)
    resp = client.post(f"/game/{sid}/play", data={"action": "wash"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["outcome"]["record"]["action"] == "wash"
    assert body["outcome"]["record"]["action_label"] == "SHAMPOOING"
    assert body["outcome"]["terminal"] is None
    assert body["state"]["hair_health"] == 85
    assert body["state"]["days_since_wash"] == 0


def test_invalid_action_is_rejected(client):
    sid = new_sid(client)
    resp = client.post(f"/game/{sid}/play", data={"action": "conditioner"})
    assert resp.status_code == 422
    assert SESSIONS[sid].current_day == 0


def test_play_unknown_session_404(client):
    resp = client.post("/game/nope/play", data={"action": "wait"})
    assert resp.status_code == 404


def test_full_game_and_result(client):
    sid = new_sid(client)
    assert client.get(f"/game/{sid}/result").status_code == 409

    for _ in range(10):
        resp = client.post(f"/game/{sid}/play", data={"action": "wait"})
        assert resp.status_code == 200
    assert resp.json()["outcome"]["terminal"]["kind"] == "completed"

    resp = client.get(f"/game/{sid}/result")
    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["days_played"] == 10
    assert result["player_path"] == [0] * 10
    assert len(result["solver_result"]["best_path"]) == 10

    resp = client.post(f"/game/{sid}/play", data={"action": "wait"})
    assert resp.status_code == 409


def test_fatal_wash_over_http(client):
    sid = new_sid(client)
    for _ in range(6):
        client.post(f"/game/{sid}/play", data={"action": "wash"})
    resp = client.post(f"/game/{sid}/play", data={"action": "wash"})
    body = resp.json()
    assert body["outcome"]["record"] is None
    assert body["outcome"]["terminal"]["kind"] == "hair_fried"
    assert body["state"]["game_over"] is True
    assert client.get(f"/game/{sid}/result").json()["result"]["days_played"] == 6
