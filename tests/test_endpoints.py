# ===============================================
# tests/test_endpoints.py
# HTTP surface: HTML screens, JSON API, health
# ===============================================

import pytest
from fastapi.testclient import TestClient

import pantry_chat.app as app_module
from conftest import FakeModelClient


@pytest.fixture
def client(monkeypatch, recipe_client):
    monkeypatch.setattr(app_module.chat_gen, "model_client", recipe_client)
    # one portal for the whole test so dispatched tasks share its loop
    with TestClient(app_module.app) as c:
        yield c


def test_root_lists_screens(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "/screens/recipes" in r.text
    assert "/screens/story" in r.text


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_reports_engine(client):
    r = client.get("/healthz")
    assert r.json()["ok"] is True
    assert r.json()["engine"] == "fake"


def test_stylesheet_is_static(client):
    r = client.get("/static/chat.css")
    assert r.status_code == 200
    assert ".chat-window" in r.text


def test_poll_script_is_static(client):
    r = client.get("/static/chat.js")
    assert r.status_code == 200
    assert "/api/sessions/" in r.text
    assert "wait=true" in r.text


def test_open_screen_starts_new_session(client):
    first = client.get("/screens/recipes", follow_redirects=False)
    second = client.get("/screens/recipes", follow_redirects=False)
    assert first.status_code == 303
    assert first.headers["location"].startswith("/screens/recipes/")
    assert first.headers["location"] != second.headers["location"]


def test_unknown_screen_and_session(client):
    assert client.get("/screens/nope", follow_redirects=False).status_code == 404
    assert client.get("/screens/recipes/missing").status_code == 404
    assert client.get("/api/sessions/missing").status_code == 404


def test_api_submit_and_wait(client):
    sid = client.post("/api/screens/recipes/sessions").json()["session_id"]
    r = client.post(f"/api/sessions/{sid}/messages", json={"text": "eggs, bread", "wait": True})
    body = r.json()
    assert body["accepted"] is True
    session = body["session"]
    assert session["pending"] is False
    assert [m["sender"] for m in session["messages"]] == ["user", "ai"]
    assert "French Toast" in session["messages"][1]["text"]
    assert "<strong>French Toast</strong>" in session["messages"][1]["html"]


def test_api_blank_submit_not_accepted(client):
    sid = client.post("/api/screens/story/sessions").json()["session_id"]
    body = client.post(f"/api/sessions/{sid}/messages", json={"text": "   "}).json()
    assert body["accepted"] is False
    assert body["session"]["messages"] == []
    assert body["session"]["pending"] is False


def test_api_failure_returns_fallback(client, monkeypatch):
    monkeypatch.setattr(app_module.chat_gen, "model_client", FakeModelClient(exc=ConnectionError("down")))
    sid = client.post("/api/screens/story/sessions").json()["session_id"]
    body = client.post(f"/api/sessions/{sid}/messages", json={"text": "hi", "wait": True}).json()
    assert body["session"]["messages"][1]["text"] == "Failed to generate story."


def test_form_submit_round_trip(client):
    page_url = client.get("/screens/recipes", follow_redirects=False).headers["location"]
    sid = page_url.rsplit("/", 1)[-1]

    r = client.post(page_url, data={"draft": "eggs, bread"}, follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == page_url

    view = client.get(f"/api/sessions/{sid}", params={"wait": True}).json()
    assert len(view["messages"]) == 2

    page = client.get(page_url).text
    assert "<strong>French Toast</strong>" in page
    assert "AI is typing..." not in page


def test_form_blank_submit_is_noop(client):
    page_url = client.get("/screens/story", follow_redirects=False).headers["location"]
    sid = page_url.rsplit("/", 1)[-1]
    client.post(page_url, data={"draft": ""}, follow_redirects=False)
    view = client.get(f"/api/sessions/{sid}").json()
    assert view["messages"] == []
    assert view["pending"] is False


def test_session_bound_to_its_screen(client):
    page_url = client.get("/screens/story", follow_redirects=False).headers["location"]
    sid = page_url.rsplit("/", 1)[-1]
    assert client.get(f"/screens/recipes/{sid}").status_code == 404
