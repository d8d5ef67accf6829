import importlib

import pytest
from fastapi.testclient import TestClient

from conftest import FakeResponse, FakeSession, chat_payload
from app.extract_text import FetchError
from pipelines.genai_pipeline import Summarizer
from utils.config import Settings

api = importlib.import_module("app.app")

SAMPLE = "Terms and conditions apply. You agree to use the service responsibly. Data may be collected."


@pytest.fixture
def client():
    settings = Settings(api_key=None)
    api.app.dependency_overrides[api.get_settings] = lambda: settings
    api.app.dependency_overrides[api.get_summarizer] = lambda: Summarizer(settings)
    yield TestClient(api.app)
    api.app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "credential": False}


def test_index_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "Laymans Terms" in r.text


def test_summarize_without_credential(client):
    r = client.post("/api/summarize", json={"text": SAMPLE})
    assert r.status_code == 200
    html = r.json()["html"]
    assert "<h1>TL;DR</h1>" in html
    assert "<h2>Data & Privacy</h2>" in html
    assert "Fees/Payments" not in html


def test_summarize_live(client):
    session = FakeSession(FakeResponse(200, chat_payload("# TL;DR\n- Plain words.")))
    api.app.dependency_overrides[api.get_summarizer] = lambda: Summarizer(
        Settings(api_key="sk-test"), session=session
    )
    r = client.post("/api/summarize", json={"text": SAMPLE})
    assert r.status_code == 200
    assert "<li>Plain words.</li>" in r.json()["html"]
    assert session.calls[0]["json"]["messages"][1]["content"] == SAMPLE


@pytest.mark.parametrize("body", [{"text": "too short"}, {}, {"text": 12345}])
def test_summarize_rejects_invalid_input(client, body):
    r = client.post("/api/summarize", json=body)
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid input"}


def test_summarize_rejects_malformed_json(client):
    r = client.post("/api/summarize", content=b"{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_fetch_requires_url(client):
    r = client.get("/api/fetch")
    assert r.status_code == 400
    assert r.json() == {"error": "Missing url"}


def test_fetch_returns_text(client, monkeypatch):
    seen = {}

    def fake_fetch(url, timeout, limit):
        seen.update(url=url, timeout=timeout, limit=limit)
        return "Terms You agree."

    monkeypatch.setattr(api, "fetch_url_text", fake_fetch)
    r = client.get("/api/fetch", params={"url": "https://example.com/terms"})
    assert r.status_code == 200
    assert r.json() == {"text": "Terms You agree."}
    assert seen == {"url": "https://example.com/terms", "timeout": 10.0, "limit": 150000}


def test_fetch_failure_is_400(client, monkeypatch):
    def fake_fetch(url, timeout, limit):
        raise FetchError("Failed to fetch url: 503 Error")

    monkeypatch.setattr(api, "fetch_url_text", fake_fetch)
    r = client.get("/api/fetch", params={"url": "https://example.com/down"})
    assert r.status_code == 400
    assert r.json() == {"error": "Failed to fetch url: 503 Error"}


def test_upload_text_file(client):
    r = client.post("/api/upload", files={"file": ("terms.txt", b"You agree to everything.", "text/plain")})
    assert r.status_code == 200
    assert r.json() == {"text": "You agree to everything."}


def test_upload_without_file(client):
    r = client.post("/api/upload", files={"other": ("terms.txt", b"data", "text/plain")})
    assert r.status_code == 400
    assert r.json() == {"error": "No file"}


def test_upload_broken_pdf(client):
    r = client.post("/api/upload", files={"file": ("terms.pdf", b"garbage", "application/pdf")})
    assert r.status_code == 400
    assert r.json()["error"].startswith("Failed to extract text")
