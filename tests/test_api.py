"""Tests for lconvert.api — the HTTP service."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lconvert.api import create_app
from lconvert.errors import KeymapIntegrityError
from lconvert.keymaps import KeymapStore


@pytest.fixture
def client(transcoder):
    with TestClient(create_app(transcoder=transcoder)) as c:
        yield c


def test_healthchecker(client):
    response = client.get("/api/healthchecker")
    assert response.status_code == 200
    assert response.json()["status"] == "success"


def test_convert(client):
    response = client.post("/api/convert", json={"text": "hello", "from": "qwerty", "to": "dvorak"})
    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": "d.nnr"}


def test_convert_cyrillic(client):
    response = client.post("/api/convert", json={"text": "руддщ", "from": "russian", "to": "qwerty"})
    assert response.json()["data"] == "hello"


def test_convert_same_layout(client):
    response = client.post("/api/convert", json={"text": "hello", "from": "dvorak", "to": "Dvorak"})
    assert response.json()["data"] == "hello"


def test_unknown_layout(client):
    response = client.post("/api/convert", json={"text": "hello", "from": "azerty", "to": "dvorak"})
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["layout"] == "azerty"


def test_missing_field(client):
    response = client.post("/api/convert", json={"text": "hello", "to": "dvorak"})
    assert response.status_code == 422


def test_long_text_uses_concurrent_path(client):
    text = "hello " * 500
    response = client.post("/api/convert", json={"text": text, "from": "qwerty", "to": "dvorak"})
    assert response.json()["data"] == "d.nnr " * 500


def test_app_builds_store_at_startup():
    app = create_app({"chunk_threshold": 5, "max_workers": 2})
    with TestClient(app) as c:
        service = app.state.service
        assert service.transcoder.chunk_threshold == 5
        assert service.transcoder.max_workers == 2
        assert len(service.transcoder.store) == 12
        response = c.post("/api/convert", json={"text": "ghbdtn vbh", "from": "en", "to": "ru"})
        assert response.json()["data"] == "привет мир"


def test_incomplete_table_aborts_startup(monkeypatch):
    monkeypatch.setattr(KeymapStore, "_build", staticmethod(lambda repository: {}))
    with pytest.raises(KeymapIntegrityError):
        with TestClient(create_app()):
            pass


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        create_app({"max_workers": 0})
