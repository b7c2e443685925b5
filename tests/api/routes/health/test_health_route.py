"""Testes do endpoint de health."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.app import create_app


def test_health_returns_ok_and_utc_timestamp() -> None:
    client = TestClient(create_app())

    response = client.get("/api/health")
    payload = response.json()

    assert response.status_code == 200
    assert payload["ok"] is True
    assert payload["time"].endswith("Z")
    assert response.headers["access-control-allow-origin"] == "*"
