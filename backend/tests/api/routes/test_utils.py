"""Tests for GET /status and POST /echo."""

from datetime import datetime
from unittest.mock import patch

from fastapi.testclient import TestClient


def test_status_online(client: TestClient) -> None:
    r = client.get("/status")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "online"
    assert data["service"] == "Oracle Query Endpoint"
    assert "SELECT" in data["features"]
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


def test_status_does_not_touch_database(client: TestClient) -> None:
    with patch("oraclequery.engines.sql.executor.connect") as mock_connect:
        client.get("/status")
    assert mock_connect.call_count == 0


def test_echo_returns_body_unchanged(client: TestClient) -> None:
    body = {"user": "scott", "nested": {"a": [1, 2, None]}, "flag": True}
    r = client.post("/echo", json=body)
    assert r.status_code == 200
    assert r.json() == body
