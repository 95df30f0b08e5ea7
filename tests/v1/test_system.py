"""Tests for health and admin endpoints."""

from fastapi import status


def test_healthz(client) -> None:
    response = client.get("/api/healthz")

    assert response.status_code == status.HTTP_200_OK
    assert response.text == "OK"


def test_metrics_count_api_hits(client) -> None:
    for _ in range(3):
        client.get("/api/healthz")

    response = client.get("/admin/metrics")

    assert response.status_code == status.HTTP_200_OK
    assert "visited 3 times" in response.text


def test_reset_clears_hits(client) -> None:
    client.get("/api/healthz")

    assert client.post("/admin/reset").status_code == status.HTTP_200_OK
    assert "visited 0 times" in client.get("/admin/metrics").text


def test_startup_creates_document(app, db_path, store) -> None:
    from fastapi.testclient import TestClient

    db_path.unlink()

    with TestClient(app):
        assert db_path.exists()
