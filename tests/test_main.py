"""
Tests for the HTTP API.

This module covers the service endpoints and the station log endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from weatherlog import __version__
from weatherlog.main import app

TEXT_HEADERS = {"Content-Type": "text/plain"}


@pytest.fixture
def client():
    """Test client fixture."""
    return TestClient(app)


def test_root_endpoint(client):
    """Test the root endpoint returns correct response."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    for field in ["message", "version", "docs", "redoc"]:
        assert field in data
    assert data["version"] == __version__


def test_health_endpoint(client):
    """Test the health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_openapi_docs_available(client):
    """Test that OpenAPI documentation is available."""
    response = client.get("/api/v1/openapi.json")
    assert response.status_code == 200

    data = response.json()
    assert "/api/v1/stations/{wigos_id}/logs" in data["paths"]


def test_cors_middleware_enabled(client):
    """Test that CORS middleware is enabled."""
    response = client.get("/", headers={"Origin": "http://localhost:3000"})
    assert response.status_code == 200
    cors_headers = [h for h in response.headers.keys() if h.startswith("access-control")]
    assert len(cors_headers) > 0


def test_get_station_identifier(client):
    response = client.get("/api/v1/stations/0-20000-0-02126")
    assert response.status_code == 200
    assert response.json() == {
        "wigos_id": "0-20000-0-02126",
        "series": 0,
        "issuer": 20000,
        "issue_number": 0,
        "local_identifier": "02126",
    }


@pytest.mark.parametrize("wigos_id,message", [
    ("1-20000-0-02126", "must be zero"),
    ("0-20000-0", "Found: 3"),
    ("0-abc-0-02126", "Failed to parse numeric part"),
])
def test_invalid_station_identifier(client, wigos_id, message):
    response = client.get(f"/api/v1/stations/{wigos_id}")
    assert response.status_code == 422
    assert message in response.json()["detail"]


def test_upload_log(client):
    """Test parsing an uploaded log into a report."""
    body = "\n".join([
        "2025-08-07T10:00:00Z,22.5,58.3",
        "2025-08-07T11:00:00Z,NaN,60.1",
        "bad,line",
    ]) + "\n"

    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content=body,
        headers=TEXT_HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["station_id"] == "0-20000-0-02513"
    assert (data["valid"], data["partial"], data["invalid"], data["errors"]) == (1, 1, 0, 1)
    assert data["max_temperature"] == 22.5
    assert data["max_humidity"] == 60.1
    assert data["parser_errors"] == [{
        "line_number": 3,
        "message": "Line does not contain exactly three parts.",
        "line": "bad,line",
    }]


def test_upload_log_without_real_temperature(client):
    """Test that a maximum with no real readings is null."""
    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content="2025-08-07T11:00:00Z,NaN,60.1\n",
        headers=TEXT_HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["partial"] == 1
    assert data["max_temperature"] is None
    assert data["max_humidity"] == 60.1


def test_upload_empty_log(client):
    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content="",
        headers=TEXT_HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["errors"] == 0
    assert data["parser_errors"] == []


def test_upload_log_invalid_station(client):
    response = client.post(
        "/api/v1/stations/0-20000-0-AB-CD/logs",
        content="2025-08-07T10:00:00Z,22.5,58.3\n",
        headers=TEXT_HEADERS,
    )
    assert response.status_code == 422


def test_upload_log_not_utf8(client):
    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content=b"\xff\xfe\x00bad",
        headers=TEXT_HEADERS,
    )
    assert response.status_code == 400


def test_upload_log_splits_only_on_line_terminators(client):
    """Test that form feeds and other separators stay inside a line."""
    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content="2025-08-07T10:00:00Z,22.5,58.3\x0bbad\x0c \n",
        headers={"Content-Type": "text/plain; charset=utf-8"},
    )

    assert response.status_code == 200
    data = response.json()
    assert (data["valid"], data["errors"]) == (0, 1)
    assert data["parser_errors"][0]["line_number"] == 1


def test_upload_log_mixed_line_endings(client):
    response = client.post(
        "/api/v1/stations/0-20000-0-02513/logs",
        content=(
            "2025-08-07T10:00:00Z,22.5,58.3\r\n"
            "2025-08-07T11:00:00Z,23.5,58.3\r"
            "bad,line"
        ),
        headers=TEXT_HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert (data["valid"], data["errors"]) == (2, 1)
    assert data["parser_errors"][0] == {
        "line_number": 3,
        "message": "Line does not contain exactly three parts.",
        "line": "bad,line",
    }
