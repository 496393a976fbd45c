from fastapi import FastAPI
from fastapi.testclient import TestClient

from maven_essentials.core.arguments import ApplicationArguments
from maven_essentials.core.config import Settings
from maven_essentials.di import ApplicationContainer


def _client(definition, **overrides) -> TestClient:
    settings = Settings(overrides=overrides)
    container = ApplicationContainer(definition, ApplicationArguments([]), settings)
    return TestClient(container.get(FastAPI))


def test_health(definition):
    with _client(definition) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_root_reports_service_and_start_time(definition):
    with _client(definition) as client:
        response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "running"
    assert body["service"] == "maven-essentials"
    assert body["version"] == definition.version
    assert body["docs"] == "/docs"
    assert body["started_at"].endswith("Z")


def test_root_uses_configured_application_name(definition):
    with _client(definition, APPLICATION_NAME="renamed") as client:
        response = client.get("/")

    assert response.json()["service"] == "renamed"


def test_started_at_is_empty_before_lifespan(definition):
    client = _client(definition)

    response = client.get("/")

    assert response.json()["started_at"] is None


def test_openapi_uses_definition_metadata(definition):
    with _client(definition) as client:
        schema = client.get("/openapi.json").json()

    assert schema["info"]["title"] == "Maven Essentials API"
    assert schema["info"]["version"] == definition.version
    assert "/health" in schema["paths"]


def test_cors_allows_configured_origin(definition):
    with _client(definition, CORS_ALLOWED_ORIGINS="http://allowed.example") as client:
        allowed = client.get("/health", headers={"Origin": "http://allowed.example"})
        other = client.get("/health", headers={"Origin": "http://other.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://allowed.example"
    assert "access-control-allow-origin" not in other.headers
