"""Business logic behind the HTTP endpoints."""

from __future__ import annotations

from edgellm.models import HealthResponse, HelloResponse

SERVICE_NAME = "edgellm"
VERSION = "1.0.0"


class APIService:
    """Logic for the general API endpoints."""

    def get_hello_message(self) -> HelloResponse:
        return HelloResponse(message="Hello from EdgeLLM!", version=VERSION)


class HealthService:
    """Logic for the health endpoint."""

    def get_health(self) -> HealthResponse:
        return HealthResponse(status="healthy", service=SERVICE_NAME, version=VERSION)