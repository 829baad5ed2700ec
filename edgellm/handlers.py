"""HTTP handlers for the health and API endpoints."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from edgellm.logger import Logger
from edgellm.services import APIService, HealthService


class HealthHandler:
    """Serves the health status."""

    def __init__(self, service: HealthService, logger: Logger) -> None:
        self.service = service
        self.logger = logger

    def health(self) -> tuple[dict[str, Any], int]:
        status = self.service.get_health()
        self.logger.info("Health check requested")
        return status.to_dict(), HTTPStatus.OK


class APIHandler:
    """Serves the general API endpoints."""

    def __init__(self, service: APIService, logger: Logger) -> None:
        self.service = service
        self.logger = logger

    def hello(self) -> tuple[dict[str, Any], int]:
        response = self.service.get_hello_message()
        self.logger.info("Hello endpoint requested")
        return response.to_dict(), HTTPStatus.OK