"""Response bodies returned by the HTTP API."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class HealthResponse:
    """Body of the health check response."""

    status: str
    service: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class HelloResponse:
    """Body of the hello endpoint response."""

    message: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ErrorResponse:
    """Body of an error response."""

    error: str
    message: str
    code: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)