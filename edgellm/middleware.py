"""Request ID and request logging hooks for Flask applications."""

from __future__ import annotations

import secrets
import string
import time
from typing import Any, Protocol

from flask import Flask, Response, g, request

REQUEST_ID_HEADER = "X-Request-ID"
_CHARSET = string.ascii_lowercase + string.ascii_uppercase + string.digits


class _InfoLogger(Protocol):
    def info(self, msg: str, *args: Any) -> None: ...


def random_string(length: int) -> str:
    """Return a random alphanumeric string of the given length."""
    return "".join(secrets.choice(_CHARSET) for _ in range(length))


def generate_request_id() -> str:
    """Return an ID made of the current local time and a random suffix."""
    return time.strftime("%Y%m%d%H%M%S") + "-" + random_string(6)


def install_request_id(app: Flask) -> None:
    """Give every request an ID, kept in g.request_id and echoed in a header."""

    @app.before_request
    def _assign_request_id() -> None:
        g.request_id = generate_request_id()

    @app.after_request
    def _add_request_id_header(response: Response) -> Response:
        request_id = g.get("request_id")
        if request_id:
            response.headers[REQUEST_ID_HEADER] = request_id
        return response


def install_request_logging(app: Flask, logger: _InfoLogger) -> None:
    """Log method, path, status, latency, client address and agent of each request."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response: Response) -> Response:
        started = g.get("request_started")
        elapsed = time.perf_counter() - started if started is not None else 0.0
        logger.info(
            "Request processed",
            "method", request.method,
            "path", request.path,
            "status", response.status_code,
            "latency", f"{elapsed * 1000:.3f}ms",
            "client_ip", request.remote_addr,
            "user_agent", request.headers.get("User-Agent", ""),
        )
        return response