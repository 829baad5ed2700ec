"""Launching and supervising the local vLLM inference server process."""

from __future__ import annotations

import logging
import os
import signal
import socket
import subprocess
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_SERVER_ADDR = "localhost:50051"
DEFAULT_MAX_WORKERS = 4
DEFAULT_STARTUP_TIMEOUT = 30.0
SERVER_PATH_ENV = "VLLM_SERVER_PATH"
_DEFAULT_ALIAS = "\033[36m[VllmServer]: \033[0m"


class RunnerError(Exception):
    """Raised when the inference server cannot be started."""


@dataclass(frozen=True)
class RunnerSettings:
    """Options for starting the inference server; times are in seconds."""

    server_addr: str = DEFAULT_SERVER_ADDR
    max_workers: int = DEFAULT_MAX_WORKERS
    startup_timeout: float = DEFAULT_STARTUP_TIMEOUT
    python: str = "python3"
    shutdown_timeout: float = 10.0
    poll_interval: float = 1.0


def _make_logger(prefix: str) -> logging.Logger:
    logger = logging.Logger("edgellm.vllm", logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            prefix.replace("%", "%%") + "%(asctime)s %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    return logger


class VllmServer:
    """A child process running the Python inference server."""

    def __init__(self, alias: str | None = None, settings: RunnerSettings | None = None) -> None:
        self.settings = settings or RunnerSettings()
        self.process: subprocess.Popen[bytes] | None = None
        self._logger = _make_logger(alias or _DEFAULT_ALIAS)

    def start(self, start_args: Sequence[str] | None = None) -> None:
        """Launch server.py and wait until it accepts connections."""
        settings = self.settings
        max_workers = settings.max_workers if settings.max_workers > 0 else DEFAULT_MAX_WORKERS
        server_directory = os.environ.get(
            SERVER_PATH_ENV, os.path.join("backend", "python", "vllm")
        )
        if not os.path.exists(server_directory):
            raise RunnerError(f"VLLM server script not found at {server_directory}")

        command = [settings.python, *(start_args or ()), "server.py"]
        env = {
            **os.environ,
            "VLLM_SERVER_ADDR": settings.server_addr,
            "VLLM_MAX_WORKERS": str(max_workers),
        }

        self._logger.info("Starting VLLM server with command: %s", " ".join(command))
        self._logger.info(
            "address %s workers %d path %s",
            settings.server_addr,
            max_workers,
            server_directory + "/server.py",
        )

        try:
            self.process = subprocess.Popen(
                command,
                cwd=os.path.dirname(server_directory) or ".",
                env=env,
                start_new_session=True,
            )
        except OSError as exc:
            raise RunnerError(f"failed to start VLLM server: {exc}") from exc

        self.wait_for_ready()

    def is_ready(self) -> bool:
        """Return True if the server process is alive and its address accepts connections."""
        if self.process is not None and self.process.poll() is not None:
            return False
        host, _, port = self.settings.server_addr.rpartition(":")
        try:
            port_number = int(port)
        except ValueError:
            return False
        try:
            with socket.create_connection((host or "localhost", port_number), timeout=1.0):
                return True
        except OSError:
            return False

    def wait_for_ready(self) -> None:
        """Poll until the server is ready; raise RunnerError on timeout or early exit."""
        timeout = self.settings.startup_timeout
        if timeout <= 0:
            print("Using default timeout of 30 seconds for VLLM server startup")
            timeout = DEFAULT_STARTUP_TIMEOUT

        self._logger.info("Waiting for VLLM server to be ready (timeout: %ss)", timeout)

        interval = self.settings.poll_interval
        for _ in range(int(timeout / interval)):
            if self.is_ready():
                self._logger.info("VLLM server is ready")
                return
            if self.process is not None and self.process.poll() is not None:
                raise RunnerError(
                    f"python server exited with status {self.process.returncode} during startup"
                )
            time.sleep(interval)

        raise RunnerError(
            f"python server did not start within the timeout period of {timeout}s"
        )

    def stop(self) -> None:
        """Terminate the server, killing its process group if it does not exit in time."""
        proc = self.process
        if proc is None or proc.poll() is not None:
            return

        self._logger.info("Stopping VLLM server...")

        try:
            proc.send_signal(signal.SIGTERM)
        except OSError as exc:
            self._logger.info("Failed to send SIGTERM to VLLM server: %s", exc)
            try:
                proc.send_signal(signal.SIGINT)
            except OSError as exc2:
                self._logger.info("Failed to send SIGINT to VLLM server: %s", exc2)

        try:
            code = proc.wait(timeout=self.settings.shutdown_timeout)
        except subprocess.TimeoutExpired:
            try:
                os.killpg(proc.pid, signal.SIGKILL)
            except (OSError, AttributeError):
                pass
            self._logger.info("VLLM server did not stop gracefully, sending SIGKILL...")
            try:
                proc.kill()
            except OSError as exc:
                self._logger.info("Failed to kill VLLM server process: %s", exc)
            proc.wait()
            return

        if code != 0:
            self._logger.info("VLLM server stopped with error: exit status %s", code)
        else:
            self._logger.info("VLLM server stopped gracefully")