"""A small leveled logger writing prefixed lines to standard error."""

from __future__ import annotations

import logging
import sys
from typing import Any, NoReturn

_LOG = logging.getLogger("edgellm")


def _ensure_handler() -> None:
    if not _LOG.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(message)s", datefmt="%Y/%m/%d %H:%M:%S")
        )
        _LOG.addHandler(handler)
    _LOG.setLevel(logging.DEBUG)


def _format(tag: str, msg: str, args: tuple[Any, ...]) -> str:
    fields = " ".join(str(arg) for arg in args)
    return f"[{tag}] {msg} [{fields}]"


class Logger:
    """Logger with a configured level; only debug output depends on it."""

    def __init__(self, level: str) -> None:
        self.level = level
        _ensure_handler()

    def info(self, msg: str, *args: Any) -> None:
        _LOG.info(_format("INFO", msg, args))

    def error(self, msg: str, *args: Any) -> None:
        _LOG.error(_format("ERROR", msg, args))

    def debug(self, msg: str, *args: Any) -> None:
        if self.level == "debug":
            _LOG.debug(_format("DEBUG", msg, args))

    def warn(self, msg: str, *args: Any) -> None:
        _LOG.warning(_format("WARN", msg, args))

    def fatal(self, msg: str, *args: Any) -> NoReturn:
        """Log the message and exit with status 1."""
        _LOG.critical(_format("FATAL", msg, args))
        raise SystemExit(1)