"""Small string, JSON and error helpers."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from typing import Any


def string_in_slice(value: str, items: Iterable[str]) -> bool:
    """Return True if value is one of items."""
    return value in items


def _encode_default(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Serialise value to compact JSON; raise TypeError if it cannot be encoded."""
    return json.dumps(value, separators=(",", ":"), default=_encode_default)


def from_json(text: str) -> Any:
    """Parse a JSON document; raise json.JSONDecodeError on malformed input."""
    return json.loads(text)


def trim_and_lower(text: str) -> str:
    """Strip surrounding whitespace and lower-case the text."""
    return text.strip().lower()


def format_error(err: BaseException | None, context: str) -> Exception | None:
    """Wrap err in an error prefixed with context, or return None for no error."""
    if err is None:
        return None
    wrapped = RuntimeError(f"{context}: {err}")
    wrapped.__cause__ = err
    return wrapped