import json

import pytest

from edgellm.models import HelloResponse
from edgellm.utils import format_error, from_json, string_in_slice, to_json, trim_and_lower


def test_string_in_slice():
    items = ["apple", "banana", "cherry"]
    assert string_in_slice("apple", items) is True
    assert string_in_slice("banana", items) is True
    assert string_in_slice("orange", items) is False
    assert string_in_slice("", items) is False


def test_to_json():
    text = to_json({"name": "test", "age": 25})
    assert "test" in text
    assert "25" in text


def test_to_json_round_trip():
    data = {"name": "test", "age": 25, "tags": ["a", "b"]}
    assert from_json(to_json(data)) == data


def test_to_json_encodes_response_models():
    body = HelloResponse(message="Hello from EdgeLLM!", version="1.0.0")
    assert from_json(to_json(body)) == body.to_dict()


def test_to_json_rejects_unencodable():
    with pytest.raises(TypeError):
        to_json({"value": object()})


def test_from_json():
    data = from_json('{"name":"test","age":25}')
    assert data["name"] == "test"
    assert data["age"] == float(25)


def test_from_json_rejects_malformed():
    with pytest.raises(json.JSONDecodeError):
        from_json('{"name":')


def test_trim_and_lower():
    assert trim_and_lower("  HELLO  ") == "hello"
    assert trim_and_lower("World") == "world"
    assert trim_and_lower("   ") == ""


def test_format_error():
    original = ValueError("original error")
    formatted = format_error(original, "test context")
    assert isinstance(formatted, Exception)
    assert "test context" in str(formatted)
    assert "original error" in str(formatted)
    assert formatted.__cause__ is original


def test_format_error_with_none():
    assert format_error(None, "test context") is None