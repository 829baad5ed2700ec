import logging

import pytest

from edgellm.logger import Logger


def _messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == "edgellm"]


def test_info_prefix_and_fields(caplog):
    caplog.set_level(logging.DEBUG)
    Logger("info").info("Request processed", "method", "GET", "status", 200)
    messages = _messages(caplog)
    assert len(messages) == 1
    assert messages[0].startswith("[INFO] Request processed")
    assert messages[0].endswith("[method GET status 200]")


def test_info_without_fields(caplog):
    caplog.set_level(logging.DEBUG)
    Logger("info").info("Health check requested")
    assert _messages(caplog) == ["[INFO] Health check requested []"]


def test_error_and_warn_prefixes(caplog):
    caplog.set_level(logging.DEBUG)
    log = Logger("info")
    log.error("boom")
    log.warn("careful")
    messages = _messages(caplog)
    assert messages[0].startswith("[ERROR] boom")
    assert messages[1].startswith("[WARN] careful")


def test_debug_suppressed_unless_debug_level(caplog):
    caplog.set_level(logging.DEBUG)
    Logger("info").debug("hidden")
    assert _messages(caplog) == []
    Logger("debug").debug("shown", "k", "v")
    messages = _messages(caplog)
    assert len(messages) == 1
    assert messages[0].startswith("[DEBUG] shown")


def test_fatal_exits_with_status_one(caplog):
    caplog.set_level(logging.DEBUG)
    with pytest.raises(SystemExit) as excinfo:
        Logger("info").fatal("Failed to start server")
    assert excinfo.value.code == 1
    assert _messages(caplog)[0].startswith("[FATAL] Failed to start server")