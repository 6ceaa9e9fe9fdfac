from __future__ import annotations

import logging

import pytest
from pythonjsonlogger import jsonlogger

from catalog_browser.logging_config import LOG_FORMAT_ENV, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _root_formatter() -> logging.Formatter:
    root = logging.getLogger()
    assert len(root.handlers) == 1
    return root.handlers[0].formatter


def test_json_is_default(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    configure_logging()
    assert isinstance(_root_formatter(), jsonlogger.JsonFormatter)


def test_plain_from_env(monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")
    configure_logging()
    formatter = _root_formatter()
    assert not isinstance(formatter, jsonlogger.JsonFormatter)


def test_force_format_wins_over_env(monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "plain")
    configure_logging(level=logging.DEBUG, force_format="json")

    assert isinstance(_root_formatter(), jsonlogger.JsonFormatter)
    assert logging.getLogger().level == logging.DEBUG


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


def test_unknown_format_falls_back_to_json(monkeypatch):
    monkeypatch.setenv(LOG_FORMAT_ENV, "yaml")
    # configure_logging replaces the root handlers, so listen on the module logger
    module_logger = logging.getLogger("catalog_browser.logging_config")
    listener = _ListHandler()
    module_logger.addHandler(listener)
    try:
        used = configure_logging()
    finally:
        module_logger.removeHandler(listener)

    assert used == "json"
    assert isinstance(_root_formatter(), jsonlogger.JsonFormatter)
    assert [r.requested_format for r in listener.records] == ["yaml"]


def test_format_name_is_case_and_space_insensitive(monkeypatch):
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    assert configure_logging(force_format=" Plain ") == "plain"
    assert not isinstance(_root_formatter(), jsonlogger.JsonFormatter)
