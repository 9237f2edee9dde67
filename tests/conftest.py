# tests/conftest.py
from collections.abc import Mapping
from typing import Any

import pytest

from notionloom.config import get_settings
from notionloom.log_config import LogLevel


class CapturingRequestLogger:
    """RequestLogger fake that records every event it receives."""

    def __init__(self):
        self.records: list[tuple[LogLevel, str, dict[str, Any]]] = []

    def log(self, level: LogLevel, message: str, fields: Mapping[str, Any]) -> None:
        self.records.append((level, message, dict(fields)))

    @property
    def messages(self) -> list[str]:
        return [message for _, message, _ in self.records]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NOTIONLOOM_* variables from the developer's shell out of the tests."""
    for name in (
        "NOTIONLOOM_AUTH",
        "NOTIONLOOM_TIMEOUT_MS",
        "NOTIONLOOM_BASE_URL",
        "NOTIONLOOM_LOG_LEVEL",
        "NOTIONLOOM_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def request_logger() -> CapturingRequestLogger:
    return CapturingRequestLogger()
