"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up tallytest loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tallytest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


class RecordingLogger:
    """Logger collaborator that keeps every (level, message) call."""

    def __init__(self):
        self.records: list[tuple[str, str]] = []

    def debug(self, msg):
        self.records.append(("debug", msg))

    def info(self, msg):
        self.records.append(("info", msg))

    def error(self, msg):
        self.records.append(("error", msg))

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m in self.records if lvl == level]


@pytest.fixture
def recorder():
    return RecordingLogger()
