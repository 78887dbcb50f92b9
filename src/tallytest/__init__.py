"""Minimal unit-testing helper: counts checks, logs outcomes, reports a summary."""

from tallytest.config import RunConfig, load_config
from tallytest.expected import (
    CaughtError,
    ErrorMessage,
    ErrorName,
    ExpectedError,
    expected_error,
)
from tallytest.results import CheckResult, Summary
from tallytest.schema import generate_json_schema, write_json_schema
from tallytest.tests import CheckLogger, Tests
from tallytest.verbose import setup_logger

__all__ = [
    "CaughtError",
    "CheckLogger",
    "CheckResult",
    "ErrorMessage",
    "ErrorName",
    "ExpectedError",
    "RunConfig",
    "Summary",
    "Tests",
    "expected_error",
    "generate_json_schema",
    "load_config",
    "setup_logger",
    "write_json_schema",
]
