from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Protocol

from tallytest.config import RunConfig
from tallytest.equality import strict_equals, strict_not_equals
from tallytest.expected import CaughtError, ErrorMessage, expected_error
from tallytest.results import CheckResult, Summary
from tallytest.verbose import setup_logger


class CheckLogger(Protocol):
    """Anything with string-accepting debug/info/error methods, e.g. logging.Logger."""

    def debug(self, msg: str) -> Any: ...

    def info(self, msg: str) -> Any: ...

    def error(self, msg: str) -> Any: ...


class Tests:
    """Counts passing and failing checks and logs each outcome.

    Every check call bumps ``index`` once; ``ok_count + error_count == index``
    holds after every call. Failures are logged, never raised.
    """

    # Keep pytest from collecting this class when imported into test modules
    __test__ = False

    def __init__(
        self,
        logger: CheckLogger | None = None,
        config: RunConfig | None = None,
    ):
        self.logger = logger if logger is not None else logging.getLogger("tallytest")
        self.config = config if config is not None else RunConfig()
        self.index = 0
        self.ok_count = 0
        self.error_count = 0
        self.results: list[CheckResult] = []

    @classmethod
    def from_config(cls, config: RunConfig) -> Tests:
        """Build a run whose logger is configured from *config*."""
        debug_file = Path(config.log_file) if config.log_file else None
        logger = setup_logger(
            debug_file, verbose=config.verbose, logger_name=config.logger_name
        )
        return cls(logger=logger, config=config)

    @property
    def all_passed(self) -> bool:
        return self.error_count == 0

    # --- outcome bookkeeping ---

    def _passed(self) -> None:
        self.ok_count += 1
        line = f"Test #{self.index} passed."
        self.results.append(CheckResult(self.index, True, line))
        self.logger.debug(line)

    def _failed(self, message: str | None, suffix: str = "") -> None:
        self.error_count += 1
        line = f"Test #{self.index} failed:\t{message or self.config.default_message}{suffix}"
        self.results.append(CheckResult(self.index, False, line))
        self.logger.error(line)

    # --- checks ---

    def assert_(self, condition: Any, message: str | None = None) -> None:
        """Pass when *condition* is truthy."""
        self.index += 1
        if not condition:
            self._failed(message)
        else:
            self._passed()

    def equals(self, expected: Any, actual: Any, message: str | None = None) -> None:
        """Pass when *expected* and *actual* are strictly equal."""
        self.assert_(strict_equals(expected, actual), message)

    def not_equal(self, expected: Any, actual: Any, message: str | None = None) -> None:
        """Pass when *expected* and *actual* are not strictly equal."""
        self.assert_(strict_not_equals(expected, actual), message)

    def throws(
        self,
        fn: Callable[..., Any],
        args: Iterable[Any] | None,
        err: Any,
        message: str | None = None,
    ) -> None:
        """Pass when ``fn(*args)`` raises the expected error.

        *err* is a message string, an exception (instance or class), an
        object with a ``name`` attribute, or an ``ExpectedError``. Strings
        compare against the raised message; everything else compares the
        exception class name.

        Example:
            tests.throws(int, ["x"], ValueError, "int('x') should fail")
            tests.throws(fail, [], "boom", "fail() should say boom")
        """
        expected = expected_error(err)
        call_args = list(args) if args is not None else []

        self.index += 1
        try:
            fn(*call_args)
        except Exception as exc:
            caught = CaughtError.from_exception(exc)
        else:
            self._failed(message)
            return

        if isinstance(expected, ErrorMessage):
            if self.config.legacy_string_throws:
                # Inner check counts on its own, then the outer pass below counts again
                self.assert_(expected.matches(caught), message)
            elif not expected.matches(caught):
                self._failed(message)
                return
        elif not expected.matches(caught):
            self._failed(message, " Wrong Error message.")
            return

        self._passed()

    # --- reporting ---

    def summary(self) -> Summary:
        return Summary(run=self.index, ok=self.ok_count, errors=self.error_count)

    def log(self) -> None:
        """Log the run summary at info level."""
        self.logger.info(str(self.summary()))
