"""Data structures for check outcomes and run summaries."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check as it was logged.

    Attributes:
        index: Run index the outcome was logged under.
        passed: Whether the check passed.
        message: The exact line handed to the logger.
    """

    index: int
    passed: bool
    message: str


@dataclass(frozen=True)
class Summary:
    """Counters of a run at the moment it was summarized."""

    run: int
    ok: int
    errors: int

    @property
    def all_passed(self) -> bool:
        return self.errors == 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"Tests run: {self.run}, OK: {self.ok}, Errors: {self.errors}"
