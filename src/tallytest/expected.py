"""Expected errors for ``Tests.throws`` and the structured form of a caught one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class CaughtError:
    """An exception raised by the function under test, reduced to name and message."""

    name: str
    message: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> CaughtError:
        if len(exc.args) == 1:
            message = str(exc.args[0])
        else:
            message = str(exc)
        return cls(name=type(exc).__name__, message=message)


@dataclass(frozen=True)
class ErrorMessage:
    """Expect an error carrying exactly this message."""

    text: str

    def matches(self, caught: CaughtError) -> bool:
        return caught.message == self.text


@dataclass(frozen=True)
class ErrorName:
    """Expect an error of this kind, compared by exception class name."""

    name: str

    @classmethod
    def of(cls, error: BaseException | type[BaseException]) -> ErrorName:
        if isinstance(error, type):
            return cls(error.__name__)
        return cls(type(error).__name__)

    def matches(self, caught: CaughtError) -> bool:
        return caught.name == self.name


ExpectedError = Union[ErrorMessage, ErrorName]


def expected_error(err: Any) -> ExpectedError:
    """Coerce the ``err`` argument of ``throws`` into an ``ExpectedError``.

    Accepted forms:
        "boom"                      -> ErrorMessage("boom")
        ValueError("x")             -> ErrorName("ValueError")
        ValueError                  -> ErrorName("ValueError")
        obj with a str ``name``     -> ErrorName(obj.name)
        ErrorMessage / ErrorName    -> unchanged

    Raises TypeError for anything else.
    """
    if isinstance(err, (ErrorMessage, ErrorName)):
        return err
    if isinstance(err, str):
        return ErrorMessage(err)
    if isinstance(err, BaseException) or (
        isinstance(err, type) and issubclass(err, BaseException)
    ):
        return ErrorName.of(err)
    name = getattr(err, "name", None)
    if isinstance(name, str):
        return ErrorName(name)
    raise TypeError(
        f"Expected error must be a message string, an exception or an object "
        f"with a 'name' attribute, got {type(err).__name__}"
    )
