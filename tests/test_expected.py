"""Tests for expected-error coercion and matching."""

import pytest

from tallytest.expected import (
    CaughtError,
    ErrorMessage,
    ErrorName,
    expected_error,
)


class CustomError(Exception):
    pass


# --- CaughtError ---


def test_caught_error_from_single_arg_exception():
    caught = CaughtError.from_exception(ValueError("boom"))
    assert caught == CaughtError(name="ValueError", message="boom")


def test_caught_error_key_error_keeps_raw_message():
    caught = CaughtError.from_exception(KeyError("missing"))
    assert caught.message == "missing"


def test_caught_error_without_args():
    caught = CaughtError.from_exception(CustomError())
    assert caught == CaughtError(name="CustomError", message="")


def test_caught_error_with_several_args():
    caught = CaughtError.from_exception(OSError(2, "No such file"))
    assert caught.name == "FileNotFoundError"
    assert "No such file" in caught.message


# --- matching ---


def test_error_message_matches_on_message_only():
    expected = ErrorMessage("boom")
    assert expected.matches(CaughtError("ValueError", "boom"))
    assert expected.matches(CaughtError("TypeError", "boom"))
    assert not expected.matches(CaughtError("ValueError", "bang"))


def test_error_name_matches_on_name_only():
    expected = ErrorName("ValueError")
    assert expected.matches(CaughtError("ValueError", "anything"))
    assert not expected.matches(CaughtError("TypeError", "anything"))


def test_error_name_does_not_match_subclasses():
    caught = CaughtError.from_exception(CustomError("x"))
    assert not ErrorName.of(Exception).matches(caught)
    assert ErrorName.of(CustomError).matches(caught)


def test_error_name_of_instance_and_class():
    assert ErrorName.of(ValueError("x")) == ErrorName("ValueError")
    assert ErrorName.of(ValueError) == ErrorName("ValueError")


# --- expected_error coercion ---


def test_expected_error_from_string():
    assert expected_error("boom") == ErrorMessage("boom")


def test_expected_error_from_exception():
    assert expected_error(CustomError("ignored text")) == ErrorName("CustomError")
    assert expected_error(CustomError) == ErrorName("CustomError")


def test_expected_error_from_named_object():
    class Named:
        name = "RangeError"

    assert expected_error(Named()) == ErrorName("RangeError")


def test_expected_error_passes_variants_through():
    variant = ErrorMessage("x")
    assert expected_error(variant) is variant


@pytest.mark.parametrize("bad", [None, 3, object(), int])
def test_expected_error_rejects_other_values(bad):
    with pytest.raises(TypeError):
        expected_error(bad)
