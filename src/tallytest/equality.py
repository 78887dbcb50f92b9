"""Strict equality: same exact type and value for scalars, identity otherwise."""

from __future__ import annotations

from typing import Any

_SCALAR_TYPES = (type(None), bool, int, float, complex, str, bytes)


def strict_equals(a: Any, b: Any) -> bool:
    """Return True when *a* and *b* are strictly equal.

    Scalars need the exact same type and an equal value, so ``1`` never
    equals ``"1"``, ``True`` or ``1.0``, and ``nan`` never equals itself.
    Any other object only equals itself.
    """
    if type(a) in _SCALAR_TYPES:
        return type(a) is type(b) and a == b
    return a is b


def strict_not_equals(a: Any, b: Any) -> bool:
    return not strict_equals(a, b)
