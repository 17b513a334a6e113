# core/compare.py
# This file is part of Seqex - Sequence Expression Matching
#
# Ordering-based predicate helpers

"""Predicate matchers built on a generic three-way comparison.

Each helper returns a :class:`~core.primitives.Predicate` matching runs of
tokens that stand in the given relation to a fixed value. Tokens that cannot
be ordered against the value raise :class:`ComparabilityError` instead of
being rejected.
"""

from typing import Any

from .exceptions import ComparabilityError
from .primitives import Predicate


def compare(a: Any, b: Any) -> int:
    """Three-way comparison: -1 if a < b, 0 if equal, 1 if a > b.

    Values that are neither ordered nor equal (disjoint sets, NaN) have no
    position relative to each other and count as incomparable.

    Raises:
        ComparabilityError: The values have no mutual ordering
    """
    try:
        if a < b:
            return -1
        if b < a:
            return 1
    except TypeError as exc:
        raise ComparabilityError(f"Cannot order {a!r} and {b!r}: {exc}") from exc
    if a == b:
        return 0
    raise ComparabilityError(f"Cannot order {a!r} and {b!r}: neither precedes the other")


def gt(value: Any) -> Predicate:
    """Tokens greater than ``value``."""
    return Predicate(lambda token: compare(token, value) > 0)


def ge(value: Any) -> Predicate:
    """Tokens greater than or equal to ``value``."""
    return Predicate(lambda token: compare(token, value) >= 0)


def eq(value: Any) -> Predicate:
    """Tokens that order equal to ``value``."""
    return Predicate(lambda token: compare(token, value) == 0)


def le(value: Any) -> Predicate:
    """Tokens less than or equal to ``value``."""
    return Predicate(lambda token: compare(token, value) <= 0)


def lt(value: Any) -> Predicate:
    """Tokens less than ``value``."""
    return Predicate(lambda token: compare(token, value) < 0)


def rng(low: Any, high: Any) -> Predicate:
    """Tokens within ``low`` and ``high``, both inclusive."""
    return Predicate(
        lambda token: compare(low, token) <= 0 and compare(token, high) <= 0
    )
