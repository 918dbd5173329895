"""Normalization of literal-or-callable arguments.

Conditions, branch contents and switch cases may each be given either as
a plain value or as a function. They are normalized once, at the builder
boundary, into `Thunk` (zero-argument) or `Matcher` (one-argument) so the
evaluators never inspect argument shapes themselves.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Thunk:
    """A literal value or a zero-argument producer, forced at most once per call."""

    value: Any = None
    producer: Callable[[], Any] | None = None

    @classmethod
    def of(cls, value: Any) -> Thunk:
        if isinstance(value, Thunk):
            return value
        if callable(value):
            return cls(producer=value)
        return cls(value=value)

    def force(self) -> Any:
        if self.producer is not None:
            return self.producer()
        return self.value


def _strict_equal(left: Any, right: Any) -> bool:
    # True == 1 in Python; a bool only ever matches another bool.
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)


@dataclass(frozen=True)
class Matcher:
    """A literal compared by strict equality, or a one-argument predicate."""

    literal: Any = None
    predicate: Callable[[Any], Any] | None = None

    @classmethod
    def of(cls, case: Any) -> Matcher:
        if isinstance(case, Matcher):
            return case
        if callable(case):
            return cls(predicate=case)
        return cls(literal=case)

    def matches(self, value: Any) -> bool:
        if self.predicate is not None:
            return bool(self.predicate(value))
        return _strict_equal(self.literal, value)


def is_truthy(condition: Any) -> bool:
    """Evaluate a literal or zero-argument predicate by plain truthiness."""
    return bool(Thunk.of(condition).force())
