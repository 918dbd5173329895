"""Lazy branch selection: `If`, `Switch` and `Map`.

Callables passed as conditions or branch contents are invoked at most
once, and only for the branch that is actually chosen.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from promptmd.lazy import Matcher, Thunk, is_truthy
from promptmd.nodes import Group, to_renderable
from promptmd.prompt import Prompt

T = TypeVar("T")


class _Unset(Enum):
    NO_CASE = "no-case"


# Default case of a branch declared without one; it never matches.
NO_CASE = _Unset.NO_CASE


def _coalesce(preferred: Any, fallback: Any) -> Any:
    return fallback if preferred is None else preferred


def If(  # noqa: N802
    condition: Any = None,
    when_true: Any = None,
    when_false: Any = None,
    *,
    then: Any = None,
    else_: Any = None,
) -> Prompt:
    """Choose between two contents.

    `condition` may be a value or a zero-argument predicate; the result is
    judged by truthiness. Either branch may be a value or a zero-argument
    producer. `then`/`else_` are older spellings of `when_true`/`when_false`
    and lose when both are given.

    Example:
        P.If(lambda: user.is_admin, when_true=lambda: P.paragraph("Admin"))
    """
    if is_truthy(condition):
        chosen = _coalesce(when_true, then)
    else:
        chosen = _coalesce(when_false, else_)
    return Prompt.from_input(Thunk.of(chosen).force())


class SwitchBranch(BaseModel):
    """A `case` (literal or one-argument predicate) and the content it selects."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    case: Any = NO_CASE
    content: Any = None

    @classmethod
    def coerce(cls, branch: SwitchBranch | Mapping[str, Any]) -> SwitchBranch:
        if isinstance(branch, SwitchBranch):
            return branch
        return cls(case=branch.get("case", NO_CASE), content=branch.get("content"))

    def matches(self, value: Any) -> bool:
        if self.case is NO_CASE:
            return False
        return Matcher.of(self.case).matches(value)


def Switch(  # noqa: N802
    value: Any, branches: Iterable[SwitchBranch | Mapping[str, Any]]
) -> Prompt:
    """Render the content of the first branch whose case matches `value`.

    Example:
        P.Switch(42, [
            {"case": lambda n: n < 10, "content": "Small"},
            {"case": lambda n: n >= 10, "content": "Medium"},
        ])
    """
    for branch in (SwitchBranch.coerce(b) for b in branches):
        if branch.matches(value):
            return Prompt.from_input(Thunk.of(branch.content).force())
    return Prompt()


def Map(  # noqa: N802
    items: Iterable[T] | None, fn: Callable[[T, int], Any]
) -> Prompt:
    """Concatenate `fn(item, index)` for each item, in order."""
    children = tuple(to_renderable(fn(item, index)) for index, item in enumerate(items or ()))
    return Prompt(Group(children))
