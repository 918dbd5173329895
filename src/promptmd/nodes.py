"""Renderable node model.

Every document is a tree of immutable nodes. A `Text` leaf holds final
Markdown; a `Group` concatenates its children with no separator.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from promptmd.escape import escape_inline


@runtime_checkable
class Renderable(Protocol):
    """Anything that deterministically renders to a Markdown string."""

    def render(self) -> str:
        """Render to Markdown. Must be pure and repeatable."""
        ...


# Accepted wherever content is expected. None renders as empty.
MDInput = Union[str, int, float, bool, Renderable, None]


@dataclass(frozen=True)
class Text:
    """Leaf holding Markdown that is already safe (never re-escaped)."""

    text: str = ""

    def render(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Group:
    """Composite node rendering its children back to back."""

    children: tuple[Renderable, ...] = ()

    def render(self) -> str:
        return "".join(child.render() for child in self.children)

    def __str__(self) -> str:
        return self.render()


EMPTY = Text("")


def is_renderable(value: object) -> bool:
    """Check whether a value is already a node (and must not be escaped)."""
    return isinstance(value, Renderable)


def to_renderable(value: MDInput) -> Renderable:
    """Normalize any input into a node.

    None becomes an empty leaf, existing nodes pass through untouched and
    any other scalar is stringified and inline-escaped.
    """
    if value is None:
        return EMPTY
    if is_renderable(value):
        return value  # type: ignore[return-value]
    return Text(escape_inline(str(value)))


def group(items: Iterable[MDInput]) -> Group:
    """Build a Group from raw inputs."""
    return Group(tuple(to_renderable(item) for item in items))


def join(items: Iterable[MDInput], separator: MDInput) -> Group:
    """Build a Group with `separator` between (not around) the items."""
    sep = to_renderable(separator)
    parts: list[Renderable] = []
    for index, item in enumerate(items):
        if index:
            parts.append(sep)
        parts.append(to_renderable(item))
    return Group(tuple(parts))
