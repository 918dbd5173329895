"""Nested list rendering.

Items are normalized into `ListItem` trees up front, then rendered
depth-first: children are emitted directly beneath their parent, ordered
lists number each nested level from 1, and loose lists put one blank
line after every item (subtree included).

Example:
    P.unordered_list([
        "Repro on iOS",
        {"content": "Only with campaign code", "children": ["Via query param"]},
    ], tight=True)

The same options apply to every nesting level.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from promptmd.exceptions import OptionsError
from promptmd.nodes import MDInput, Text, to_renderable
from promptmd.prompt import Prompt


class ListOptions(BaseModel):
    """Rendering options for ordered and unordered lists.

    Out-of-range numbers are clamped rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bullet: Literal["-", "*", "+"] = "-"
    start: int = 1
    tight: bool = False
    indent: int = 2

    @field_validator("start")
    @classmethod
    def _clamp_start(cls, value: int) -> int:
        return max(1, value)

    @field_validator("indent")
    @classmethod
    def _clamp_indent(cls, value: int) -> int:
        return max(0, value)

    def merge(
        self, options: ListOptions | Mapping[str, Any] | None = None, **overrides: Any
    ) -> ListOptions:
        """Return new options with the given fields replaced.

        Raises:
            OptionsError: If a field is unknown or has an unusable value
        """
        updates: dict[str, Any] = {}
        if isinstance(options, ListOptions):
            updates.update(options.model_dump(exclude_unset=True))
        elif options is not None:
            updates.update(options)
        updates.update(overrides)
        if not updates:
            return self
        try:
            return ListOptions.model_validate({**self.model_dump(), **updates})
        except ValidationError as e:
            raise OptionsError(f"Invalid list options: {e}") from e


DEFAULT_LIST_OPTIONS = ListOptions()


class ListItem(BaseModel):
    """One list entry and its nested entries."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: Any = None
    children: tuple[ListItem, ...] = ()

    @classmethod
    def coerce(cls, item: Any) -> ListItem:
        """Normalize a bare input or a `{"content", "children"}` mapping."""
        if isinstance(item, ListItem):
            return item
        if isinstance(item, Mapping) and "content" in item:
            children = item.get("children") or ()
            return cls(
                content=item["content"],
                children=tuple(cls.coerce(child) for child in children),
            )
        return cls(content=item)


ListInput = MDInput | ListItem | Mapping[str, Any]


def render_list(items: Iterable[ListItem], ordered: bool, options: ListOptions) -> str:
    """Render normalized items to Markdown lines."""
    lines: list[str] = []

    def walk(nodes: Iterable[ListItem], level: int, first_number: int) -> None:
        pad = " " * (level * options.indent)
        for number, item in enumerate(nodes, start=first_number):
            marker = f"{number}." if ordered else options.bullet
            rendered = to_renderable(item.content).render().rstrip("\n")
            first, *rest = rendered.split("\n")
            lines.append(f"{pad}{marker} {first}")
            hang = pad + " " * (len(marker) + 1)
            lines.extend(hang + line if line.strip() else "" for line in rest)

            if item.children:
                walk(item.children, level + 1, 1)

            if not options.tight and lines[-1] != "":
                lines.append("")

    walk(items, 0, options.start if ordered else 1)

    while lines and lines[-1] == "":
        lines.pop()
    return "\n".join(lines) + "\n" if lines else ""


def _build(
    items: Iterable[ListInput],
    ordered: bool,
    defaults: ListOptions,
    options: ListOptions | Mapping[str, Any] | None,
    overrides: dict[str, Any],
) -> Prompt:
    resolved = defaults.merge(options, **overrides)
    nodes = [ListItem.coerce(item) for item in items or ()]
    return Prompt(Text(render_list(nodes, ordered, resolved)))


def unordered_list(
    items: Iterable[ListInput],
    options: ListOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Prompt:
    """Bulleted list. `start` is accepted but ignored."""
    return _build(items, False, DEFAULT_LIST_OPTIONS, options, overrides)


def ordered_list(
    items: Iterable[ListInput],
    options: ListOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Prompt:
    """Numbered list starting at `start` (nested levels restart at 1)."""
    return _build(items, True, DEFAULT_LIST_OPTIONS, options, overrides)


def list_builders(defaults: ListOptions) -> dict[str, Callable[..., Prompt]]:
    """List builders whose options start from `defaults` instead of the built-ins."""

    def configured_unordered_list(
        items: Iterable[ListInput],
        options: ListOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Prompt:
        return _build(items, False, defaults, options, overrides)

    def configured_ordered_list(
        items: Iterable[ListInput],
        options: ListOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Prompt:
        return _build(items, True, defaults, options, overrides)

    return {
        "unordered_list": configured_unordered_list,
        "ordered_list": configured_ordered_list,
    }
