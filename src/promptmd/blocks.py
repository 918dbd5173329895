"""Block-level builders.

Every block ends with a blank line ("\\n\\n") so blocks can be concatenated
directly without extra separators.
"""

from collections.abc import Iterable, Sequence
from typing import Literal

from promptmd.escape import escape_pipe, fence
from promptmd.nodes import MDInput, Text, group, to_renderable
from promptmd.nodes import join as join_nodes
from promptmd.prompt import Prompt

Alignment = Literal["left", "center", "right"]

_ALIGN_TOKENS: dict[str, str] = {
    "left": ":---",
    "right": "---:",
    "center": ":---:",
}
_DEFAULT_ALIGN_TOKEN = "---"

BLOCK_END = "\n\n"


def empty() -> Prompt:
    return Prompt()


def from_input(value: MDInput) -> Prompt:
    return Prompt.from_input(value)


def concat(*items: MDInput) -> Prompt:
    """Combine items without separators."""
    return Prompt(group(items))


def join(items: Iterable[MDInput], separator: MDInput) -> Prompt:
    """Combine items with `separator` between each pair."""
    return Prompt(join_nodes(items, separator))


def heading(level: int, content: MDInput) -> Prompt:
    """ATX heading; `level` is clamped to 1..6."""
    level = min(6, max(1, int(level)))
    return Prompt(Text(f"{'#' * level} {to_renderable(content).render()}{BLOCK_END}"))


def paragraph(*parts: MDInput) -> Prompt:
    return Prompt(Text(group(parts).render() + BLOCK_END))


def blockquote(content: MDInput) -> Prompt:
    """Prefix every line of the rendered content (blank ones too) with `> `."""
    lines = to_renderable(content).render().split("\n")
    quoted = "\n".join(f"> {line}" for line in lines)
    return Prompt(Text(quoted + BLOCK_END))


def code_block(code: str, lang: str | None = None) -> Prompt:
    """Fenced code block. The code is never inline-escaped."""
    return Prompt(Text(fence(code, lang) + BLOCK_END))


def horizontal_rule() -> Prompt:
    return Prompt(Text("---" + BLOCK_END))


def _cell(value: MDInput) -> str:
    return escape_pipe(to_renderable(value).render())


def _row(cells: Iterable[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def table(
    headers: Sequence[MDInput],
    rows: Iterable[Sequence[MDInput]],
    align: Sequence[Alignment | None] = (),
) -> Prompt:
    """Pipe table with an alignment divider under the header.

    Columns without an entry in `align` get the plain `---` divider.
    Row lengths are not checked against the header.

    Example:
        P.table(["Feature", "Supported"], [["Lists", "Yes"]], ["left", "center"])
    """
    lines = [_row(_cell(header) for header in headers)]
    divider = []
    for index in range(len(headers)):
        alignment = align[index] if index < len(align) else None
        divider.append(_ALIGN_TOKENS.get(alignment or "", _DEFAULT_ALIGN_TOKEN))
    lines.append(_row(divider))
    for row in rows:
        lines.append(_row(_cell(value) for value in row))
    return Prompt(Text("\n".join(lines) + BLOCK_END))
