"""Inline builders: text, emphasis, code spans and links."""

from promptmd.escape import escape_backtick, escape_href, escape_inline, split_whitespace
from promptmd.nodes import MDInput, Text, is_renderable, to_renderable
from promptmd.prompt import Prompt


def text(value: str) -> Prompt:
    """Plain text with Markdown specials escaped."""
    return Prompt(Text(escape_inline(value)))


def raw(value: str) -> Prompt:
    """Trusted Markdown, emitted as-is."""
    return Prompt(Text(value))


def space() -> Prompt:
    return Prompt(Text(" "))


def line_break() -> Prompt:
    """Hard line break (two spaces and a newline)."""
    return Prompt(Text("  \n"))


def newline(count: int = 1) -> Prompt:
    return Prompt(Text("\n" * max(1, int(count))))


def wrap_with_delimiters(open_: str, close: str, value: MDInput) -> Prompt:
    """Wrap rendered content in delimiters, keeping outer whitespace outside.

    `"  text  "` becomes `"  **text**  "` rather than `"**  text  **"`,
    which most renderers would not treat as emphasis.
    """
    leading, core, trailing = split_whitespace(to_renderable(value).render())
    return Prompt(Text(f"{leading}{open_}{core}{close}{trailing}"))


def bold(value: MDInput) -> Prompt:
    return wrap_with_delimiters("**", "**", value)


def italic(value: MDInput) -> Prompt:
    return wrap_with_delimiters("*", "*", value)


def strike(value: MDInput) -> Prompt:
    return wrap_with_delimiters("~~", "~~", value)


def code_inline(value: MDInput) -> Prompt:
    """Inline code span.

    Scalars are taken literally (no prose escaping); only backticks in the
    trimmed core are escaped.
    """
    if is_renderable(value):
        rendered = value.render()  # type: ignore[union-attr]
    else:
        rendered = "" if value is None else str(value)
    leading, core, trailing = split_whitespace(rendered)
    return Prompt(Text(f"{leading}`{escape_backtick(core)}`{trailing}"))


def link(label: MDInput, href: str) -> Prompt:
    return Prompt(Text(f"[{to_renderable(label).render()}]({escape_href(href)})"))
