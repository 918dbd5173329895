"""Markdown escaping utilities."""

import re

# Characters that carry inline meaning in Markdown prose.
INLINE_SPECIALS = "\\`*_{}[]()#+-!>"

_INLINE_RE = re.compile("([" + re.escape(INLINE_SPECIALS) + "])")

FENCE = "```"


def escape_inline(text: str) -> str:
    """Backslash-escape every inline special character in plain text.

    Only applied where raw scalar text enters a document; content that is
    already a Renderable is never passed through here again.
    """
    return _INLINE_RE.sub(r"\\\1", text)


def escape_pipe(text: str) -> str:
    """Escape pipe characters for table cells."""
    return text.replace("|", "\\|")


def escape_backtick(text: str) -> str:
    """Escape backticks to prevent code span injection."""
    return text.replace("`", "\\`")


def escape_href(href: str) -> str:
    """Percent-encode closing parentheses so `[text](href)` stays well-formed."""
    return href.replace(")", "%29")


def fence(code: str, lang: str | None = None) -> str:
    """Wrap raw code between triple-backtick fences.

    The code is emitted verbatim except for embedded ``` runs, which get a
    backslash before their last backtick so they cannot close the block.
    """
    safe = code.replace(FENCE, "``\\`")
    return f"{FENCE}{lang or ''}\n{safe}\n{FENCE}"


def split_whitespace(text: str) -> tuple[str, str, str]:
    """Split text into (leading whitespace, core, trailing whitespace).

    An all-whitespace string yields an empty core with everything leading.
    """
    start = 0
    end = len(text)
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return text[:start], text[start:end], text[end:]
