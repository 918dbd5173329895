"""Composable Markdown builders for structured prompts and documents.

This package provides:
- Immutable renderable nodes with safe inline escaping
- Inline, block, table and nested list builders
- Lazy conditional and switch constructs
- A builder registry (`P`) that can be extended with custom builders

Example:
    from promptmd import P

    doc = P.heading(2, "Ticket Summary").append(
        P.paragraph(P.bold("Issue: ").append("Checkout fails on mobile.")),
        P.unordered_list(["Repro on iOS 18", "No errors logged"], tight=True),
    )
    print(doc.render())
"""

from promptmd.blocks import (
    blockquote,
    code_block,
    concat,
    empty,
    from_input,
    heading,
    horizontal_rule,
    join,
    paragraph,
    table,
)
from promptmd.conditionals import If, Map, Switch, SwitchBranch
from promptmd.config import PromptConfig, load_config
from promptmd.escape import escape_inline, fence
from promptmd.exceptions import (
    BuilderNotFoundError,
    ConfigurationError,
    OptionsError,
    PromptError,
    TemplateError,
)
from promptmd.inline import (
    bold,
    code_inline,
    italic,
    line_break,
    link,
    newline,
    raw,
    space,
    strike,
    text,
    wrap_with_delimiters,
)
from promptmd.lists import ListItem, ListOptions, ordered_list, unordered_list
from promptmd.nodes import Group, MDInput, Renderable, Text, is_renderable, to_renderable
from promptmd.prompt import Prompt
from promptmd.registry import BASE_BUILDERS, BuilderRegistry, Builders, P
from promptmd.templates import template

__all__ = [
    # Facade
    "P",
    "Prompt",
    "BuilderRegistry",
    "Builders",
    "BASE_BUILDERS",
    # Nodes
    "Renderable",
    "MDInput",
    "Text",
    "Group",
    "to_renderable",
    "is_renderable",
    # Inline
    "text",
    "raw",
    "space",
    "line_break",
    "newline",
    "wrap_with_delimiters",
    "bold",
    "italic",
    "strike",
    "code_inline",
    "link",
    # Blocks
    "empty",
    "from_input",
    "concat",
    "join",
    "heading",
    "paragraph",
    "blockquote",
    "code_block",
    "horizontal_rule",
    "table",
    # Lists
    "ListItem",
    "ListOptions",
    "unordered_list",
    "ordered_list",
    # Conditionals
    "If",
    "Switch",
    "SwitchBranch",
    "Map",
    "template",
    # Escaping
    "escape_inline",
    "fence",
    # Configuration
    "PromptConfig",
    "load_config",
    # Errors
    "PromptError",
    "BuilderNotFoundError",
    "OptionsError",
    "ConfigurationError",
    "TemplateError",
]
