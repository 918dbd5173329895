"""The `Prompt` node wrapper and its chaining API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from promptmd.lazy import is_truthy
from promptmd.nodes import EMPTY, Group, MDInput, Renderable, to_renderable


@dataclass(frozen=True)
class Prompt:
    """Immutable document fragment returned by every builder.

    Example:
        doc = P.heading(2, "Ticket").append(P.paragraph("Checkout fails."))
        print(doc.render())

    Chain methods never modify the receiver; each returns a new Prompt.
    """

    node: Renderable = EMPTY

    @classmethod
    def from_input(cls, value: MDInput) -> Prompt:
        """Wrap any input, escaping scalars."""
        if isinstance(value, Prompt):
            return value
        return cls(to_renderable(value))

    def render(self) -> str:
        """Render the fragment to Markdown."""
        return self.node.render()

    def __str__(self) -> str:
        return self.render()

    def append(self, *items: MDInput) -> Prompt:
        """Return a new Prompt with `items` concatenated after this one."""
        return Prompt(Group((self.node, *(to_renderable(item) for item in items))))

    def bold(self) -> Prompt:
        from promptmd import inline

        return inline.bold(self)

    def italic(self) -> Prompt:
        from promptmd import inline

        return inline.italic(self)

    def strike(self) -> Prompt:
        from promptmd import inline

        return inline.strike(self)

    def code_inline(self) -> Prompt:
        from promptmd import inline

        return inline.code_inline(self)

    def link(self, href: str) -> Prompt:
        """Use this fragment as the text of a link to `href`."""
        from promptmd import inline

        return inline.link(self, href)

    def if_(self, condition: Any) -> Prompt:
        """Keep this fragment when `condition` holds, otherwise render nothing.

        A callable condition is invoked exactly once.
        """
        if is_truthy(condition):
            return self
        return Prompt()
