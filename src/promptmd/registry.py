"""Builder namespace and capability composition.

`P` is the default registry: a stateless namespace exposing every builder
as an attribute. `extend` derives a new registry that keeps the base
builders and adds (or replaces) named ones. Additions that need other
builders receive the derived registry explicitly.

Usage:
    # Mapping form: each addition takes the registry as its first argument
    MyP = P.extend({
        "callout": lambda md, title, body: md.concat(md.heading(3, title), md.blockquote(body)),
    })

    # Factory form: the function receives the registry and returns additions
    WithWarn = P.extend(lambda md: {
        "warn": lambda msg: md.paragraph(md.bold("Warning: ").append(msg)),
    })
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from functools import partial
from types import MappingProxyType
from typing import Any, Protocol

from promptmd import blocks, conditionals, inline, lists, templates
from promptmd.config import PromptConfig
from promptmd.exceptions import BuilderNotFoundError
from promptmd.nodes import MDInput
from promptmd.prompt import Prompt

logger = logging.getLogger(__name__)

Builder = Callable[..., Prompt]


class Builders(Protocol):
    """The built-in builder capability every registry provides."""

    def text(self, value: str) -> Prompt: ...

    def raw(self, value: str) -> Prompt: ...

    def space(self) -> Prompt: ...

    def line_break(self) -> Prompt: ...

    def newline(self, count: int = 1) -> Prompt: ...

    def empty(self) -> Prompt: ...

    def from_input(self, value: MDInput) -> Prompt: ...

    def concat(self, *items: MDInput) -> Prompt: ...

    def join(self, items: Iterable[MDInput], separator: MDInput) -> Prompt: ...

    def bold(self, value: MDInput) -> Prompt: ...

    def italic(self, value: MDInput) -> Prompt: ...

    def strike(self, value: MDInput) -> Prompt: ...

    def code_inline(self, value: MDInput) -> Prompt: ...

    def link(self, label: MDInput, href: str) -> Prompt: ...

    def heading(self, level: int, content: MDInput) -> Prompt: ...

    def paragraph(self, *parts: MDInput) -> Prompt: ...

    def blockquote(self, content: MDInput) -> Prompt: ...

    def code_block(self, code: str, lang: str | None = None) -> Prompt: ...

    def horizontal_rule(self) -> Prompt: ...

    def table(
        self,
        headers: Sequence[MDInput],
        rows: Iterable[Sequence[MDInput]],
        align: Sequence[str | None] = (),
    ) -> Prompt: ...

    def unordered_list(
        self, items: Iterable[Any], options: Any = None, **overrides: Any
    ) -> Prompt: ...

    def ordered_list(
        self, items: Iterable[Any], options: Any = None, **overrides: Any
    ) -> Prompt: ...

    def If(  # noqa: N802
        self,
        condition: Any = None,
        when_true: Any = None,
        when_false: Any = None,
        *,
        then: Any = None,
        else_: Any = None,
    ) -> Prompt: ...

    def Switch(self, value: Any, branches: Iterable[Any]) -> Prompt: ...  # noqa: N802

    def Map(  # noqa: N802
        self, items: Iterable[Any] | None, fn: Callable[[Any, int], Any]
    ) -> Prompt: ...

    def template(self, source: str, **values: Any) -> Prompt: ...


BASE_BUILDERS: Mapping[str, Builder] = MappingProxyType(
    {
        "text": inline.text,
        "raw": inline.raw,
        "space": inline.space,
        "line_break": inline.line_break,
        "newline": inline.newline,
        "bold": inline.bold,
        "italic": inline.italic,
        "strike": inline.strike,
        "code_inline": inline.code_inline,
        "link": inline.link,
        "empty": blocks.empty,
        "from_input": blocks.from_input,
        "concat": blocks.concat,
        "join": blocks.join,
        "heading": blocks.heading,
        "paragraph": blocks.paragraph,
        "blockquote": blocks.blockquote,
        "code_block": blocks.code_block,
        "horizontal_rule": blocks.horizontal_rule,
        "table": blocks.table,
        "unordered_list": lists.unordered_list,
        "ordered_list": lists.ordered_list,
        "If": conditionals.If,
        "Switch": conditionals.Switch,
        "Map": conditionals.Map,
        "template": templates.template,
    }
)


class BuilderRegistry:
    """Named set of builders, reachable as attributes.

    Registries are never modified after construction; `extend` and
    `configured` return new ones.
    """

    def __init__(self, builders: Mapping[str, Builder] = BASE_BUILDERS) -> None:
        self._builders: Mapping[str, Builder] = MappingProxyType(dict(builders))

    def __getattr__(self, name: str) -> Builder:
        builders = self.__dict__.get("_builders")
        if builders is None or name.startswith("__"):
            raise AttributeError(name)
        try:
            return builders[name]
        except KeyError:
            raise BuilderNotFoundError(name, list(builders)) from None

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._builders})

    def names(self) -> list[str]:
        """List all builder names."""
        return list(self._builders)

    def require(self, name: str) -> Builder:
        """Get a builder by name, raising if not found."""
        return getattr(self, name)  # type: ignore[no-any-return]

    def extend(
        self,
        extension: Mapping[str, Callable[..., Prompt]]
        | Callable[[BuilderRegistry], Mapping[str, Builder]],
    ) -> BuilderRegistry:
        """Derive a registry with additional builders.

        Args:
            extension: Either a mapping of functions taking the derived
                registry as first argument, or a function that receives
                the derived registry and returns a mapping of builders.

        Returns:
            New registry; this one is unchanged
        """
        derived = BuilderRegistry(self._builders)
        if isinstance(extension, Mapping):
            additions: Mapping[str, Builder] = {
                name: partial(fn, derived) for name, fn in extension.items()
            }
        else:
            additions = extension(derived)

        for name in additions:
            if name in self._builders:
                logger.debug("Builder '%s' overridden by extension", name)
        derived._builders = MappingProxyType({**self._builders, **additions})
        logger.debug("Extended registry with %d builder(s)", len(additions))
        return derived

    def configured(self, config: PromptConfig) -> BuilderRegistry:
        """Derive a registry whose list builders start from `config` defaults."""
        return self.extend(lambda _registry: lists.list_builders(config.lists))


P = BuilderRegistry()
