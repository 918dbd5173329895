"""Tests for the builder registry and extension."""

import pytest

from promptmd import (
    BASE_BUILDERS,
    BuilderNotFoundError,
    BuilderRegistry,
    Builders,
    ListOptions,
    P,
    PromptConfig,
    heading,
)


def _protocol_members() -> list[str]:
    return [
        name
        for name, value in vars(Builders).items()
        if callable(value) and not name.startswith("_")
    ]


class TestBaseRegistry:
    """Tests for the default namespace."""

    def test_exposes_every_builder(self) -> None:
        for name in _protocol_members():
            assert name in P
            assert callable(getattr(P, name))
        assert sorted(_protocol_members()) == sorted(BASE_BUILDERS)

    def test_builders_are_plain_functions(self) -> None:
        assert P.heading is heading
        assert P.heading(2, "Title").render() == "## Title\n\n"

    def test_unknown_builder(self) -> None:
        with pytest.raises(BuilderNotFoundError, match="Builder 'callout' not found"):
            P.callout("x")
        assert not hasattr(P, "callout")

    def test_require(self) -> None:
        assert P.require("bold")("x").render() == "**x**"
        with pytest.raises(BuilderNotFoundError) as exc_info:
            P.require("nope")
        assert exc_info.value.name == "nope"
        assert "heading" in exc_info.value.available

    def test_names(self) -> None:
        assert "unordered_list" in P.names()
        assert "Switch" in dir(P)


class TestExtend:
    """Tests for capability composition."""

    def test_mapping_form_receives_registry(self) -> None:
        MyP = P.extend(
            {
                "callout": lambda md, title, body: md.concat(
                    md.heading(3, title), md.blockquote(body)
                ),
            }
        )
        out = MyP.callout("Note", "Use responsibly.").render()
        assert out == "### Note\n\n> Use responsibly.\n\n"

    def test_factory_form(self) -> None:
        WithWarn = P.extend(
            lambda md: {"warn": lambda msg: md.paragraph(md.bold("Warning: ").append(msg))}
        )
        out = WithWarn.warn("This is experimental.").render()
        assert out == "**Warning:** This is experimental.\n\n"

    def test_base_is_unchanged(self) -> None:
        P.extend({"callout": lambda md: md.empty()})
        assert "callout" not in P

    def test_additions_see_each_other(self) -> None:
        md = P.extend(
            lambda md: {
                "outer": lambda: md.inner().bold(),
                "inner": lambda: md.text("x"),
            }
        )
        assert md.outer().render() == "**x**"

    def test_override_builtin(self) -> None:
        md = P.extend({"heading": lambda md, level, content: md.raw(f"H{level}")})
        assert md.heading(2, "x").render() == "H2"
        assert P.heading(2, "x").render() == "## x\n\n"

    def test_extension_chains(self) -> None:
        first = P.extend({"one": lambda md: md.raw("1")})
        second = first.extend({"two": lambda md: md.concat(md.one(), md.raw("2"))})
        assert second.two().render() == "12"
        assert "two" not in first

    def test_registry_from_scratch(self) -> None:
        md = BuilderRegistry({"only": lambda: heading(1, "x")})
        assert md.names() == ["only"]
        with pytest.raises(BuilderNotFoundError):
            md.heading(1, "x")


class TestConfigured:
    """Tests for registries built from configuration."""

    def test_list_defaults_apply(self) -> None:
        md = P.configured(PromptConfig(lists=ListOptions(bullet="*", tight=True)))
        assert md.unordered_list(["a", "b"]).render() == "* a\n* b\n"
        assert md.ordered_list(["a", "b"]).render() == "1. a\n2. b\n"

    def test_call_options_override_defaults(self) -> None:
        md = P.configured(PromptConfig(lists=ListOptions(bullet="*", tight=True)))
        assert md.unordered_list(["a", "b"], tight=False).render() == "* a\n\n* b\n"

    def test_other_builders_untouched(self) -> None:
        md = P.configured(PromptConfig())
        assert md.heading is P.heading
