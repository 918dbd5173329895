"""Tests for jinja2 templates."""

import pytest

from promptmd import P, TemplateError, bold, template


class TestTemplate:
    """Tests for template rendering."""

    def test_values_are_escaped(self) -> None:
        assert template("Hello {{ name }}!", name="*Ann*").render() == "Hello \\*Ann\\*!"

    def test_template_text_is_trusted(self) -> None:
        assert template("# {{ title }}\n", title="A").render() == "# A\n"

    def test_nodes_pass_through(self) -> None:
        assert template("{{ body }}", body=bold("x")).render() == "**x**"

    def test_filters(self) -> None:
        assert template("{{ name | bold }}", name="Ann").render() == "**Ann**"
        assert template("{{ c | code }}", c="a`b").render() == "`a\\`b`"
        assert template("{{ md | raw }}", md="*x*").render() == "*x*"

    def test_numbers(self) -> None:
        assert template("{{ n }} tasks", n=3).render() == "3 tasks"

    def test_undefined_value(self) -> None:
        with pytest.raises(TemplateError, match="missing"):
            template("{{ missing }}")

    def test_syntax_error(self) -> None:
        with pytest.raises(TemplateError, match="Invalid template"):
            template("{{ unclosed")

    def test_registered_on_facade(self) -> None:
        doc = P.concat(P.heading(2, "Hi"), P.template("{{ who }} here", who="Ann"))
        assert doc.render() == "## Hi\n\nAnn here"
