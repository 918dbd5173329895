"""Jinja2-backed templates.

Template text is trusted Markdown; every interpolated value goes through
the normal input pipeline, so scalars are escaped and nodes are not.

Example:
    P.template("Hello {{ name | bold }}, you have {{ count }} tasks.", name="*Ann*", count=3)
    # Hello **\\*Ann\\***, you have 3 tasks.
"""

import logging
from functools import lru_cache
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError

from promptmd import inline
from promptmd.exceptions import TemplateError
from promptmd.nodes import Text, to_renderable
from promptmd.prompt import Prompt

logger = logging.getLogger(__name__)


def _finalize(value: Any) -> str:
    return to_renderable(value).render()


@lru_cache(maxsize=1)
def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (read-only after creation)."""
    env = Environment(
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        finalize=_finalize,
    )
    env.filters.update(
        {
            "bold": inline.bold,
            "italic": inline.italic,
            "strike": inline.strike,
            "code": inline.code_inline,
            "raw": lambda value: inline.raw(str(value)),
        }
    )
    return env


def template(source: str, **values: Any) -> Prompt:
    """Render `source` with `values` into a single leaf.

    Raises:
        TemplateError: If the template does not compile or uses an undefined name
    """
    env = get_jinja_env()
    try:
        compiled = env.from_string(source)
        rendered = compiled.render(**values)
    except TemplateSyntaxError as e:
        raise TemplateError(f"Invalid template at line {e.lineno}: {e.message}") from e
    except UndefinedError as e:
        raise TemplateError(f"Template value missing: {e.message}") from e
    logger.debug("Rendered template with %d value(s)", len(values))
    return Prompt(Text(rendered))
