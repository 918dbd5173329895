"""promptmd exception hierarchy.

Builders themselves are total: any scalar, Renderable or None renders.
Errors are raised only at the outer surfaces (registry lookup, option
parsing, configuration and templates).

Usage:
    from promptmd.exceptions import BuilderNotFoundError, PromptError

    try:
        md.require("callout")
    except BuilderNotFoundError as e:
        print(f"Unknown builder: {e.name}")
    except PromptError as e:
        print(f"promptmd error: {e}")
"""


class PromptError(Exception):
    """Base exception for all promptmd errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BuilderNotFoundError(PromptError, AttributeError):
    """Raised when a registry has no builder under the requested name."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        available = available or []
        message = f"Builder '{name}' not found"
        if available:
            message += f". Available: {', '.join(sorted(available))}"
        super().__init__(message)
        # AttributeError.__init__ resets `name`
        self.name = name
        self.available = available


class OptionsError(PromptError, ValueError):
    """Raised when builder options cannot be parsed (e.g. unknown bullet)."""

    pass


class ConfigurationError(PromptError):
    """Error in promptmd configuration.

    Raised when the YAML file is malformed or holds invalid values.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path:
            message = f"{message} ({path})"
        super().__init__(message)


class TemplateError(PromptError):
    """Raised when a template fails to compile or references an undefined value."""

    pass
