"""Shared pytest fixtures for promptmd tests."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


class CallRecorder:
    """Wraps values in callables that record every invocation."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def producer(self, name: str, value: Any) -> Callable[[], Any]:
        def produce() -> Any:
            self.calls.append(name)
            return value

        return produce

    def predicate(self, name: str, result: Any) -> Callable[..., Any]:
        def check(*args: Any) -> Any:
            self.calls.append(name)
            return result

        return check


@pytest.fixture
def recorder() -> CallRecorder:
    """Fixture that provides a fresh call recorder.

    Returns:
        CallRecorder whose `calls` list starts empty
    """
    return CallRecorder()


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Fixture that writes a promptmd.yaml into a temp directory.

    Returns:
        Function taking YAML text and returning the written path
    """

    def write(content: str) -> Path:
        path = tmp_path / "promptmd.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    return write
