from __future__ import annotations

from collections.abc import Callable

from ..types import CapturedPart

PolicyFunc = Callable[[str, CapturedPart], "tuple[str, bool]"]


class FunctionPolicy:
    """Adapts a plain function to the Policy protocol."""

    def __init__(self, func: PolicyFunc) -> None:
        self.func = func
        self.__name__ = getattr(func, "__name__", type(self).__name__)

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        return self.func(text, part)

    def __repr__(self) -> str:
        return f"FunctionPolicy({self.__name__})"


def policy(func: PolicyFunc) -> FunctionPolicy:
    """Decorator turning ``func(text, part) -> (text, keep)`` into a policy."""
    return FunctionPolicy(func)
