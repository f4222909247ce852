from __future__ import annotations

import warnings
from collections.abc import Callable

from ..types import CapturedPart, Segment

LegacyFixer = Callable[..., "tuple[str, bool]"]


class PostElementFixer:
    """Policy wrapping an old-style ``func(text, pos, captured, *segments)`` fixer."""

    def __init__(self, func: LegacyFixer) -> None:
        self.func = func

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        segments: tuple[Segment, ...] = part.segments
        return self.func(text, part.char_start, part.retained, *segments)


def post_element_fixer(func: LegacyFixer) -> PostElementFixer:
    """Legacy API shim.

    Returns a policy that can be handed to ``Splitter.add_default_policies``.
    """
    warnings.warn(
        "post_element_fixer() is deprecated; implement the Policy protocol and "
        "use Splitter.add_default_policies(...)",
        DeprecationWarning,
        stacklevel=2,
    )
    return PostElementFixer(func)
