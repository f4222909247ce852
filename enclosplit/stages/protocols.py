from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..types import CapturedPart


@runtime_checkable
class Policy(Protocol):
    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        """Transform, keep or drop one captured part.

        ``text`` is the output of the previous policy in the chain (the raw
        capture for the first one). Return the new text and whether to keep
        it; raise ``SplittingError.policy_failed`` to reject the whole split.
        """
        ...
