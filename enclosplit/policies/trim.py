from __future__ import annotations

from ..types import CapturedPart


class Trim:
    """Strips leading and trailing characters found in ``cutset``."""

    def __init__(self, cutset: str) -> None:
        self.cutset = cutset

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        _ = part
        return text.strip(self.cutset), True


TRIM_SPACES = Trim(" ")
