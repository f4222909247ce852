"""Policies that reject or drop empty parts.

"First", "last", "inner" and "outer" follow CapturedPart: a part is first
when nothing has been retained or vetoed before it, last when it is the
end-of-input flush, outer when either holds and inner otherwise. The checks
look at the text handed over by the previous policy, so put a trim policy
in front to treat blank parts as empty.
"""

from __future__ import annotations

from ..errors import SplittingError
from ..types import CapturedPart


class NoEmpties:
    """Fails the split when a matching part is empty.

    ``message`` may contain ``{position}``.
    """

    default_message = "split items cannot be empty"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message

    def matches(self, part: CapturedPart) -> bool:
        _ = part
        return True

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        if text == "" and self.matches(part):
            raise SplittingError.policy_failed(self.message, part.char_start)
        return text, True


class NotEmptyFirst(NoEmpties):
    default_message = "first split item cannot be empty"

    def matches(self, part: CapturedPart) -> bool:
        return part.is_first


class NotEmptyLast(NoEmpties):
    default_message = "last split item cannot be empty"

    def matches(self, part: CapturedPart) -> bool:
        return part.is_last


class NotEmptyInners(NoEmpties):
    default_message = "inner items cannot be empty"

    def matches(self, part: CapturedPart) -> bool:
        return part.is_inner


class NotEmptyOuters(NoEmpties):
    default_message = "first/last items cannot be empty"

    def matches(self, part: CapturedPart) -> bool:
        return part.is_outer


class IgnoreEmpties:
    """Drops matching empty parts from the result."""

    def matches(self, part: CapturedPart) -> bool:
        _ = part
        return True

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        if text == "" and self.matches(part):
            return text, False
        return text, True


class IgnoreEmptyFirst(IgnoreEmpties):
    def matches(self, part: CapturedPart) -> bool:
        return part.is_first


class IgnoreEmptyLast(IgnoreEmpties):
    def matches(self, part: CapturedPart) -> bool:
        return part.is_last


class IgnoreEmptyInners(IgnoreEmpties):
    def matches(self, part: CapturedPart) -> bool:
        return part.is_inner


class IgnoreEmptyOuters(IgnoreEmpties):
    def matches(self, part: CapturedPart) -> bool:
        return part.is_outer


NO_EMPTIES = NoEmpties()
NOT_EMPTY_FIRST = NotEmptyFirst()
NOT_EMPTY_LAST = NotEmptyLast()
NOT_EMPTY_INNERS = NotEmptyInners()
NOT_EMPTY_OUTERS = NotEmptyOuters()
IGNORE_EMPTIES = IgnoreEmpties()
IGNORE_EMPTY_FIRST = IgnoreEmptyFirst()
IGNORE_EMPTY_LAST = IgnoreEmptyLast()
IGNORE_EMPTY_INNERS = IgnoreEmptyInners()
IGNORE_EMPTY_OUTERS = IgnoreEmptyOuters()
