"""Exceptions raised by enclosplit.

Configuration problems surface as ``ConfigurationError`` while a splitter is
being built. Every failing ``Splitter.split`` call raises exactly one
``SplittingError`` whose ``kind`` tells structural failures apart from
policy failures and wrapped foreign exceptions.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .constants import POSITION_PLACEHOLDER, UNCLOSED_FMT, UNOPENED_FMT

if TYPE_CHECKING:
    from .types import Enclosure, Segment


class ErrorKind(Enum):
    UNOPENED = "unopened"
    UNCLOSED = "unclosed"
    POLICY_FAILED = "policy_failed"
    WRAPPED = "wrapped"


class EnclosplitError(Exception):
    """Base exception for enclosplit."""


class ConfigurationError(EnclosplitError, ValueError):
    """Raised when a splitter or enclosure is misconfigured."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class SplittingError(EnclosplitError):
    """The single error type raised from ``Splitter.split``.

    Attributes:
        kind: Which failure occurred
        position: Character offset into the split input
        char: Offending character, if any
        enclosure: Enclosure involved, if any
        message: Policy supplied message (policy failures only)
    """

    def __init__(
        self,
        kind: ErrorKind,
        position: int,
        *,
        char: str | None = None,
        enclosure: Enclosure | None = None,
        message: str | None = None,
        wrapped: BaseException | None = None,
    ) -> None:
        self.kind = kind
        self.position = position
        self.char = char
        self.enclosure = enclosure
        self.message = message
        self._wrapped = wrapped
        super().__init__(self._render())

    def _render(self) -> str:
        if self.kind is ErrorKind.UNOPENED:
            return UNOPENED_FMT.format(char=self.char, position=self.position)
        if self.kind is ErrorKind.UNCLOSED:
            return UNCLOSED_FMT.format(char=self.char, position=self.position)
        if self.kind is ErrorKind.WRAPPED and self._wrapped is not None:
            return str(self._wrapped)
        return self.message or ""

    def unwrap(self) -> BaseException | None:
        """Return the foreign exception this error wraps, if any."""
        return self._wrapped

    @classmethod
    def unopened(cls, position: int, enclosure: Enclosure) -> SplittingError:
        return cls(
            ErrorKind.UNOPENED, position, char=enclosure.end, enclosure=enclosure
        )

    @classmethod
    def unclosed(cls, position: int, enclosure: Enclosure) -> SplittingError:
        return cls(
            ErrorKind.UNCLOSED, position, char=enclosure.start, enclosure=enclosure
        )

    @classmethod
    def policy_failed(
        cls, message: str, position: int, segment: Segment | None = None
    ) -> SplittingError:
        """Build the error a policy raises to reject a part.

        Args:
            message: Error message; ``{position}`` is replaced with the
                resolved position
            position: Start position of the rejected part
            segment: Optional segment the failure refers to; its start,
                enclosure and opening character take precedence

        Returns:
            A ``POLICY_FAILED`` SplittingError
        """
        char = None
        enclosure = None
        if segment is not None:
            position = segment.char_start
            enclosure = segment.enclosure
            if enclosure is not None:
                char = enclosure.start
        return cls(
            ErrorKind.POLICY_FAILED,
            position,
            char=char,
            enclosure=enclosure,
            message=message.replace(POSITION_PLACEHOLDER, str(position)),
        )

    @classmethod
    def wrap(cls, exc: BaseException, position: int) -> SplittingError:
        if isinstance(exc, SplittingError):
            return exc
        return cls(ErrorKind.WRAPPED, position, wrapped=exc)
