from __future__ import annotations

from collections.abc import Callable

from ..errors import SplittingError
from ..types import CapturedPart, Enclosure, unescape_quoted


class NoContiguousQuotes:
    """Fails when two quote segments touch, e.g. ``"a""b"`` without double-escaping."""

    default_message = "split item cannot have contiguous quotes"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        segments = part.segments
        for prev, seg in zip(segments, segments[1:]):
            if prev.is_quote and seg.is_quote:
                raise SplittingError.policy_failed(self.message, part.char_start, seg)
        return text, True


class NoMultiQuotes:
    """Fails when a part holds more than one quote segment."""

    default_message = "split item cannot have multiple quotes"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        quotes = [seg for seg in part.segments if seg.is_quote]
        if len(quotes) > 1:
            raise SplittingError.policy_failed(
                self.message, part.char_start, quotes[1]
            )
        return text, True


class NoMultis:
    """Fails when a part is made of more than one segment."""

    default_message = "split item cannot have multiple parts"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        if len(part.segments) > 1:
            raise SplittingError.policy_failed(
                self.message, part.char_start, part.segments[1]
            )
        return text, True


QuoteRewrite = Callable[[Enclosure, str], str]


def _strip_delimiters(enclosure: Enclosure, quoted: str) -> str:
    _ = enclosure
    return quoted[1:-1]


def _rejoin(text: str, part: CapturedPart, quote_text: QuoteRewrite) -> str:
    """Rewrite the quote segments found in ``text``.

    ``text`` is the previous policy's output. It is laid over the raw part
    position for position when the lengths match, otherwise at the place it
    occurs in the raw part; text that is neither is returned unchanged. Only
    quotes lying whole inside ``text`` are rewritten.
    """
    segments = part.segments
    if not any(seg.is_quote for seg in segments):
        return text
    if len(text) == len(part.raw):
        offset = 0
    else:
        offset = part.raw.find(text)
        if offset < 0:
            return text
    base = part.char_start + offset
    pieces = []
    for seg in segments:
        start = seg.char_start - base
        end = seg.char_end - base
        lo = max(start, 0)
        hi = min(end, len(text))
        if lo >= hi:
            continue
        piece = text[lo:hi]
        if seg.is_quote and seg.enclosure is not None and (lo, hi) == (start, end):
            piece = quote_text(seg.enclosure, piece)
        pieces.append(piece)
    return "".join(pieces)


class StripQuotes:
    """Removes the delimiters of every quote segment in the part.

    Works on the text handed over by the previous policy, so it can follow
    a trim.
    """

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        return _rejoin(text, part, _strip_delimiters), True


class UnescapeQuotes:
    """Like StripQuotes, but also collapses escaped end characters."""

    def apply(self, text: str, part: CapturedPart) -> tuple[str, bool]:
        return _rejoin(text, part, unescape_quoted), True


NO_CONTIGUOUS_QUOTES = NoContiguousQuotes()
NO_MULTI_QUOTES = NoMultiQuotes()
NO_MULTIS = NoMultis()
STRIP_QUOTES = StripQuotes()
UNESCAPE_QUOTES = UnescapeQuotes()
