"""Enclosure-aware scanning.

``ScanContext`` walks the input once, keeping an explicit stack of open
enclosures. Whenever it meets the separator outside every enclosure (and at
the end of the input) it flushes the characters seen since the previous
boundary, together with their top-level segments, through the policy chain.

Priority at each character:

1. separator with nothing open -> boundary
2. innermost context is a quote -> only its own end matters (double-escape,
   escape-run or plain close); everything else is literal
3. innermost bracket's end, not escaped -> close
4. any registered start, not escaped -> open
5. any other registered end, not escaped -> ``unopened`` error
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import SplittingError
from ..types import CapturedPart, Enclosure, Segment, SegmentKind
from .policy_chain import PolicyChain
from .registry import EnclosureRegistry

logger = logging.getLogger(__name__)


@dataclass
class _Span:
    enclosure: Enclosure | None
    start: int
    end: int = -1


class ScanContext:
    """Per-call scanning state; never shared between split calls."""

    def __init__(
        self,
        text: str,
        separator: str,
        registry: EnclosureRegistry,
        chain: PolicyChain,
        whitespace: str,
    ) -> None:
        self.text = text
        self.length = len(text)
        self.separator = separator
        self.registry = registry
        self.chain = chain
        self.whitespace = whitespace
        self._stack: list[_Span] = []
        self._spans: list[_Span] = []
        self._last_at = 0
        self._captured: list[str] = []
        self._vetoed = 0

    def run(self) -> list[str]:
        text = self.text
        registry = self.registry
        i = 0
        while i < self.length:
            ch = text[i]
            if not self._stack:
                if ch == self.separator:
                    self._flush(i, is_last=False)
                    i += 1
                    continue
                current = None
            else:
                current = self._stack[-1].enclosure

            if current is not None and current.is_quote:
                i += self._quote_step(ch, i, current)
                continue

            opener = registry.opener(ch)
            if (
                current is not None
                and ch == current.end
                and not self._is_bracket_escaped(i, current)
            ):
                self._pop(i)
            elif opener is not None and not self._is_bracket_escaped(i, opener):
                self._push(opener, i)
            else:
                closer = registry.closer(ch)
                if closer is not None and not self._is_bracket_escaped(i, closer):
                    logger.debug("Unopened %r at position %d", ch, i)
                    raise SplittingError.unopened(i, closer)
            i += 1

        if self._stack:
            outer = self._stack[0]
            logger.debug(
                "%d enclosures still open at end of input", len(self._stack)
            )
            raise SplittingError.unclosed(outer.start, outer.enclosure)

        self._flush(self.length, is_last=True)
        return self._captured

    def _quote_step(self, ch: str, pos: int, enc: Enclosure) -> int:
        """Handle one character inside a quote; return how many were consumed."""
        if ch != enc.end:
            return 1
        if enc.is_double_escaping:
            if pos + 1 < self.length and self.text[pos + 1] == ch:
                return 2
        elif enc.escapable and self._escape_run(pos) % 2 == 1:
            return 1
        self._pop(pos)
        return 1

    def _escape_run(self, pos: int) -> int:
        # Stops at the opening delimiter; runs never overlap so this stays O(n)
        ctx = self._stack[-1]
        escape = ctx.enclosure.escape
        run = 0
        i = pos - 1
        while i > ctx.start and self.text[i] == escape:
            run += 1
            i -= 1
        return run

    def _is_bracket_escaped(self, pos: int, enc: Enclosure) -> bool:
        return (
            enc.is_bracket_escapable and pos > 0 and self.text[pos - 1] == enc.escape
        )

    def _push(self, enc: Enclosure, pos: int) -> None:
        span = _Span(enclosure=enc, start=pos)
        if not self._stack:
            self._close_fixed(pos)
            self._spans.append(span)
        self._stack.append(span)

    def _pop(self, pos: int) -> None:
        span = self._stack.pop()
        span.end = pos + 1

    def _close_fixed(self, pos: int) -> None:
        last = self._spans[-1].end if self._spans else self._last_at
        if last < pos:
            self._spans.append(_Span(enclosure=None, start=last, end=pos))

    def _segment(self, span: _Span) -> Segment:
        if span.enclosure is None:
            kind = SegmentKind.FIXED
        elif span.enclosure.is_quote:
            kind = SegmentKind.QUOTE
        else:
            kind = SegmentKind.BRACKET
        return Segment(
            char_start=span.start,
            char_end=span.end,
            kind=kind,
            enclosure=span.enclosure,
            source=self.text,
            whitespace=self.whitespace,
        )

    def _flush(self, pos: int, *, is_last: bool) -> None:
        self._close_fixed(pos)
        part = CapturedPart(
            raw=self.text[self._last_at : pos],
            char_start=self._last_at,
            total_length=self.length,
            retained=len(self._captured),
            vetoed=self._vetoed,
            is_last=is_last,
            segments=tuple(self._segment(span) for span in self._spans),
        )
        value, keep = self.chain.apply(part)
        if keep:
            self._captured.append(value)
        else:
            self._vetoed += 1
        self._last_at = pos + 1
        self._spans = []
