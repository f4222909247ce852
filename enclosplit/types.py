from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .constants import DEFAULT_WHITESPACE
from .errors import ConfigurationError


def _require_char(name: str, value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"{name} must be a single character, got {value!r}")


@dataclass(frozen=True)
class Enclosure:
    """A start/end character pair inside which the separator is inert.

    Quote enclosures are opaque: nothing but their own end character is
    recognised inside them. Bracket enclosures nest freely and may contain
    quotes.

    Attributes:
        start: Opening character
        end: Closing character
        is_quote: Whether the enclosure is a quote (opaque) enclosure
        escapable: Whether the end character can appear literally inside
        escape: Escape character; set if and only if ``escapable``
    """

    start: str
    end: str
    is_quote: bool = False
    escapable: bool = False
    escape: str | None = None

    def __post_init__(self) -> None:
        _require_char("start", self.start)
        _require_char("end", self.end)
        if self.escapable:
            _require_char("escape", self.escape)
            if not self.is_quote and self.escape in (self.start, self.end):
                raise ConfigurationError(
                    "bracket enclosures cannot be double-escaped"
                )
        elif self.escape is not None:
            raise ConfigurationError("escape is only allowed on escapable enclosures")

    @property
    def is_double_escaping(self) -> bool:
        return self.is_quote and self.escapable and self.escape == self.end

    @property
    def is_bracket_escapable(self) -> bool:
        return not self.is_quote and self.escapable


def unescape_quoted(enclosure: Enclosure, quoted: str) -> str:
    """Strip the delimiters of ``quoted`` and collapse escaped end characters."""
    inner = quoted[1:-1]
    if not enclosure.escapable:
        return inner
    return inner.replace(f"{enclosure.escape}{enclosure.end}", enclosure.end)


class SegmentKind(Enum):
    FIXED = "fixed"
    QUOTE = "quote"
    BRACKET = "bracket"


@dataclass(frozen=True)
class Segment:
    """A contiguous span of a captured part (offsets refer to the split input)."""

    char_start: int
    char_end: int
    kind: SegmentKind
    enclosure: Enclosure | None = None
    source: str = field(default="", repr=False, compare=False)
    whitespace: str = field(default=DEFAULT_WHITESPACE, repr=False, compare=False)

    @property
    def text(self) -> str:
        return self.source[self.char_start : self.char_end]

    @property
    def is_fixed(self) -> bool:
        return self.kind is SegmentKind.FIXED

    @property
    def is_quote(self) -> bool:
        return self.kind is SegmentKind.QUOTE

    @property
    def is_bracket(self) -> bool:
        return self.kind is SegmentKind.BRACKET

    def unescaped(self) -> str:
        """Return the text with quote delimiters and escapes removed.

        Quote segments lose their surrounding delimiters and, when the
        enclosure is escapable, every escape+end pair collapses to a single
        end character. Fixed and bracket segments are returned unchanged.
        """
        if not self.is_quote or self.enclosure is None:
            return self.text
        return unescape_quoted(self.enclosure, self.text)

    def is_whitespace_only(self, cutset: str | None = None) -> bool:
        """Whether a fixed segment holds only ``cutset`` characters.

        ``None`` means the splitter's configured whitespace; an empty cutset
        only matches an empty span.
        """
        if not self.is_fixed:
            return False
        return self.text.strip(self.whitespace if cutset is None else cutset) == ""


@dataclass(frozen=True)
class CapturedPart:
    """One captured part as seen by the policy chain.

    ``retained`` and ``vetoed`` count parts already accepted into / dropped
    from the result; ``is_last`` is only set for the end-of-input flush.
    """

    raw: str
    char_start: int
    total_length: int
    retained: int
    vetoed: int
    is_last: bool
    segments: tuple[Segment, ...] = ()

    @property
    def is_first(self) -> bool:
        return self.retained == 0 and self.vetoed == 0

    @property
    def is_outer(self) -> bool:
        return self.is_first or self.is_last

    @property
    def is_inner(self) -> bool:
        return not self.is_outer
