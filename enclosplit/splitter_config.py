from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_WHITESPACE
from .types import Enclosure


@dataclass(frozen=True)
class SplitterConfig:
    """User-facing configuration for a splitter.

    Keep this frozen+hashable so one config can back many splitters.
    """

    separator: str
    enclosures: tuple[Enclosure | None, ...] = ()

    # Cutset used by Segment.is_whitespace_only
    whitespace: str = DEFAULT_WHITESPACE
