from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..constants import EXISTING_END_FMT, EXISTING_START_FMT
from ..errors import ConfigurationError
from ..types import Enclosure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnclosureRegistry:
    """Opening and closing character lookups for one splitter."""

    enclosures: tuple[Enclosure, ...] = ()
    openers: dict[str, Enclosure] = field(default_factory=dict, compare=False)
    closers: dict[str, Enclosure] = field(default_factory=dict, compare=False)

    @classmethod
    def build(cls, enclosures: Iterable[Enclosure | None]) -> EnclosureRegistry:
        """Validate and index ``enclosures``.

        ``None`` entries are skipped but still count towards the index
        reported in collision errors.

        Raises:
            ConfigurationError: If two enclosures share a start or an end
        """
        openers: dict[str, Enclosure] = {}
        closers: dict[str, Enclosure] = {}
        kept: list[Enclosure] = []
        for index, enc in enumerate(enclosures):
            if enc is None:
                continue
            if enc.start in openers:
                raise ConfigurationError(
                    EXISTING_START_FMT.format(char=enc.start, index=index), index
                )
            if enc.end in closers:
                raise ConfigurationError(
                    EXISTING_END_FMT.format(char=enc.end, index=index), index
                )
            openers[enc.start] = enc
            closers[enc.end] = enc
            kept.append(enc)
        logger.debug("Registered %d enclosures", len(kept))
        return cls(enclosures=tuple(kept), openers=openers, closers=closers)

    def opener(self, char: str) -> Enclosure | None:
        return self.openers.get(char)

    def closer(self, char: str) -> Enclosure | None:
        return self.closers.get(char)
