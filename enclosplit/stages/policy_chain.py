from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import SplittingError
from ..types import CapturedPart
from .protocols import Policy

logger = logging.getLogger(__name__)


def dedupe_policies(*groups: Iterable[Policy]) -> tuple[Policy, ...]:
    """Concatenate policy groups, dropping repeated instances (by identity)."""
    seen: set[int] = set()
    out: list[Policy] = []
    for group in groups:
        for policy in group:
            if id(policy) in seen:
                continue
            seen.add(id(policy))
            out.append(policy)
    return tuple(out)


class PolicyChain:
    """Ordered policies threaded over every captured part."""

    def __init__(self, policies: Iterable[Policy] = ()) -> None:
        self.policies = dedupe_policies(policies)

    def __len__(self) -> int:
        return len(self.policies)

    def apply(self, part: CapturedPart) -> tuple[str, bool]:
        """Run ``part`` through the chain.

        Each policy receives the previous policy's output. The chain stops at
        the first policy that drops the part.

        Returns:
            Tuple of (final_text, keep)

        Raises:
            SplittingError: If a policy rejects the part; foreign exceptions
                are wrapped and positioned at the part's start
        """
        text = part.raw
        for policy in self.policies:
            try:
                text, keep = policy.apply(text, part)
            except SplittingError:
                raise
            except Exception as exc:
                raise SplittingError.wrap(exc, part.char_start) from exc
            if not keep:
                logger.debug(
                    "Part at position %d dropped by %s",
                    part.char_start,
                    type(policy).__name__,
                )
                return text, False
        return text, True
