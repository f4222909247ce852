from __future__ import annotations

import logging
import threading

from .errors import ConfigurationError
from .splitter_config import SplitterConfig
from .stages.policy_chain import PolicyChain, dedupe_policies
from .stages.protocols import Policy
from .stages.registry import EnclosureRegistry
from .stages.scanner import ScanContext
from .types import Enclosure

logger = logging.getLogger(__name__)


class Splitter:
    """Splits text on a separator while respecting quotes and brackets.

    The separator and enclosures are fixed at construction. The only mutable
    state is the list of default policies, guarded by a lock; every ``split``
    call works on a snapshot of it, so concurrent calls are safe.
    """

    def __init__(
        self,
        config: SplitterConfig,
        *,
        default_policies: tuple[Policy, ...] = (),
    ) -> None:
        if not isinstance(config.separator, str) or len(config.separator) != 1:
            raise ConfigurationError(
                f"separator must be a single character, got {config.separator!r}"
            )
        self.config = config
        self.registry = EnclosureRegistry.build(config.enclosures)
        self._lock = threading.Lock()
        self._default_policies = dedupe_policies(default_policies)

    @property
    def separator(self) -> str:
        return self.config.separator

    @property
    def enclosures(self) -> tuple[Enclosure, ...]:
        return self.registry.enclosures

    @property
    def default_policies(self) -> tuple[Policy, ...]:
        with self._lock:
            return self._default_policies

    def add_default_policies(self, *policies: Policy) -> Splitter:
        """Append policies applied to every split; repeats are ignored."""
        with self._lock:
            self._default_policies = dedupe_policies(self._default_policies, policies)
        return self

    def split(self, text: str, *policies: Policy) -> list[str]:
        """Split ``text``.

        Args:
            text: Input to split
            *policies: Extra policies for this call, run after the defaults

        Returns:
            The retained parts, in input order

        Raises:
            SplittingError: On unbalanced enclosures or a policy failure
        """
        chain = PolicyChain(dedupe_policies(self.default_policies, policies))
        logger.debug(
            "Splitting %d chars on %r with %d policies",
            len(text),
            self.separator,
            len(chain),
        )
        ctx = ScanContext(
            text,
            self.separator,
            self.registry,
            chain,
            self.config.whitespace,
        )
        return ctx.run()

    def __call__(self, text: str, *policies: Policy) -> list[str]:
        return self.split(text, *policies)


def new_splitter(separator: str, *enclosures: Enclosure | None) -> Splitter:
    """Build a splitter for ``separator`` honouring ``enclosures``.

    Raises:
        ConfigurationError: If two enclosures share a start or end character
    """
    return Splitter(SplitterConfig(separator=separator, enclosures=enclosures))
