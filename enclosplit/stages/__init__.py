from .policy_chain import PolicyChain, dedupe_policies
from .protocols import Policy
from .registry import EnclosureRegistry
from .scanner import ScanContext

__all__ = [
    "EnclosureRegistry",
    "Policy",
    "PolicyChain",
    "ScanContext",
    "dedupe_policies",
]
