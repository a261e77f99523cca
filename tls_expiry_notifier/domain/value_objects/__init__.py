"""Domain value objects - Immutable objects defined by their attributes."""

from .domain_status import DomainStatus
from .message_block import BlockKind, MessageBlock
from .threshold import ExpiryThreshold

__all__ = [
    "BlockKind",
    "DomainStatus",
    "ExpiryThreshold",
    "MessageBlock",
]
