"""Domain services - Stateless operations on domain objects."""

from .expiry_classifier import ExpiryClassifier
from .notification_renderer import DEFAULT_CHUNK_SIZE, NotificationRenderer, chunk_blocks

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "ExpiryClassifier",
    "NotificationRenderer",
    "chunk_blocks",
]
