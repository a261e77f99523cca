"""Domain source adapter implementations."""

from .file import FileDomainSource

__all__ = ["FileDomainSource"]
