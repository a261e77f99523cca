"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidThresholdError(DomainError, ValueError):
    """Raised when the expiry threshold is invalid."""
