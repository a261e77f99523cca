"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class DomainSourceError(ApplicationError, OSError):
    """Raised when the domain list cannot be read."""


class InspectionError(ApplicationError):
    """Raised when a certificate cannot be inspected."""


class DeliveryError(ApplicationError):
    """Raised when a notification chunk cannot be delivered."""


class ConfigurationError(ApplicationError, ValueError):
    """Raised when configuration is invalid."""
