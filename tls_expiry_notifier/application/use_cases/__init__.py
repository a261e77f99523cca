"""Application use cases."""

from .check_certificate_expiry import CheckCertificateExpiry, CheckResult

__all__ = [
    "CheckCertificateExpiry",
    "CheckResult",
]
