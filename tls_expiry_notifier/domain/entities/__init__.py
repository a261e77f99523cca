"""Domain entities - Per-run results of certificate inspection."""

from .domain_record import CertificateExpiry, DomainRecord, InspectionFailure
from .expiry_report import ExpiryReport

__all__ = [
    "CertificateExpiry",
    "DomainRecord",
    "ExpiryReport",
    "InspectionFailure",
]
