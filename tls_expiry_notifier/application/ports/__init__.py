"""Application ports - Interfaces for external adapters."""

from .certificate_inspector import CertificateInspector
from .domain_source import DomainSource
from .notification_sender import NotificationSender

__all__ = [
    "CertificateInspector",
    "DomainSource",
    "NotificationSender",
]
