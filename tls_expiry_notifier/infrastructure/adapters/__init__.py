"""Infrastructure adapters - Implementations of application ports."""

from .domain_source import FileDomainSource
from .notifications import SlackNotificationSender
from .tls import DirectCertificateInspector, OpenSslCertificateInspector

__all__ = [
    "DirectCertificateInspector",
    "FileDomainSource",
    "OpenSslCertificateInspector",
    "SlackNotificationSender",
]
