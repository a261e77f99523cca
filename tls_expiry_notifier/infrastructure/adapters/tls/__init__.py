"""Certificate inspector adapter implementations."""

from .base import BaseCertificateInspector, InspectorConfig
from .direct import DirectCertificateInspector
from .openssl import OpenSslCertificateInspector

__all__ = [
    "BaseCertificateInspector",
    "DirectCertificateInspector",
    "InspectorConfig",
    "OpenSslCertificateInspector",
]
