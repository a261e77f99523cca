"""Certificate inspector that reads the peer certificate over a direct TLS connection."""

from __future__ import annotations

import asyncio
import contextlib
import ssl
from typing import TYPE_CHECKING

from cryptography import x509

from ....application.exceptions import InspectionError
from .base import BaseCertificateInspector

if TYPE_CHECKING:
    from datetime import datetime


def expiry_from_der(der: bytes) -> datetime:
    """Get the UTC notAfter timestamp of a DER-encoded certificate."""
    try:
        certificate = x509.load_der_x509_certificate(der)
    except ValueError as e:
        msg = f"Failed to parse certificate: {e}"
        raise InspectionError(msg) from e
    return certificate.not_valid_after_utc


class DirectCertificateInspector(BaseCertificateInspector):
    """
    Open a TLS connection with SNI and read the leaf certificate.

    Chain and hostname verification are disabled: only the expiry date is
    of interest, and expired certificates must still be readable.
    """

    @staticmethod
    def _create_ssl_context() -> ssl.SSLContext:
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    async def _fetch_expiry(self, domain: str) -> datetime:
        _, writer = await asyncio.open_connection(
            host=domain,
            port=self._config.port,
            ssl=self._create_ssl_context(),
            server_hostname=domain,
        )
        try:
            ssl_object = writer.get_extra_info("ssl_object")
            der = ssl_object.getpeercert(binary_form=True) if ssl_object else None
        finally:
            writer.close()
            with contextlib.suppress(OSError):
                await writer.wait_closed()

        if not der:
            msg = f"No certificate presented by {domain}:{self._config.port}"
            raise InspectionError(msg)

        return expiry_from_der(der)
