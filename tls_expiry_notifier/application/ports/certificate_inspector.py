"""Port for certificate inspection - driven/secondary port."""

from typing import Protocol

from ...domain.entities import DomainRecord


class CertificateInspector(Protocol):
    """
    Port for reading a domain's TLS certificate expiry.

    Implementations must never raise for per-domain failures: connection,
    handshake, timeout and parse problems are returned as InspectionFailure.
    """

    async def inspect(self, domain: str) -> DomainRecord:
        """
        Inspect the certificate served by a domain.

        Args:
            domain: Host name to connect to (port 443, SNI set to the host).

        Returns:
            CertificateExpiry on success, InspectionFailure otherwise.
        """
        ...
