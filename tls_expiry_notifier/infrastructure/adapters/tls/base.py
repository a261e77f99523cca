"""Base certificate inspector with shared timeout and error handling."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ....application.exceptions import InspectionError
from ....domain.entities import CertificateExpiry, InspectionFailure

if TYPE_CHECKING:
    from datetime import datetime

    from ....domain.entities import DomainRecord


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Certificate inspection configuration."""

    port: int = 443
    timeout: float = 10.0
    openssl_binary: str = "openssl"


class BaseCertificateInspector(ABC):
    """Abstract base class for certificate inspectors."""

    def __init__(self, config: InspectorConfig | None = None) -> None:
        """Initialize the inspector."""
        self._config = config or InspectorConfig()
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def _fetch_expiry(self, domain: str) -> datetime:
        """
        Read the certificate expiry for a domain.

        Raises:
            InspectionError: If the expiry could not be determined.
            OSError: On connection or handshake failure.
        """
        ...

    async def inspect(self, domain: str) -> DomainRecord:
        """Inspect a domain once, bounded by the configured timeout."""
        try:
            async with asyncio.timeout(self._config.timeout):
                expiry = await self._fetch_expiry(domain)
        except TimeoutError:
            message = f"Timed out after {self._config.timeout:g}s"
        except InspectionError as e:
            message = str(e)
        except Exception as e:
            message = str(e) or e.__class__.__name__
        else:
            record = CertificateExpiry.create(domain, expiry)
            self._logger.debug(
                "Certificate for %s expires %s (%d days)",
                domain,
                record.expiry.isoformat(),
                record.days_remaining,
            )
            return record

        self._logger.warning("Error fetching certificate for %s: %s", domain, message)
        return InspectionFailure(domain=domain, message=message)
