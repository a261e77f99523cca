"""Expiry report aggregate."""

from dataclasses import dataclass

from ..value_objects import DomainStatus, ExpiryThreshold
from .domain_record import CertificateExpiry, InspectionFailure


@dataclass(frozen=True, slots=True)
class ExpiryReport:
    """Classified result of one run, each group sorted by domain name."""

    erroring: list[InspectionFailure]
    expiring: list[CertificateExpiry]
    healthy: list[CertificateExpiry]
    threshold: ExpiryThreshold

    @property
    def erroring_count(self) -> int:
        return len(self.erroring)

    @property
    def expiring_count(self) -> int:
        return len(self.expiring)

    @property
    def healthy_count(self) -> int:
        return len(self.healthy)

    @property
    def total_count(self) -> int:
        """Total number of classified domains."""
        return self.erroring_count + self.expiring_count + self.healthy_count

    @property
    def requires_attention(self) -> bool:
        """Check if any domain is expiring or failed inspection."""
        return bool(self.expiring or self.erroring)

    @property
    def is_empty(self) -> bool:
        return self.total_count == 0

    def domains_with_status(self, status: DomainStatus) -> list[str]:
        """Get the domain names in one group, in report order."""
        match status:
            case DomainStatus.ERRORING:
                records = self.erroring
            case DomainStatus.EXPIRING:
                records = self.expiring
            case DomainStatus.HEALTHY:
                records = self.healthy
        return [record.domain for record in records]

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        if self.is_empty:
            return "No domains checked"

        if not self.requires_attention:
            return f"All {self.healthy_count} certificates are healthy"

        parts: list[str] = []
        if self.expiring_count:
            parts.append(f"{self.expiring_count} expiring")
        if self.erroring_count:
            parts.append(f"{self.erroring_count} erroring")
        if self.healthy_count:
            parts.append(f"{self.healthy_count} healthy")

        total_attention = self.expiring_count + self.erroring_count
        return f"{total_attention} domains requiring attention: {', '.join(parts)}"
