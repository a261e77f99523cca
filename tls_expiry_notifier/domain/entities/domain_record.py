"""Domain records produced by inspecting a single domain's certificate."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self


@dataclass(frozen=True, slots=True)
class CertificateExpiry:
    """A domain whose certificate expiry date was read successfully."""

    domain: str
    expiry: datetime
    days_remaining: int

    @classmethod
    def create(cls, domain: str, expiry: datetime, *, now: datetime | None = None) -> Self:
        """
        Build a record from a raw expiry timestamp.

        Naive timestamps are treated as UTC. Days remaining are floored, so a
        value of N means at least N full days are left (negative once expired).
        """
        expiry_aware = expiry if expiry.tzinfo else expiry.replace(tzinfo=UTC)
        expiry_aware = expiry_aware.astimezone(UTC)
        current = now or datetime.now(UTC)
        if current.tzinfo is None:
            current = current.replace(tzinfo=UTC)
        return cls(
            domain=domain,
            expiry=expiry_aware,
            days_remaining=(expiry_aware - current).days,
        )


@dataclass(frozen=True, slots=True)
class InspectionFailure:
    """A domain whose certificate could not be inspected."""

    domain: str
    message: str


DomainRecord = CertificateExpiry | InspectionFailure
