"""Domain service for classifying inspected domains."""

from collections.abc import Iterable

from ..entities import CertificateExpiry, DomainRecord, ExpiryReport, InspectionFailure
from ..value_objects import DomainStatus, ExpiryThreshold


class ExpiryClassifier:
    """Domain service for partitioning domain records by expiry status."""

    def __init__(self, threshold: ExpiryThreshold) -> None:
        """Initialize classifier with the expiry threshold."""
        self._threshold = threshold

    def status_of(self, record: DomainRecord) -> DomainStatus:
        """Determine the status of a single record."""
        match record:
            case InspectionFailure():
                return DomainStatus.ERRORING
            case CertificateExpiry(days_remaining=days) if self._threshold.is_expiring(days):
                return DomainStatus.EXPIRING
            case _:
                return DomainStatus.HEALTHY

    def classify(self, records: Iterable[DomainRecord]) -> ExpiryReport:
        """
        Partition records into erroring, expiring and healthy groups.

        Args:
            records: Inspection results, one per domain.

        Returns:
            ExpiryReport whose groups are sorted by domain name
            (ordinal, case-sensitive).
        """
        erroring: list[InspectionFailure] = []
        expiring: list[CertificateExpiry] = []
        healthy: list[CertificateExpiry] = []

        for record in records:
            match self.status_of(record):
                case DomainStatus.ERRORING:
                    erroring.append(record)
                case DomainStatus.EXPIRING:
                    expiring.append(record)
                case DomainStatus.HEALTHY:
                    healthy.append(record)

        def by_domain(record: DomainRecord) -> str:
            return record.domain

        return ExpiryReport(
            erroring=sorted(erroring, key=by_domain),
            expiring=sorted(expiring, key=by_domain),
            healthy=sorted(healthy, key=by_domain),
            threshold=self._threshold,
        )
