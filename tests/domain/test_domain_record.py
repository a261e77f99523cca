"""Tests for domain record entities."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from tls_expiry_notifier.domain.entities import CertificateExpiry, InspectionFailure


class TestCertificateExpiry:
    """Tests for CertificateExpiry."""

    def test_days_remaining_counts_whole_days(self, now: datetime) -> None:
        """Exactly N days ahead should give N days remaining."""
        record = CertificateExpiry.create("a.example", now + timedelta(days=6), now=now)
        assert record.days_remaining == 6

    def test_days_remaining_is_floored(self, now: datetime) -> None:
        """Partial days are not rounded up: 6 days 23 hours is 6 days."""
        record = CertificateExpiry.create("a.example", now + timedelta(days=6, hours=23), now=now)
        assert record.days_remaining == 6

    def test_less_than_a_day_left_is_zero(self, now: datetime) -> None:
        """A certificate expiring later today has 0 days remaining."""
        record = CertificateExpiry.create("a.example", now + timedelta(hours=5), now=now)
        assert record.days_remaining == 0

    def test_expired_certificate_is_negative(self, now: datetime) -> None:
        """Floor semantics make an hour-old expiry count as -1 days."""
        record = CertificateExpiry.create("a.example", now - timedelta(hours=1), now=now)
        assert record.days_remaining == -1

    def test_naive_expiry_is_treated_as_utc(self, now: datetime) -> None:
        """Naive datetimes should be interpreted as UTC."""
        naive = datetime(2025, 3, 11, 12, 0)  # noqa: DTZ001
        record = CertificateExpiry.create("a.example", naive, now=now)
        assert record.expiry.tzinfo is UTC
        assert record.days_remaining == 10

    def test_defaults_to_current_time(self) -> None:
        """Without an explicit reference time, now is used."""
        record = CertificateExpiry.create("a.example", datetime.now(UTC) + timedelta(days=30, minutes=5))
        assert record.days_remaining == 30

    def test_record_is_frozen(self, healthy_record: CertificateExpiry) -> None:
        """Records should be immutable."""
        with pytest.raises(FrozenInstanceError):
            healthy_record.days_remaining = 1  # type: ignore[misc]


class TestInspectionFailure:
    """Tests for InspectionFailure."""

    def test_carries_domain_and_message(self, failed_record: InspectionFailure) -> None:
        assert failed_record.domain == "bad.example.com"
        assert failed_record.message == "ECONNREFUSED"

    def test_failure_has_no_expiry(self, failed_record: InspectionFailure) -> None:
        """A failure structurally cannot carry an expiry date."""
        assert not hasattr(failed_record, "expiry")
        assert not hasattr(failed_record, "days_remaining")
