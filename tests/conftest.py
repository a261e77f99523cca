"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import locale
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest

from tls_expiry_notifier.domain.entities import CertificateExpiry, InspectionFailure
from tls_expiry_notifier.domain.value_objects import ExpiryThreshold

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for day calculations."""
    return NOW


@pytest.fixture
def default_threshold() -> ExpiryThreshold:
    """Default expiry threshold of 6 days."""
    return ExpiryThreshold()


@pytest.fixture
def healthy_record() -> CertificateExpiry:
    """A certificate with 90 days left."""
    return CertificateExpiry.create("good.example.com", NOW + timedelta(days=90, hours=1), now=NOW)


@pytest.fixture
def expiring_record() -> CertificateExpiry:
    """A certificate with 3 days left."""
    return CertificateExpiry.create("expiring.example.com", NOW + timedelta(days=3, hours=1), now=NOW)


@pytest.fixture
def failed_record() -> InspectionFailure:
    """A domain whose connection was refused."""
    return InspectionFailure(domain="bad.example.com", message="ECONNREFUSED")


@pytest.fixture
def german_time_locale() -> Iterator[None]:
    """Switch LC_TIME to a German locale, where March is "Mär"."""
    previous = locale.setlocale(locale.LC_TIME)
    for name in ("de_DE.UTF-8", "de_DE.utf8", "de_DE"):
        try:
            locale.setlocale(locale.LC_TIME, name)
            break
        except locale.Error:
            continue
    else:
        pytest.skip("no German locale installed")
    try:
        yield
    finally:
        locale.setlocale(locale.LC_TIME, previous)
