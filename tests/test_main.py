"""Tests for the application entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from tls_expiry_notifier.domain.entities import InspectionFailure
from tls_expiry_notifier.infrastructure.adapters import OpenSslCertificateInspector
from tls_expiry_notifier.main import async_main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("SLACK_NOTIFY_URL", "DOMAINS_FILE", "DRY_RUN", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestAsyncMain:
    """Tests for async_main exit codes."""

    @pytest.mark.asyncio
    async def test_unreadable_domain_file_fails(self, tmp_path: Path) -> None:
        exit_code = await async_main(["-u", "https://hooks.example/x", "-f", str(tmp_path / "missing.csv")])
        assert exit_code == 1

    @pytest.mark.asyncio
    async def test_configuration_error_fails(self) -> None:
        assert await async_main(["-f", "domains.csv"]) == 1

    @pytest.mark.asyncio
    async def test_empty_domain_file_succeeds(self, tmp_path: Path) -> None:
        path = tmp_path / "domains.csv"
        path.write_text("\n", encoding="utf-8")
        assert await async_main(["-u", "https://hooks.example/x", "-f", str(path)]) == 0

    @pytest.mark.asyncio
    async def test_dry_run_with_failing_domains_succeeds(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Per-domain failures are reported, not fatal."""

        async def fail(self: OpenSslCertificateInspector, domain: str) -> InspectionFailure:
            return InspectionFailure(domain=domain, message="ECONNREFUSED")

        monkeypatch.setattr(OpenSslCertificateInspector, "inspect", fail)
        path = tmp_path / "domains.csv"
        path.write_text("bad.example.com\n", encoding="utf-8")

        assert await async_main(["-f", str(path), "--dry-run"]) == 0
