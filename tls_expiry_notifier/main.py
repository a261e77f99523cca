#!/usr/bin/env python3
"""
TLS Expiry Notifier

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .application.exceptions import DomainSourceError
from .application.use_cases import CheckCertificateExpiry
from .infrastructure.adapters import (
    DirectCertificateInspector,
    FileDomainSource,
    OpenSslCertificateInspector,
    SlackNotificationSender,
)
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .application.ports import CertificateInspector
    from .application.use_cases import CheckResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_domain_source(self) -> FileDomainSource:
        """Create the domain list adapter."""
        return FileDomainSource(self._settings.domains_file)

    def create_inspector(self) -> CertificateInspector:
        """Create the configured certificate inspector."""
        match self._settings.inspector:
            case "direct":
                return DirectCertificateInspector(self._settings.inspector_config)
            case _:
                return OpenSslCertificateInspector(self._settings.inspector_config)

    def create_notification_sender(self) -> SlackNotificationSender:
        """Create the Slack webhook sender."""
        return SlackNotificationSender(self._settings.slack_config)

    def create_check_use_case(self) -> CheckCertificateExpiry:
        """Create the main use case with all dependencies."""
        return CheckCertificateExpiry(
            domain_source=self.create_domain_source(),
            inspector=self.create_inspector(),
            notification_sender=self.create_notification_sender(),
            threshold=self._settings.threshold,
            chunk_size=self._settings.chunk_size,
            dry_run=self._settings.dry_run,
        )


class Application:
    """Main application orchestrator."""

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> CheckResult:
        """Execute a single certificate check."""
        use_case = self._container.create_check_use_case()
        return await use_case.execute()

    async def run(self) -> int:
        """
        Run a single check.

        Returns:
            Exit code. Partial notification failures still count as success;
            they are reported in the logs only.
        """
        logger.info(
            "Checking domains from %s (threshold: %d days, inspector: %s)",
            self._settings.domains_file,
            self._settings.expiry_threshold_days,
            self._settings.inspector,
        )
        result = await self.run_once()
        if not result.success:
            logger.warning(
                "%d of %d notification parts failed",
                result.chunks_failed,
                result.chunks_sent + result.chunks_failed,
            )
        logger.info("Completed")
        return 0


async def async_main(argv: Sequence[str] | None = None) -> int:
    """Async entry point."""
    try:
        logger.info("TLS Expiry Notifier %s starting...", __version__)

        settings = load_settings(argv)
        logging.getLogger().setLevel(settings.log_level.upper())

        app = Application(settings)
        return await app.run()

    except DomainSourceError as e:
        logger.error("Failed: %s", e)
        return 1
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Failed: unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
