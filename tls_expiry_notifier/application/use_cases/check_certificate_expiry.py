"""Use case for checking and reporting certificate expiry."""

import asyncio
import logging
from dataclasses import dataclass

from ...domain.entities import DomainRecord, ExpiryReport
from ...domain.services import (
    DEFAULT_CHUNK_SIZE,
    ExpiryClassifier,
    NotificationRenderer,
    chunk_blocks,
)
from ...domain.value_objects import DomainStatus, ExpiryThreshold, MessageBlock
from ..exceptions import DeliveryError
from ..ports import CertificateInspector, DomainSource, NotificationSender

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the certificate expiry check use case."""

    records: list[DomainRecord]
    report: ExpiryReport
    chunks_sent: int
    chunks_failed: int
    dry_run: bool

    @property
    def success(self) -> bool:
        """Check if every notification chunk was delivered."""
        return self.chunks_failed == 0


class CheckCertificateExpiry:
    """
    Use case for checking certificate expiry and sending notifications.

    This is the main application service that orchestrates the domain
    logic and infrastructure adapters.
    """

    def __init__(
        self,
        domain_source: DomainSource,
        inspector: CertificateInspector,
        notification_sender: NotificationSender,
        threshold: ExpiryThreshold,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            domain_source: Adapter providing the domains to check.
            inspector: Adapter reading each domain's certificate.
            notification_sender: Adapter delivering the rendered chunks.
            threshold: Days at or below which a certificate is expiring.
            chunk_size: Maximum number of blocks per notification.
            dry_run: If True, log the notification instead of sending it.
        """
        self._source = domain_source
        self._inspector = inspector
        self._sender = notification_sender
        self._threshold = threshold
        self._classifier = ExpiryClassifier(threshold)
        self._renderer = NotificationRenderer()
        self._chunk_size = chunk_size
        self._dry_run = dry_run

    async def execute(self) -> CheckResult:
        """
        Execute the certificate expiry check use case.

        Returns:
            CheckResult containing the records, report and delivery status.

        Raises:
            DomainSourceError: If the domain list cannot be read.
        """
        logger.info("Starting certificate expiry check (threshold: %d days)...", self._threshold.days)

        domains = self._source.read_domains()
        logger.info("Loaded %d domains", len(domains))

        records = await self._inspect_all(domains)
        report = self._classifier.classify(records)
        logger.info("Analysis complete: %s", report.get_summary())
        self._log_attention(report)

        blocks = self._renderer.render(report)
        chunks = chunk_blocks(blocks, self._chunk_size)

        sent = 0
        failed = 0

        if not chunks:
            logger.info("Nothing to notify")
        elif self._dry_run:
            logger.info("DRY RUN: Would send %d notification parts", len(chunks))
            self._log_dry_run_blocks(blocks)
        elif not self._sender.is_configured():
            logger.warning("No notification sender configured")
        else:
            sent, failed = await self._send_chunks(chunks)

        return CheckResult(
            records=records,
            report=report,
            chunks_sent=sent,
            chunks_failed=failed,
            dry_run=self._dry_run,
        )

    def _log_attention(self, report: ExpiryReport) -> None:
        """Name the domains that need attention."""
        for status in DomainStatus:
            if not status.requires_attention:
                continue
            domains = report.domains_with_status(status)
            if domains:
                logger.warning("%s: %s", status.capitalize(), ", ".join(domains))

    async def _inspect_all(self, domains: list[str]) -> list[DomainRecord]:
        """Inspect every domain concurrently, keeping input order."""
        if not domains:
            return []

        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(self._inspector.inspect(domain)) for domain in domains]

        return [task.result() for task in tasks]

    async def _send_chunks(self, chunks: list[list[MessageBlock]]) -> tuple[int, int]:
        """Send chunks one after another; a failed part does not stop the rest."""
        sent = 0
        failed = 0

        for part, chunk in enumerate(chunks, start=1):
            try:
                await self._sender.send(chunk, part=part)
                sent += 1
                logger.info("Notification part %d/%d sent", part, len(chunks))
            except DeliveryError as e:
                failed += 1
                logger.error("Failed to send notification part %d/%d: %s", part, len(chunks), e)
            except Exception:
                failed += 1
                logger.exception("Error sending notification part %d/%d", part, len(chunks))

        return sent, failed

    def _log_dry_run_blocks(self, blocks: list[MessageBlock]) -> None:
        """Log rendered blocks in dry run mode."""
        for block in blocks:
            if block.text.strip():
                logger.info("  [%s] %s", block.kind, block.text)
            else:
                logger.info("  [%s]", block.kind)
