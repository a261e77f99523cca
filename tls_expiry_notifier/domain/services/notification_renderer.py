"""Domain service for turning an expiry report into message blocks."""

from collections.abc import Sequence
from datetime import UTC, datetime

from ..entities import CertificateExpiry, ExpiryReport, InspectionFailure
from ..value_objects import MessageBlock

DEFAULT_CHUNK_SIZE = 40

URGENT_HEADER = "🚨 RED ALERT - Immediate Attention Required"
HEALTHY_HEADER = "✅ All Good - Healthy Domains"

# Fixed English names; strftime("%b") follows LC_TIME.
MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_expiry_date(expiry: datetime) -> str:
    """Format an expiry timestamp as e.g. 05-Mar-2025 (UTC)."""
    if expiry.tzinfo is not None:
        expiry = expiry.astimezone(UTC)
    return f"{expiry.day:02d}-{MONTH_ABBREVIATIONS[expiry.month - 1]}-{expiry.year}"


def chunk_blocks(
    blocks: Sequence[MessageBlock], size: int = DEFAULT_CHUNK_SIZE
) -> list[list[MessageBlock]]:
    """Split blocks into consecutive chunks of at most ``size`` blocks."""
    if size < 1:
        msg = f"Chunk size must be at least 1, got {size}"
        raise ValueError(msg)
    return [list(blocks[i : i + size]) for i in range(0, len(blocks), size)]


class NotificationRenderer:
    """Renders an ExpiryReport as an ordered list of message blocks."""

    def render(self, report: ExpiryReport) -> list[MessageBlock]:
        """
        Build the block sequence for a report.

        Urgent domains (expiring first, then erroring) come under a red alert
        header; healthy domains follow under their own header, separated by a
        spacer when both groups are present. An empty report renders nothing.
        """
        blocks: list[MessageBlock] = []

        urgent = [self._expiring_block(r) for r in report.expiring]
        urgent += [self._erroring_block(r) for r in report.erroring]
        if urgent:
            blocks.append(MessageBlock.header(URGENT_HEADER))
            blocks.append(MessageBlock.divider())
            blocks.extend(urgent)

        if report.healthy:
            if blocks:
                blocks.append(MessageBlock.spacer())
            blocks.append(MessageBlock.header(HEALTHY_HEADER))
            blocks.append(MessageBlock.divider())
            blocks.extend(self._healthy_block(r) for r in report.healthy)

        return blocks

    @staticmethod
    def _expiring_block(record: CertificateExpiry) -> MessageBlock:
        return MessageBlock.section(
            f"• Certificate for [{record.domain}] is going to expire in "
            f"*{record.days_remaining} days* [{format_expiry_date(record.expiry)}]"
        )

    @staticmethod
    def _erroring_block(record: InspectionFailure) -> MessageBlock:
        return MessageBlock.section(f"• Failed to verify for [{record.domain}] - {record.message}")

    @staticmethod
    def _healthy_block(record: CertificateExpiry) -> MessageBlock:
        return MessageBlock.section(
            f"• Certificate for [{record.domain}] is valid for "
            f"*{record.days_remaining} days* [{format_expiry_date(record.expiry)}]"
        )
