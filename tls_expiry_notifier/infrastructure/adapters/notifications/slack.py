"""Slack notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import httpx

from ....application.exceptions import DeliveryError
from .base import BaseNotificationSender
from .models import SlackBlock, SlackMessage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ....domain.value_objects import MessageBlock


@dataclass(frozen=True, slots=True)
class SlackConfig:
    """Slack notification configuration."""

    webhook_url: str = ""
    timeout: float = 30.0


class SlackNotificationSender(BaseNotificationSender):
    """Send notifications to Slack via incoming webhook."""

    def __init__(
        self,
        config: SlackConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the Slack sender.

        Args:
            config: Webhook configuration.
            transport: Optional httpx transport, used to stub the network in tests.
        """
        super().__init__()
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if Slack is properly configured."""
        return bool(self._config.webhook_url)

    async def send(self, blocks: Sequence[MessageBlock], *, part: int = 1) -> None:
        """Send one chunk as a Block Kit message."""
        if not self.is_configured():
            msg = "Slack webhook URL not configured"
            raise DeliveryError(msg)

        message = self.build_message(blocks)

        try:
            async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
                response = await client.post(
                    self._config.webhook_url,
                    json=message.to_payload(),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = f"Slack responded with HTTP {e.response.status_code}: {e.response.text[:200]}"
            raise DeliveryError(msg) from e
        except httpx.HTTPError as e:
            msg = f"Request to {self._webhook_host} failed: {e}"
            raise DeliveryError(msg) from e

        self._logger.debug(
            "Slack notification part %d sent (%d blocks): %s",
            part,
            len(blocks),
            response.status_code,
        )

    @staticmethod
    def build_message(blocks: Sequence[MessageBlock]) -> SlackMessage:
        """Build a Slack message from domain blocks."""
        return SlackMessage(blocks=[SlackBlock.from_message_block(block) for block in blocks])

    @property
    def _webhook_host(self) -> str:
        """Webhook host only; the path carries the secret token."""
        return urlsplit(self._config.webhook_url).netloc or "webhook"
