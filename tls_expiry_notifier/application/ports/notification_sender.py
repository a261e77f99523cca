"""Port for notification sending - driven/secondary port."""

from collections.abc import Sequence
from typing import Protocol

from ...domain.value_objects import MessageBlock


class NotificationSender(Protocol):
    """
    Port for sending notifications.

    This is a driven (secondary) port that defines how the application
    delivers rendered message blocks to external systems.
    """

    async def send(self, blocks: Sequence[MessageBlock], *, part: int = 1) -> None:
        """
        Send one chunk of message blocks as a single notification.

        Args:
            blocks: The chunk to deliver, in display order.
            part: 1-based index of the chunk, used for logging.

        Raises:
            DeliveryError: If the chunk could not be delivered.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this notification sender is properly configured.

        Returns:
            True if the sender is ready to send notifications.
        """
        ...
