"""Notification sender adapter implementations."""

from .base import BaseNotificationSender
from .models import SlackBlock, SlackMessage, SlackText
from .slack import SlackConfig, SlackNotificationSender

__all__ = [
    "BaseNotificationSender",
    "SlackBlock",
    "SlackConfig",
    "SlackMessage",
    "SlackNotificationSender",
    "SlackText",
]
