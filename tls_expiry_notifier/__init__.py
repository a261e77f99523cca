"""TLS certificate expiry checker with Slack webhook notifications."""

__version__ = "1.0.0"
