"""Application settings loaded from command line flags and environment variables."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

from ...application.exceptions import ConfigurationError
from ...domain.exceptions import InvalidThresholdError
from ...domain.services import DEFAULT_CHUNK_SIZE
from ...domain.value_objects import ExpiryThreshold
from ..adapters.notifications.slack import SlackConfig
from ..adapters.tls.base import InspectorConfig

if TYPE_CHECKING:
    from collections.abc import Sequence

INSPECTORS = ("openssl", "direct")

# Slack rejects messages with more than 50 blocks
MAX_CHUNK_SIZE = 50


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class Settings:
    """Application settings, built once at startup."""

    webhook_url: str = ""
    domains_file: str = ""
    expiry_threshold_days: int = 6
    inspector: str = "openssl"
    inspection_timeout: float = 10.0
    chunk_size: int = DEFAULT_CHUNK_SIZE
    openssl_binary: str = "openssl"
    notify_timeout: float = 30.0
    dry_run: bool = False
    log_level: str = "INFO"

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.webhook_url and not self.dry_run:
            missing.append("--slack-notify-url / SLACK_NOTIFY_URL")
        if not self.domains_file:
            missing.append("--domains-csv / DOMAINS_FILE")

        if missing:
            msg = f"Missing required settings: {', '.join(missing)}"
            raise ConfigurationError(msg)

        if self.inspector not in INSPECTORS:
            msg = f"Unknown inspector {self.inspector!r} (use one of: {', '.join(INSPECTORS)})"
            raise ConfigurationError(msg)
        if not 1 <= self.chunk_size <= MAX_CHUNK_SIZE:
            msg = f"Chunk size must be between 1 and {MAX_CHUNK_SIZE}, got {self.chunk_size}"
            raise ConfigurationError(msg)
        if self.inspection_timeout <= 0:
            msg = f"Inspection timeout must be positive, got {self.inspection_timeout}"
            raise ConfigurationError(msg)

        try:
            _ = self.threshold
        except InvalidThresholdError as e:
            raise ConfigurationError(str(e)) from e

    @cached_property
    def threshold(self) -> ExpiryThreshold:
        """Get the expiry threshold."""
        return ExpiryThreshold(days=self.expiry_threshold_days)

    @cached_property
    def slack_config(self) -> SlackConfig:
        """Get Slack configuration."""
        return SlackConfig(
            webhook_url=self.webhook_url,
            timeout=self.notify_timeout,
        )

    @cached_property
    def inspector_config(self) -> InspectorConfig:
        """Get certificate inspector configuration."""
        return InspectorConfig(
            timeout=self.inspection_timeout,
            openssl_binary=self.openssl_binary,
        )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser, with defaults taken from the environment."""
    parser = argparse.ArgumentParser(
        prog="tls-expiry-notifier",
        description="Check TLS certificate expiry for a list of domains and notify a Slack webhook.",
    )
    parser.add_argument(
        "-u",
        "--slack-notify-url",
        "--webhook-url",
        dest="webhook_url",
        default=_env_str("SLACK_NOTIFY_URL"),
        help="Slack incoming webhook URL (env: SLACK_NOTIFY_URL)",
    )
    parser.add_argument(
        "-f",
        "--domains-csv",
        "--domains-file",
        dest="domains_file",
        default=_env_str("DOMAINS_FILE"),
        help="File with one domain per line (env: DOMAINS_FILE)",
    )
    parser.add_argument(
        "-t",
        "--expiry-threshold",
        dest="expiry_threshold_days",
        type=int,
        default=_env_int("EXPIRY_THRESHOLD_DAYS", 6),
        help="Alert when a certificate expires within this many days (default: 6)",
    )
    parser.add_argument(
        "--inspector",
        choices=INSPECTORS,
        default=_env_str("CERT_INSPECTOR", "openssl"),
        help="How to read certificates: run openssl or connect directly (default: openssl)",
    )
    parser.add_argument(
        "--timeout",
        dest="inspection_timeout",
        type=float,
        default=_env_float("INSPECTION_TIMEOUT", 10.0),
        help="Per-domain inspection timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=_env_int("CHUNK_SIZE", DEFAULT_CHUNK_SIZE),
        help=f"Maximum blocks per Slack message (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--openssl-binary",
        default=_env_str("OPENSSL_BINARY", "openssl"),
        help="Path to the openssl executable (default: openssl)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=_env_bool("DRY_RUN"),
        help="Log the notification instead of sending it",
    )
    parser.add_argument(
        "--log-level",
        default=_env_str("LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    return parser


def load_settings(argv: Sequence[str] | None = None) -> Settings:
    """Load and validate settings from command line flags and environment."""
    args = build_parser().parse_args(argv)
    settings = Settings(
        webhook_url=args.webhook_url,
        domains_file=args.domains_file,
        expiry_threshold_days=args.expiry_threshold_days,
        inspector=args.inspector,
        inspection_timeout=args.inspection_timeout,
        chunk_size=args.chunk_size,
        openssl_binary=args.openssl_binary,
        dry_run=args.dry_run,
        log_level=args.log_level,
    )
    settings.validate()
    return settings
