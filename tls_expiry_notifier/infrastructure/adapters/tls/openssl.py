"""Certificate inspector that shells out to the openssl command line tool."""

from __future__ import annotations

import asyncio
import contextlib
import re
from datetime import UTC, datetime

from ....application.exceptions import InspectionError
from ....domain.services.notification_renderer import MONTH_ABBREVIATIONS
from .base import BaseCertificateInspector

NOT_AFTER_PATTERN = re.compile(r"notAfter=(.+)")

# e.g. "May  5 12:00:00 2026 GMT", with the month name swapped for its number
OPENSSL_DATE_FORMAT = "%m %d %H:%M:%S %Y %Z"


def parse_not_after(output: str) -> datetime:
    """
    Extract the notAfter timestamp from ``openssl x509 -enddate`` output.

    Raises:
        InspectionError: If the field is missing or cannot be parsed.
    """
    match = NOT_AFTER_PATTERN.search(output)
    if not match:
        msg = "Failed to parse expiry date: no notAfter field in openssl output"
        raise InspectionError(msg)

    value = re.sub(r"\s+", " ", match.group(1).strip())
    try:
        month, _, rest = value.partition(" ")
        month_number = MONTH_ABBREVIATIONS.index(month) + 1
        parsed = datetime.strptime(f"{month_number:02d} {rest}", OPENSSL_DATE_FORMAT)  # noqa: DTZ007
    except ValueError as e:
        msg = f"Failed to parse expiry date: {value!r}"
        raise InspectionError(msg) from e
    return parsed.replace(tzinfo=UTC)


def _last_line(stream: bytes) -> str:
    lines = [line.strip() for line in stream.decode(errors="replace").splitlines()]
    lines = [line for line in lines if line]
    return lines[-1] if lines else ""


class OpenSslCertificateInspector(BaseCertificateInspector):
    """
    Read certificate expiry with ``openssl s_client`` and ``openssl x509``.

    Equivalent to ``echo | openssl s_client -servername D -connect D:443 |
    openssl x509 -noout -enddate`` but without a shell.
    """

    async def _fetch_expiry(self, domain: str) -> datetime:
        if not domain or domain.startswith("-"):
            msg = f"Invalid domain name: {domain!r}"
            raise InspectionError(msg)

        binary = self._config.openssl_binary
        _, handshake_out, handshake_err = await self._run(
            binary,
            "s_client",
            "-servername",
            domain,
            "-connect",
            f"{domain}:{self._config.port}",
        )

        code, enddate_out, enddate_err = await self._run(
            binary, "x509", "-noout", "-enddate", stdin=handshake_out
        )
        if code != 0:
            reason = _last_line(handshake_err) or _last_line(enddate_err) or "no certificate received"
            msg = f"TLS handshake with {domain}:{self._config.port} failed: {reason}"
            raise InspectionError(msg)

        return parse_not_after(enddate_out.decode(errors="replace"))

    async def _run(self, *args: str, stdin: bytes | None = None) -> tuple[int, bytes, bytes]:
        """Run a command, killing it if the inspection is cancelled."""
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            msg = f"openssl executable not found: {args[0]}"
            raise InspectionError(msg) from e

        try:
            stdout, stderr = await process.communicate(stdin)
        except asyncio.CancelledError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        return process.returncode or 0, stdout, stderr
