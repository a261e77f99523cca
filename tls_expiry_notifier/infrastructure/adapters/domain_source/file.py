"""Domain source backed by a newline-delimited text file."""

from __future__ import annotations

import logging
from pathlib import Path

from ....application.exceptions import DomainSourceError

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = "\ufeff"


class FileDomainSource:
    """
    Reads domains from a plain text file, one per line.

    Implements the DomainSource port. Lines are trimmed and blank lines are
    skipped; there is no header row and no comment syntax. A leading byte
    order mark is ignored, as are stray ones left by concatenated files.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8-sig") -> None:
        self._path = Path(path)
        self._encoding = encoding

    def read_domains(self) -> list[str]:
        """
        Read the domain list.

        Raises:
            DomainSourceError: If the file cannot be read or decoded.
        """
        try:
            content = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Failed to read domain list from {self._path}: {e}"
            raise DomainSourceError(msg) from e

        domains = [line.replace(BYTE_ORDER_MARK, "").strip() for line in content.splitlines()]
        domains = [domain for domain in domains if domain]
        logger.debug("Read %d domains from %s", len(domains), self._path)
        return domains
