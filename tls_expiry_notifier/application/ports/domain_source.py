"""Port for the domain list - driven/secondary port."""

from typing import Protocol


class DomainSource(Protocol):
    """
    Port for retrieving the domains to check.

    This is a driven (secondary) port that defines where the application
    gets its list of domain names from.
    """

    def read_domains(self) -> list[str]:
        """
        Read all domain names to check.

        Returns:
            Domain names in source order, blank entries removed.

        Raises:
            DomainSourceError: If the source cannot be read.
        """
        ...
