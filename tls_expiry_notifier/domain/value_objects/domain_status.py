"""Domain status value object."""

from enum import StrEnum, auto


class DomainStatus(StrEnum):
    """Classification of a checked domain."""

    ERRORING = auto()
    EXPIRING = auto()
    HEALTHY = auto()

    @property
    def requires_attention(self) -> bool:
        """Check if this status belongs in the urgent section."""
        return self in {DomainStatus.ERRORING, DomainStatus.EXPIRING}

    def __str__(self) -> str:
        return self.value
