"""Expiry threshold value object."""

from dataclasses import dataclass

from ..exceptions import InvalidThresholdError


@dataclass(frozen=True, slots=True)
class ExpiryThreshold:
    """Number of days at or below which a certificate counts as expiring."""

    days: int = 6

    def __post_init__(self) -> None:
        """Validate the threshold is a whole number of days."""
        if isinstance(self.days, bool) or not isinstance(self.days, int):
            msg = f"Threshold must be an integer number of days, got {self.days!r}"
            raise InvalidThresholdError(msg)

    def is_expiring(self, days_remaining: int) -> bool:
        """Check if a certificate with this many days left needs attention."""
        return days_remaining <= self.days
