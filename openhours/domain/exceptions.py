"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class ClockUnavailableError(DomainError):
    """Raised when timezone data for the civil clock cannot be resolved."""

    def __init__(self, timezone_name: str, reason: str = "timezone data not found"):
        self.timezone_name = timezone_name
        super().__init__(f"Cannot resolve timezone {timezone_name!r}: {reason}")
