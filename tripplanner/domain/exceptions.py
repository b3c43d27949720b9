"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidDateString(DomainError):
    """Raised when a date-only value is not a YYYY-MM-DD calendar date."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Expected a YYYY-MM-DD date, got {value!r}")
