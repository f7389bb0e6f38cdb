"""Input validation exceptions."""

from .base import DomainException


class InvalidInputException(DomainException):
    """Raised when a partner request fails validation."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
        )
        self.field = field
