"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all gateway errors.

    ``code`` is stable and is returned to partners in the ``error``
    field of the response body; ``message`` is human-readable.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"
