"""Errors raised by the Diffbot request layer."""


class DiffbotError(Exception):
    """Raised when the Diffbot API rejects a request or returns an error payload."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (errorCode={self.code})"
