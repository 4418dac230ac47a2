__all__ = [
    "INVALID_FORMAT_MESSAGE",
    "INVALID_ROUNDS_MESSAGE",
    "InvalidHashError",
]

INVALID_FORMAT_MESSAGE = "Invalid PHP bcrypt hash format"
INVALID_ROUNDS_MESSAGE = "Invalid rounds value in hash"


class InvalidHashError(ValueError):
    """Raised in strict mode when a hash can't be converted."""

    def __init__(self, message: str = INVALID_FORMAT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
