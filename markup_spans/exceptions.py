"""Package-specific exception types."""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for conversion-related errors.

    Represents failures that abort a whole conversion attempt.
    """


class InputInvalidError(ConversionError):
    """Raised when the text handed to the converter is not a string.

    Args:
        received_type: Name of the type that was received instead.
    """

    def __init__(self, received_type: str):
        self.received_type = received_type
        super().__init__(f"Expected text as str, got {self.received_type}")


class DocumentTooLargeError(ConversionError):
    """Raised when the text exceeds the configured maximum size.

    Args:
        size: Number of characters in the rejected text.
        limit: Maximum number of characters permitted.
    """

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        return (
            f"Text of {self.size} characters exceeds maximum allowed size "
            f"of {self.limit} characters"
        )
