"""Exception hierarchy for embedwire.

All custom exceptions inherit from EmbedwireError.
Each exception has an error code for structured error handling.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error handling."""

    # General errors (1xxx)
    INTERNAL_ERROR = "EMB-1000"

    # Embedding errors (3xxx)
    EMBEDDING_ERROR = "EMB-3000"
    EMBEDDING_INVALID_BASE64 = "EMB-3002"
    EMBEDDING_TRUNCATED_PAYLOAD = "EMB-3003"
    EMBEDDING_FLOAT_OVERFLOW = "EMB-3004"
    EMBEDDING_BATCH_MISMATCH = "EMB-3005"


class EmbedwireError(Exception):
    """Base exception for all embedwire errors.

    Attributes:
        message: Human-readable error message.
        code: Structured error code.
        details: Additional error context.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured reporting."""
        return {
            "error": {
                "code": self.code.value,
                "message": self.message,
                "details": self.details,
            }
        }


class EmbeddingError(EmbedwireError):
    """Embedding payload error."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.EMBEDDING_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EmbeddingDecodeError(EmbeddingError):
    """A base64 embedding payload could not be decoded into floats.

    Raised for text outside the standard base64 alphabet and for decoded
    buffers whose length is not a multiple of 4 bytes.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.EMBEDDING_INVALID_BASE64,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class EmbeddingEncodeError(EmbeddingError):
    """A float embedding could not be packed as 32-bit floats."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.EMBEDDING_FLOAT_OVERFLOW,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
