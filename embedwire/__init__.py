"""Request/response types for embedding APIs with a float/base64 vector codec."""

from embedwire.embeddings import (
    CreateEmbeddingRequest,
    CreateEmbeddingResponse,
    Embedding,
    EmbeddingInput,
    EmbeddingUsage,
    EmbeddingVector,
    EncodingFormat,
)
from embedwire.exceptions import (
    EmbeddingDecodeError,
    EmbeddingEncodeError,
    EmbeddingError,
    EmbedwireError,
    ErrorCode,
)

__all__ = [
    "CreateEmbeddingRequest",
    "CreateEmbeddingResponse",
    "Embedding",
    "EmbeddingDecodeError",
    "EmbeddingEncodeError",
    "EmbeddingError",
    "EmbeddingInput",
    "EmbeddingUsage",
    "EmbeddingVector",
    "EmbedwireError",
    "EncodingFormat",
    "ErrorCode",
]
