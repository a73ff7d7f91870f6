"""Embedding vector codec and wire models."""

from embedwire.embeddings.models import (
    CreateEmbeddingRequest,
    CreateEmbeddingResponse,
    Embedding,
    EmbeddingInput,
    EmbeddingUsage,
)
from embedwire.embeddings.vector import (
    EmbeddingVector,
    decode_payload,
    pack_floats,
    unpack_floats,
)
from embedwire.formats import EncodingFormat

__all__ = [
    "CreateEmbeddingRequest",
    "CreateEmbeddingResponse",
    "Embedding",
    "EmbeddingInput",
    "EmbeddingUsage",
    "EmbeddingVector",
    "EncodingFormat",
    "decode_payload",
    "pack_floats",
    "unpack_floats",
]
