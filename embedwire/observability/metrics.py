"""Prometheus metrics for embedding vector conversions.

Provides metrics instrumentation for:
- base64 decodes (successes and failures by reason)
- base64 encodes of float vectors
- decoded payload sizes
"""

from prometheus_client import Counter, Histogram

EMBEDDING_VECTOR_DECODES_TOTAL = Counter(
    "embedding_vector_decodes_total",
    "Base64 embedding payloads decoded",
    ["status"],  # success, invalid_base64, truncated_payload
)

EMBEDDING_VECTOR_ENCODES_TOTAL = Counter(
    "embedding_vector_encodes_total",
    "Float embedding vectors encoded to base64",
    ["status"],  # success, float_overflow
)

EMBEDDING_VECTOR_PAYLOAD_BYTES = Histogram(
    "embedding_vector_payload_bytes",
    "Decoded size of base64 embedding payloads in bytes",
    buckets=[0, 256, 1024, 2048, 4096, 6144, 8192, 12288, 16384, 32768],
)


def track_decode(status: str, payload_bytes: int | None = None) -> None:
    """Track a base64 decode.

    Args:
        status: ``success`` or the failure reason.
        payload_bytes: Decoded byte length, when decoding got that far.
    """
    EMBEDDING_VECTOR_DECODES_TOTAL.labels(status=status).inc()
    if payload_bytes is not None:
        EMBEDDING_VECTOR_PAYLOAD_BYTES.observe(payload_bytes)


def track_encode(status: str) -> None:
    """Track a float-to-base64 encode.

    Args:
        status: ``success`` or the failure reason.
    """
    EMBEDDING_VECTOR_ENCODES_TOTAL.labels(status=status).inc()
