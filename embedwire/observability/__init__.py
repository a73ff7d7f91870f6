"""Observability module for metrics."""

from embedwire.observability.metrics import track_decode, track_encode

__all__ = [
    "track_decode",
    "track_encode",
]
