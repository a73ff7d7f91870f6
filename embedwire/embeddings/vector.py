"""Embedding vector codec.

An embedding vector reaches us in one of two wire forms, chosen by the
``encoding_format`` of the originating request:

- a JSON array of numbers (``EncodingFormat.FLOAT``)
- a base64 string of packed little-endian IEEE-754 singles
  (``EncodingFormat.BASE64``)

``EmbeddingVector`` keeps whichever form it was given and converts only on
request. Conversions go through the raw float bytes, never through decimal
text, so ``Float -> Base64 -> Float`` reproduces every value bit for bit.
"""

import base64
import binascii
import numbers
import struct
from collections.abc import Iterable
from typing import Annotated, Any

from pydantic import (
    ConfigDict,
    Field,
    RootModel,
    SerializationInfo,
    field_validator,
    model_serializer,
)

from embedwire.exceptions import (
    EmbeddingDecodeError,
    EmbeddingEncodeError,
    ErrorCode,
)
from embedwire.formats import EncodingFormat
from embedwire.logging_config import get_logger
from embedwire.observability.metrics import track_decode, track_encode

logger = get_logger(__name__)

FLOAT32_SIZE = 4


def pack_floats(values: Iterable[float]) -> str:
    """Pack floats as little-endian float32 bytes and base64-encode them.

    Args:
        values: Float values; each must fit in an IEEE-754 single.

    Returns:
        Standard (padded) base64 text. Empty input gives ``""``.

    Raises:
        EmbeddingEncodeError: If a finite value overflows float32.
    """
    values = tuple(values)
    try:
        packed = struct.pack(f"<{len(values)}f", *values)
    except (OverflowError, struct.error) as e:
        track_encode("float_overflow")
        raise EmbeddingEncodeError(
            f"Embedding value does not fit in float32: {e}",
            code=ErrorCode.EMBEDDING_FLOAT_OVERFLOW,
            details={"length": len(values)},
        ) from e

    track_encode("success")
    return base64.b64encode(packed).decode("ascii")


def decode_payload(text: str) -> bytes:
    """Decode base64 embedding text into its raw float32 bytes.

    Args:
        text: Base64 text using the standard alphabet with padding.

    Returns:
        Decoded bytes; the length is always a multiple of 4.

    Raises:
        EmbeddingDecodeError: If the text is not valid base64 or the decoded
            length leaves a partial float.
    """
    try:
        raw = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        track_decode("invalid_base64")
        logger.warning(
            "Rejected embedding payload: invalid base64",
            extra={"payload_chars": len(text)},
        )
        raise EmbeddingDecodeError(
            f"Embedding payload is not valid base64: {e}",
            code=ErrorCode.EMBEDDING_INVALID_BASE64,
            details={"payload_chars": len(text)},
        ) from e

    if len(raw) % FLOAT32_SIZE:
        track_decode("truncated_payload", len(raw))
        logger.warning(
            "Rejected embedding payload: %d bytes is not a whole number of floats",
            len(raw),
            extra={"payload_bytes": len(raw)},
        )
        raise EmbeddingDecodeError(
            f"Embedding payload has {len(raw)} bytes, "
            f"not a multiple of {FLOAT32_SIZE}",
            code=ErrorCode.EMBEDDING_TRUNCATED_PAYLOAD,
            details={"payload_bytes": len(raw)},
        )

    track_decode("success", len(raw))
    return raw


def unpack_floats(text: str) -> list[float]:
    """Decode base64 embedding text into a list of floats.

    Raises:
        EmbeddingDecodeError: If the payload is malformed.
    """
    raw = decode_payload(text)
    return list(struct.unpack(f"<{len(raw) // FLOAT32_SIZE}f", raw))


class EmbeddingVector(RootModel):
    """An embedding vector in either float or base64 form.

    The variant is picked from the shape of the wire value, tried in order:
    an array of numbers becomes the float variant, a string becomes the
    base64 variant. Anything else fails validation. Float items are rounded
    to float32 on the way in; finite values beyond the float32 range fail
    validation.

    Malformed base64 raises ``EmbeddingDecodeError`` from ``len()`` and
    ``to_floats()``; it is never truncated or padded.
    """

    model_config = ConfigDict(frozen=True)

    root: Annotated[tuple[float, ...] | str, Field(union_mode="left_to_right")]

    @field_validator("root", mode="before")
    @classmethod
    def _select_variant(cls, value: Any) -> Any:
        """Map the wire shape onto a variant."""
        if isinstance(value, list | tuple):
            for item in value:
                if isinstance(item, bool) or not isinstance(item, numbers.Real):
                    raise ValueError(
                        "embedding array items must be numbers, "
                        f"got {type(item).__name__}"
                    )
            try:
                values = [float(item) for item in value]
                packed = struct.pack(f"<{len(values)}f", *values)
            except (OverflowError, struct.error) as e:
                raise ValueError(
                    f"embedding value does not fit in float32: {e}"
                ) from e
            # Stored as float32 so conversions reproduce these exact values.
            return struct.unpack(f"<{len(values)}f", packed)
        if isinstance(value, str):
            return value
        raise ValueError(
            "embedding must be an array of numbers or a base64 string, "
            f"got {type(value).__name__}"
        )

    @classmethod
    def from_floats(cls, values: Iterable[float]) -> "EmbeddingVector":
        """Build a float-variant vector."""
        return cls(list(values))

    @classmethod
    def from_base64(cls, text: str) -> "EmbeddingVector":
        """Build a base64-variant vector. The text is not decoded here."""
        return cls(text)

    @property
    def is_float(self) -> bool:
        """True for the float variant."""
        return not isinstance(self.root, str)

    @property
    def is_base64(self) -> bool:
        """True for the base64 variant."""
        return isinstance(self.root, str)

    def __len__(self) -> int:
        # Base64 has no length without decoding; callers in hot loops should
        # keep the result.
        if isinstance(self.root, str):
            return len(decode_payload(self.root)) // FLOAT32_SIZE
        return len(self.root)

    def is_empty(self) -> bool:
        """Return True if the vector holds no floats.

        Never decodes: an empty base64 string is the only encoding of an
        empty buffer.
        """
        return len(self.root) == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def to_floats(self) -> list[float]:
        """Return the vector as floats, decoding base64 if needed.

        Raises:
            EmbeddingDecodeError: If the base64 payload is malformed.
        """
        if isinstance(self.root, str):
            return unpack_floats(self.root)
        return list(self.root)

    def to_base64(self) -> str:
        """Return the vector as base64 text.

        The base64 variant is returned as stored, without validation.
        """
        if isinstance(self.root, str):
            return self.root
        return pack_floats(self.root)

    def to_wire(
        self, encoding_format: EncodingFormat | str | None = None
    ) -> list[float] | str:
        """Return the wire value for the given format.

        Args:
            encoding_format: Target format. ``None`` keeps the stored form.

        Returns:
            A list of floats or a base64 string.
        """
        if encoding_format is None:
            return self.root if isinstance(self.root, str) else list(self.root)
        if EncodingFormat(encoding_format) is EncodingFormat.BASE64:
            return self.to_base64()
        return self.to_floats()

    @model_serializer(mode="plain")
    def _serialize(self, info: SerializationInfo) -> list[float] | str:
        context = info.context or {}
        return self.to_wire(context.get("encoding_format"))
