"""Wire encoding formats for embedding vectors."""

from enum import Enum


class EncodingFormat(str, Enum):
    """Format the server uses for returned embedding vectors.

    Sent as the ``encoding_format`` request field. ``FLOAT`` yields a JSON
    array of numbers; ``BASE64`` yields a string of packed little-endian
    32-bit floats.
    """

    FLOAT = "float"
    BASE64 = "base64"
