"""Embedding request and response models."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, RootModel

from embedwire.config import EmbeddingSettings, get_settings
from embedwire.embeddings.vector import EmbeddingVector
from embedwire.exceptions import EmbeddingError, ErrorCode
from embedwire.formats import EncodingFormat

__all__ = [
    "CreateEmbeddingRequest",
    "CreateEmbeddingResponse",
    "Embedding",
    "EmbeddingInput",
    "EmbeddingUsage",
    "EncodingFormat",
]


class EmbeddingInput(RootModel):
    """Input to embed.

    Tried in order: a single string, a list of strings, a list of token ids,
    a list of token id lists. An empty list parses as a list of strings.
    """

    root: Annotated[
        str | list[str] | list[int] | list[list[int]],
        Field(union_mode="left_to_right"),
    ]

    @property
    def item_count(self) -> int:
        """Number of logical inputs, i.e. embeddings expected back."""
        if isinstance(self.root, str):
            return 1
        if self.root and isinstance(self.root[0], int):
            # One token sequence is one input.
            return 1
        return len(self.root)


class CreateEmbeddingRequest(BaseModel):
    """Body of an embeddings request.

    Attributes:
        model: ID of the embedding model.
        input: Text or tokens to embed.
        encoding_format: Wire format for returned vectors (server default float).
        user: End-user identifier.
        dimensions: Output dimensions, for models that support it.
    """

    model: str = Field(description="Embedding model ID")
    input: EmbeddingInput = Field(description="Text or tokens to embed")
    encoding_format: EncodingFormat | None = Field(
        default=None,
        description="Format of returned embeddings",
    )
    user: str | None = Field(default=None, description="End-user identifier")
    dimensions: int | None = Field(default=None, description="Output dimensions")

    @classmethod
    def from_settings(
        cls,
        input: EmbeddingInput | str | list,
        user: str | None = None,
        settings: EmbeddingSettings | None = None,
    ) -> "CreateEmbeddingRequest":
        """Build a request using the configured model, format and dimensions.

        Args:
            input: Text or tokens to embed.
            user: End-user identifier.
            settings: Embedding configuration. Uses defaults if not provided.

        Returns:
            Request with model, encoding_format and dimensions from settings.
        """
        settings = settings or get_settings().embedding
        return cls(
            model=settings.model,
            input=input,
            encoding_format=settings.encoding_format,
            user=user,
            dimensions=settings.dimensions,
        )

    def to_wire(self) -> dict[str, Any]:
        """Dump the request body, omitting unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


class Embedding(BaseModel):
    """One embedding from a batch.

    Attributes:
        index: Position of the matching input in the request.
        object: Always ``"embedding"``.
        embedding: The vector, in whichever form the server sent.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Index of the matching input")
    object: Literal["embedding"] = Field(default="embedding")
    embedding: EmbeddingVector = Field(description="Embedding vector")


class EmbeddingUsage(BaseModel):
    """Token usage for an embeddings request."""

    prompt_tokens: int = Field(default=0, description="Prompt token count")
    total_tokens: int = Field(default=0, description="Total token count")


class CreateEmbeddingResponse(BaseModel):
    """Response envelope of an embeddings request.

    Attributes:
        object: Always ``"list"``.
        model: Model that produced the embeddings.
        data: One embedding per input.
        usage: Token usage.
    """

    object: str = Field(default="list")
    model: str = Field(description="Model used")
    data: list[Embedding] = Field(default_factory=list, description="Embeddings")
    usage: EmbeddingUsage = Field(default_factory=EmbeddingUsage)

    def ordered(self) -> list[Embedding]:
        """Return embeddings sorted by index."""
        return sorted(self.data, key=lambda item: item.index)

    def to_float_lists(self) -> list[list[float]]:
        """Return every vector as floats, in index order.

        Raises:
            EmbeddingDecodeError: If a base64 vector is malformed.
        """
        return [item.embedding.to_floats() for item in self.ordered()]

    def check_batch(self, request_input: EmbeddingInput) -> None:
        """Verify one embedding came back per input.

        Args:
            request_input: The input of the originating request.

        Raises:
            EmbeddingError: If the counts differ.
        """
        expected = request_input.item_count
        if len(self.data) != expected:
            raise EmbeddingError(
                f"Expected {expected} embeddings, got {len(self.data)}",
                code=ErrorCode.EMBEDDING_BATCH_MISMATCH,
                details={"expected": expected, "received": len(self.data)},
            )

    def to_wire(
        self, encoding_format: EncodingFormat | str | None = None
    ) -> dict[str, Any]:
        """Dump the envelope with every vector in one format.

        Args:
            encoding_format: Target format. Defaults to the configured
                ``EMBEDDING_ENCODING_FORMAT``.
        """
        if encoding_format is None:
            encoding_format = get_settings().embedding.encoding_format
        return self.model_dump(
            mode="json",
            context={"encoding_format": EncodingFormat(encoding_format)},
        )
