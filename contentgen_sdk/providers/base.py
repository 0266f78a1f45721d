"""
Content Generator Interface

This module defines the abstract interface every provider adapter implements.
Callers only ever depend on this interface; which backend sits behind it is
decided once per session by the factory.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from ..models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
    UserTierId,
)


class ContentGenerator(ABC):
    """
    Abstract base class for content generators.

    Every concrete adapter must implement all four operations explicitly.
    An operation the backend cannot perform raises
    ``UnsupportedOperationError`` when awaited, before any network I/O.

    The adapter is responsible for:
    - Translating canonical requests to the backend's wire format
    - Making the backend call
    - Translating responses and stream deltas back to canonical form

    Adapters should NOT contain:
    - Retry or backoff logic (owned by the backend client library)
    - Error wrapping (backend errors propagate unmodified)
    - Model selection
    """

    #: Set only by the managed (Code Assist) backend.
    user_tier: Optional[UserTierId] = None

    @abstractmethod
    async def generate_content(
        self,
        request: GenerateContentParameters
    ) -> GenerateContentResponse:
        """
        Generate a single, complete response.

        Args:
            request: Model, conversation contents and generation options

        Returns:
            GenerateContentResponse with exactly one candidate whose content
            role is ``model``; usage counters are included when reported.
        """
        pass

    @abstractmethod
    async def generate_content_stream(
        self,
        request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Start a streaming generation.

        Awaiting this method opens the backend stream and returns a lazy,
        single-pass async iterator. Each element wraps only the incremental
        text of one backend delta; the iterator ends when the backend stream
        ends.
        """
        pass

    @abstractmethod
    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Count the tokens the backend would charge for ``request.contents``."""
        pass

    @abstractmethod
    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        """Embed one or many text inputs, returning one vector per input in order."""
        pass

    async def aclose(self) -> None:
        """Release the backend client's connections.

        Adapters whose client owns an HTTP connection pool override this; the
        default has nothing to release.
        """
        return None

    def get_provider_name(self) -> str:
        """
        Get the name of this provider.

        By default, returns the class name without 'Provider' suffix.
        """
        class_name = self.__class__.__name__
        if class_name.endswith("Provider"):
            return class_name[:-8].lower()
        return class_name.lower()
