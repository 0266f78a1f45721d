import os
from abc import abstractmethod
from typing import AsyncIterator, Optional

import httpx
from openai import AsyncOpenAI

from ..base import ContentGenerator
from ..errors import ConfigurationError, UnsupportedOperationError
from ...config.constants import OPENAI_API_KEY_ENV
from ...core.config import ContentGeneratorConfig
from ...core.normalization import embedding_inputs, normalize_usage
from ...models.content import (
    ContentEmbedding,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)
from ...observability.logging import ProviderLogger
from .parsers import extract_embeddings, extract_finish_reason, extract_text_from_completion
from .payloads import build_chat_completion_payload
from .streaming import stream_chat_completions


class OpenAICompatibleProvider(ContentGenerator):
    """
    Chat Completions adapter shared by OpenAI and OpenAI-compatible vendors.

    Subclasses name their credential variable and endpoint, and must state
    explicitly whether they support ``count_tokens`` and ``embed_content``.
    """

    display_name = "OpenAI"
    api_key_env = OPENAI_API_KEY_ENV
    base_url: Optional[str] = None

    def __init__(self, config: ContentGeneratorConfig):
        self._api_key = config.api_key or os.getenv(self.api_key_env)
        if not self._api_key:
            raise ConfigurationError.missing_api_key(
                self.api_key_env, self.display_name, self.get_provider_name()
            )
        self._logger = ProviderLogger(self.get_provider_name())
        self._client = self._create_client(config.proxy)

    def _create_client(self, proxy: Optional[str]) -> AsyncOpenAI:
        kwargs = {"api_key": self._api_key}
        if self.base_url:
            kwargs["base_url"] = self.base_url
        if proxy:
            kwargs["http_client"] = httpx.AsyncClient(proxy=proxy)
        return AsyncOpenAI(**kwargs)

    @property
    def client(self) -> AsyncOpenAI:
        return self._client

    async def aclose(self) -> None:
        await self._client.close()

    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        """Generate a response with a single Chat Completions call."""
        with self._logger.track_request("generate_content", request.model) as request_info:
            payload = build_chat_completion_payload(request)
            completion = await self.client.chat.completions.create(**payload)

            usage = normalize_usage(getattr(completion, "usage", None), "openai")
            self._logger.log_usage(usage, request.model, request_info["request_id"])

            return GenerateContentResponse.from_text(
                extract_text_from_completion(completion),
                usage=usage,
                finish_reason=extract_finish_reason(completion),
            )

    async def generate_content_stream(
        self,
        request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        """Open a Chat Completions stream and return its delta iterator."""
        with self._logger.track_request("generate_content_stream", request.model) as request_info:
            payload = build_chat_completion_payload(request, stream=True)
            stream = await self.client.chat.completions.create(**payload)

        return stream_chat_completions(stream, self._logger, request.model, request_info["request_id"])

    @abstractmethod
    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        pass

    @abstractmethod
    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        pass

    async def _create_embeddings(self, request: EmbedContentParameters) -> EmbedContentResponse:
        with self._logger.track_request("embed_content", request.model):
            response = await self.client.embeddings.create(
                model=request.model,
                input=embedding_inputs(request.contents),
            )
            return EmbedContentResponse(
                embeddings=[ContentEmbedding(values=vector) for vector in extract_embeddings(response)]
            )


class OpenAIProvider(OpenAICompatibleProvider):
    """OpenAI API provider."""

    display_name = "OpenAI"
    api_key_env = OPENAI_API_KEY_ENV

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        return await self._create_embeddings(request)
