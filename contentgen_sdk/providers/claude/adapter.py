import os
from typing import AsyncIterator, Optional

import httpx
from anthropic import AsyncAnthropic

from ..base import ContentGenerator
from ..errors import ConfigurationError, UnsupportedOperationError
from ...config.constants import ANTHROPIC_API_KEY_ENV
from ...core.config import ContentGeneratorConfig
from ...core.normalization import normalize_usage
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)
from ...observability.logging import ProviderLogger
from .parsers import extract_stop_reason, extract_text_from_messages_response
from .payloads import build_messages_payload
from .streaming import stream_messages


logger = ProviderLogger("claude")


class ClaudeProvider(ContentGenerator):
    """Anthropic Claude API provider."""

    display_name = "Claude"

    def __init__(self, config: ContentGeneratorConfig):
        self._api_key = config.api_key or os.getenv(ANTHROPIC_API_KEY_ENV)
        if not self._api_key:
            raise ConfigurationError.missing_api_key(ANTHROPIC_API_KEY_ENV, self.display_name, "claude")
        self._client = self._create_client(config.proxy)

    def _create_client(self, proxy: Optional[str]) -> AsyncAnthropic:
        if proxy:
            return AsyncAnthropic(api_key=self._api_key, http_client=httpx.AsyncClient(proxy=proxy))
        return AsyncAnthropic(api_key=self._api_key)

    @property
    def client(self) -> AsyncAnthropic:
        return self._client

    async def aclose(self) -> None:
        await self._client.close()

    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        """Generate a response with a single Messages API call."""
        with logger.track_request("generate_content", request.model) as request_info:
            response = await self.client.messages.create(**build_messages_payload(request))

            usage = normalize_usage(getattr(response, "usage", None), "anthropic")
            logger.log_usage(usage, request.model, request_info["request_id"])

            return GenerateContentResponse.from_text(
                extract_text_from_messages_response(response),
                usage=usage,
                finish_reason=extract_stop_reason(response),
            )

    async def generate_content_stream(
        self,
        request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        """Open a Messages API event stream and return its delta iterator."""
        with logger.track_request("generate_content_stream", request.model) as request_info:
            stream = await self.client.messages.create(**build_messages_payload(request, stream=True))

        return stream_messages(stream, logger, request.model, request_info["request_id"])

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        raise UnsupportedOperationError("embed_content", self.display_name)
