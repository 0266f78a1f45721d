import inspect
import os
from typing import Any, AsyncIterator, Dict, List

from xai_sdk import AsyncClient
from xai_sdk.chat import assistant, system, user

from ..base import ContentGenerator
from ..errors import ConfigurationError, UnsupportedOperationError
from ...config.constants import GROK_API_KEY_ENV
from ...core.config import ContentGeneratorConfig
from ...core.normalization import normalize_params, normalize_usage, to_chat_messages
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
)
from ...observability.logging import ProviderLogger
from .streaming import stream_chat


logger = ProviderLogger("grok")

_MESSAGE_BUILDERS = {
    "system": system,
    "user": user,
    "assistant": assistant,
}


def format_messages(messages: List[Dict[str, str]]) -> List[Any]:
    """Build xai-sdk chat messages from a chat message list."""
    formatted = []
    for msg in messages:
        builder = _MESSAGE_BUILDERS.get(msg["role"], _MESSAGE_BUILDERS["user"])
        formatted.append(builder(msg["content"]))
    return formatted


class GrokProvider(ContentGenerator):
    """xAI Grok provider, using xai_sdk.AsyncClient."""

    display_name = "Grok"

    def __init__(self, config: ContentGeneratorConfig):
        # Use provided API key, fall back to environment variable
        self._api_key = config.api_key or os.getenv(GROK_API_KEY_ENV)
        if not self._api_key:
            raise ConfigurationError.missing_api_key(GROK_API_KEY_ENV, self.display_name, "grok")
        self._client = AsyncClient(api_key=self._api_key)

    @property
    def client(self) -> AsyncClient:
        return self._client

    async def _create_chat(self, request: GenerateContentParameters) -> Any:
        params = normalize_params(request)
        params["messages"] = format_messages(to_chat_messages(request.contents))
        chat = self.client.chat.create(**params)
        if inspect.isawaitable(chat):
            chat = await chat
        return chat

    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        """Generate a response by sampling one xAI chat."""
        with logger.track_request("generate_content", request.model) as request_info:
            chat = await self._create_chat(request)
            response = await chat.sample()

            usage = normalize_usage(getattr(response, "usage", None), "xai")
            logger.log_usage(usage, request.model, request_info["request_id"])

            text = getattr(response, "content", None)
            finish_reason = getattr(response, "finish_reason", None)
            return GenerateContentResponse.from_text(
                text if isinstance(text, str) else "",
                usage=usage,
                finish_reason=finish_reason if isinstance(finish_reason, str) else None,
            )

    async def generate_content_stream(
        self,
        request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        with logger.track_request("generate_content_stream", request.model) as request_info:
            chat = await self._create_chat(request)

        return stream_chat(chat, logger, request.model, request_info["request_id"])

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        raise UnsupportedOperationError("embed_content", self.display_name)
