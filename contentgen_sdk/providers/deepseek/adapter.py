from ..errors import UnsupportedOperationError
from ..openai.adapter import OpenAICompatibleProvider
from ...config.constants import DEEPSEEK_API_KEY_ENV, DEEPSEEK_BASE_URL
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
)


class DeepSeekProvider(OpenAICompatibleProvider):
    """DeepSeek provider over its OpenAI-compatible endpoint."""

    display_name = "DeepSeek"
    api_key_env = DEEPSEEK_API_KEY_ENV
    base_url = DEEPSEEK_BASE_URL

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        raise UnsupportedOperationError("embed_content", self.display_name)
