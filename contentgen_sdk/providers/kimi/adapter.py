from ..errors import UnsupportedOperationError
from ..openai.adapter import OpenAICompatibleProvider
from ...config.constants import KIMI_API_KEY_ENV, KIMI_BASE_URL
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
)


class KimiProvider(OpenAICompatibleProvider):
    """Moonshot Kimi provider over its OpenAI-compatible endpoint."""

    display_name = "Kimi"
    api_key_env = KIMI_API_KEY_ENV
    base_url = KIMI_BASE_URL

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        raise UnsupportedOperationError("embed_content", self.display_name)
