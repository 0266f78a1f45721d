from ..errors import UnsupportedOperationError
from ..openai.adapter import OpenAICompatibleProvider
from ...config.constants import QWEN_API_KEY_ENV, QWEN_BASE_URL
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
)


class QwenProvider(OpenAICompatibleProvider):
    """Alibaba Qwen provider via DashScope compatible mode, including text embeddings."""

    display_name = "Qwen"
    api_key_env = QWEN_API_KEY_ENV
    base_url = QWEN_BASE_URL

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        return await self._create_embeddings(request)
