from ..errors import UnsupportedOperationError
from ..openai.adapter import OpenAICompatibleProvider
from ...config.constants import DOUBAO_API_KEY_ENV, DOUBAO_BASE_URL
from ...models.content import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
)


class DoubaoProvider(OpenAICompatibleProvider):
    """ByteDance Doubao provider via Volcengine Ark, including text embeddings."""

    display_name = "Doubao"
    api_key_env = DOUBAO_API_KEY_ENV
    base_url = DOUBAO_BASE_URL

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        raise UnsupportedOperationError("count_tokens", self.display_name)

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        return await self._create_embeddings(request)
