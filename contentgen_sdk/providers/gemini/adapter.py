"""
Google GenAI provider.

The primary backend's request and response schema is the canonical one, so
this adapter does almost no translation: canonical models are dumped to plain
dicts for the SDK, and the SDK's own response objects are returned as-is.
Gemini only knows the ``user`` and ``model`` roles, so ``assistant`` turns are
sent as ``model`` and ``system`` turns become the ``system_instruction``.
Backend errors propagate unmodified.
"""

from typing import Any, AsyncIterator, Dict, List, Optional

from google import genai
from google.genai import types

from ..base import ContentGenerator
from ...core.config import ContentGeneratorConfig
from ...core.http_options import build_http_options
from ...core.normalization import flatten_parts, normalize_contents
from ...models.content import (
    Content,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentParameters,
    GenerateContentResponse,
    Role,
)

# Canonical role -> Gemini role; system turns are handled separately
_SDK_ROLES = {
    Role.ASSISTANT.value: Role.MODEL.value,
    Role.SYSTEM.value: Role.USER.value,
}


def _role(item: Any) -> Optional[str]:
    if isinstance(item, Content):
        return item.role
    if isinstance(item, dict):
        return item.get("role")
    return None


def _dump(item: Any) -> Any:
    if isinstance(item, Content):
        data = item.model_dump(exclude_none=True)
        data["parts"] = [{"text": part} if isinstance(part, str) else part for part in data["parts"]]
    elif isinstance(item, dict):
        data = dict(item)
    else:
        return item
    if data.get("role") in _SDK_ROLES:
        data["role"] = _SDK_ROLES[data["role"]]
    return data


def to_sdk_contents(contents: Any, lift_system: bool = True) -> Any:
    """
    Canonical contents as the plain values google-genai accepts.

    A bare string is passed as-is. With ``lift_system`` the system turns are
    dropped here and sent through ``system_instruction`` instead; otherwise
    they are sent as ``user`` turns.
    """
    if isinstance(contents, str):
        return contents
    items = contents if isinstance(contents, list) else [contents]
    if lift_system:
        items = [item for item in items if _role(item) != Role.SYSTEM.value]
    return [_dump(item) for item in items]


def system_instruction(contents: Any) -> Optional[str]:
    """Text of every system turn, joined with a blank line; None when there are none."""
    if isinstance(contents, str):
        return None
    items = contents if isinstance(contents, list) else [contents]
    texts: List[str] = [
        flatten_parts(normalize_contents(item)[0])
        for item in items
        if _role(item) == Role.SYSTEM.value
    ]
    return "\n\n".join(texts) if texts else None


def to_sdk_config(request: GenerateContentParameters) -> Optional[Dict[str, Any]]:
    config = request.config.model_dump(exclude_none=True) if request.config else {}
    instruction = system_instruction(request.contents)
    if instruction is not None:
        config["system_instruction"] = instruction
    return config or None

def create_http_options(proxy: Optional[str] = None) -> types.HttpOptions:
    options = build_http_options()
    if proxy:
        options["async_client_args"] = {"proxy": proxy}
    return types.HttpOptions(**options)


class GeminiProvider(ContentGenerator):
    """Gemini API / Vertex AI provider backed by ``google.genai``."""

    def __init__(self, config: ContentGeneratorConfig):
        self._client = genai.Client(
            api_key=config.api_key or None,
            vertexai=config.vertexai,
            http_options=create_http_options(config.proxy),
        )
        self._models = self._client.aio.models

    @property
    def models(self) -> Any:
        """The SDK's async model-invocation surface."""
        return self._models

    async def generate_content(self, request: GenerateContentParameters) -> GenerateContentResponse:
        return await self._models.generate_content(
            model=request.model,
            contents=to_sdk_contents(request.contents),
            config=to_sdk_config(request),
        )

    async def generate_content_stream(
        self,
        request: GenerateContentParameters
    ) -> AsyncIterator[GenerateContentResponse]:
        return await self._models.generate_content_stream(
            model=request.model,
            contents=to_sdk_contents(request.contents),
            config=to_sdk_config(request),
        )

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        return await self._models.count_tokens(
            model=request.model,
            contents=to_sdk_contents(request.contents, lift_system=False),
        )

    async def embed_content(self, request: EmbedContentParameters) -> EmbedContentResponse:
        return await self._models.embed_content(
            model=request.model,
            contents=to_sdk_contents(request.contents, lift_system=False),
        )
