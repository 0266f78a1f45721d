from __future__ import annotations

from typing import Any, AsyncIterator

from ...models.content import GenerateContentResponse
from ...observability.logging import ProviderLogger
from ..streaming import Delta, stream_deltas
from .parsers import extract_delta_text, extract_finish_reason


async def _deltas(stream: Any) -> AsyncIterator[Delta]:
    async for event in stream:
        yield extract_delta_text(event), extract_finish_reason(event)


def stream_chat_completions(
    stream: Any,
    logger: ProviderLogger,
    model: str,
    request_id: str,
) -> AsyncIterator[GenerateContentResponse]:
    """Canonical chunks for a Chat Completions stream, one per text delta."""
    return stream_deltas(_deltas(stream), logger, model, request_id)
