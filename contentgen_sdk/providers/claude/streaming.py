from __future__ import annotations

from typing import Any, AsyncIterator

from ...models.content import GenerateContentResponse
from ...observability.logging import ProviderLogger
from ..streaming import Delta, stream_deltas
from .parsers import extract_delta_text, extract_stream_stop_reason


async def _deltas(stream: Any) -> AsyncIterator[Delta]:
    async for event in stream:
        yield extract_delta_text(event), extract_stream_stop_reason(event)


def stream_messages(
    stream: Any,
    logger: ProviderLogger,
    model: str,
    request_id: str,
) -> AsyncIterator[GenerateContentResponse]:
    """Canonical chunks for an Anthropic event stream, one per text delta.

    The stop reason travels on the ``message_delta`` event that follows the
    last content block.
    """
    return stream_deltas(_deltas(stream), logger, model, request_id)
