from __future__ import annotations

import inspect
from typing import Any, AsyncIterator, Optional

from ...models.content import GenerateContentResponse
from ...observability.logging import ProviderLogger
from ..streaming import Delta, stream_deltas


async def _deltas(chat: Any) -> AsyncIterator[Delta]:
    """Iterate xAI chat.stream(), handling coroutine or async-iterator return.

    The SDK yields ``(response, chunk)`` pairs where ``response`` accumulates
    and ``chunk`` holds only the new text. The finish reason is read from the
    accumulated response once the stream ends.
    """
    stream_iter = chat.stream()
    if inspect.iscoroutine(stream_iter):
        stream_iter = await stream_iter

    response: Optional[Any] = None
    async for response, chunk in stream_iter:
        text = getattr(chunk, "content", None)
        yield (text if isinstance(text, str) else ""), None

    finish_reason = getattr(response, "finish_reason", None)
    if isinstance(finish_reason, str) and finish_reason:
        yield "", finish_reason


def stream_chat(
    chat: Any,
    logger: ProviderLogger,
    model: str,
    request_id: str,
) -> AsyncIterator[GenerateContentResponse]:
    return stream_deltas(_deltas(chat), logger, model, request_id)
