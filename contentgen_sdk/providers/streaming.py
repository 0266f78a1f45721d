"""
Delta stream assembly shared by the chat-style adapters.

Each adapter reduces its backend events to ``(text, finish_reason)`` pairs;
``stream_deltas`` turns those into canonical chunks, one per text delta.
The finish reason arrives on its own event after the last delta, so the
most recent chunk is held back until the next delta, the finish event or
the end of the stream, and carries the finish reason when one is reported.
"""

import time
from typing import AsyncIterator, Optional, Tuple

from ..models.content import GenerateContentResponse
from ..observability.logging import ProviderLogger

Delta = Tuple[str, Optional[str]]


async def stream_deltas(
    deltas: AsyncIterator[Delta],
    logger: ProviderLogger,
    model: str,
    request_id: str,
) -> AsyncIterator[GenerateContentResponse]:
    """
    Yield one canonical chunk per text delta.

    A finish reason with no text attaches to the preceding chunk, or to a
    single empty chunk when the backend produced no text at all. Events with
    neither text nor a finish reason yield nothing. A backend error is raised
    only after the held-back chunk has been delivered.
    """
    start_time = time.time()
    chunks = 0
    total_chars = 0
    pending: Optional[GenerateContentResponse] = None

    try:
        async for text, finish_reason in deltas:
            if text:
                if pending is not None:
                    yield pending
                chunks += 1
                total_chars += len(text)
                pending = GenerateContentResponse.from_text(text, finish_reason=finish_reason)
            elif finish_reason:
                if pending is None:
                    pending = GenerateContentResponse.from_text("")
                pending.candidates[0].finish_reason = finish_reason
    except Exception:
        if pending is not None:
            yield pending
        raise

    if pending is not None:
        yield pending

    logger.log_streaming_metrics(chunks, total_chars, time.time() - start_time, model, request_id)
