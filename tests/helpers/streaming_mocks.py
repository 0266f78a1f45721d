"""Helper functions for creating streaming mocks."""

from unittest.mock import MagicMock
from typing import List, Any, AsyncGenerator


async def create_openai_stream(chunks: List[str]) -> AsyncGenerator[Any, None]:
    """Create a mock Chat Completions streaming response."""
    # Opening chunk carries the role and an empty content string
    opener = MagicMock()
    opener.choices = [MagicMock()]
    opener.choices[0].delta.content = ""
    opener.choices[0].finish_reason = None
    opener.usage = None
    yield opener

    for chunk in chunks:
        mock_chunk = MagicMock()
        mock_chunk.choices = [MagicMock()]
        mock_chunk.choices[0].delta.content = chunk
        mock_chunk.choices[0].finish_reason = None
        mock_chunk.usage = None
        yield mock_chunk

    # Final chunk with finish reason only
    final_chunk = MagicMock()
    final_chunk.choices = [MagicMock()]
    final_chunk.choices[0].delta.content = None
    final_chunk.choices[0].finish_reason = "stop"
    final_chunk.usage = MagicMock(prompt_tokens=10, completion_tokens=len(chunks), total_tokens=10 + len(chunks))
    yield final_chunk

    # Usage trailer has no choices at all
    trailer = MagicMock()
    trailer.choices = []
    yield trailer


async def create_anthropic_stream(chunks: List[str]) -> AsyncGenerator[Any, None]:
    """Create a mock Anthropic streaming response."""
    start_event = MagicMock()
    start_event.type = "message_start"
    yield start_event

    block_start = MagicMock()
    block_start.type = "content_block_start"
    yield block_start

    for chunk in chunks:
        event = MagicMock()
        event.type = "content_block_delta"
        event.delta = MagicMock(text=chunk)
        yield event

    usage_event = MagicMock()
    usage_event.type = "message_delta"
    usage_event.usage = MagicMock(input_tokens=10, output_tokens=len(chunks) * 2)
    usage_event.delta = MagicMock()
    usage_event.delta.stop_reason = "end_turn"
    yield usage_event

    stop_event = MagicMock()
    stop_event.type = "message_stop"
    yield stop_event


async def create_xai_stream(chunks: List[str]) -> AsyncGenerator[Any, None]:
    """Create a mock xAI streaming response."""
    accumulated = ""
    for i, chunk in enumerate(chunks):
        accumulated += chunk
        mock_chunk = MagicMock()
        mock_chunk.content = chunk
        response = MagicMock()
        response.content = accumulated
        # Only the final accumulated response is finished
        response.finish_reason = "stop" if i == len(chunks) - 1 else None
        # xAI returns tuples of (response, chunk)
        yield (response, mock_chunk)


async def create_interrupted_openai_stream(chunks_before_error: int = 2) -> AsyncGenerator[Any, None]:
    """Create a mock Chat Completions stream that fails partway through."""
    import httpx

    chunks = ["Hello", " world", " how", " are", " you"]
    for i in range(min(chunks_before_error, len(chunks))):
        mock_chunk = MagicMock()
        mock_chunk.choices = [MagicMock()]
        mock_chunk.choices[0].delta.content = chunks[i]
        mock_chunk.choices[0].finish_reason = None
        mock_chunk.usage = None
        yield mock_chunk

    raise httpx.ConnectError("Connection lost during streaming")
