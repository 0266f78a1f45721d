"""Unit tests for delta stream assembly."""

import httpx
import pytest

from contentgen_sdk.observability.logging import ProviderLogger
from contentgen_sdk.providers.streaming import stream_deltas


async def deltas(*pairs, error=None):
    for pair in pairs:
        yield pair
    if error is not None:
        raise error


async def collect(stream):
    return [chunk async for chunk in stream]


@pytest.fixture
def logger():
    return ProviderLogger("test")


class TestStreamDeltas:
    @pytest.mark.asyncio
    async def test_one_chunk_per_text_delta(self, logger):
        chunks = await collect(stream_deltas(deltas(("", None), ("Hel", None), ("lo", None)), logger, "m", "r"))

        assert [c.text for c in chunks] == ["Hel", "lo"]

    @pytest.mark.asyncio
    async def test_finish_reason_attaches_to_last_chunk(self, logger):
        chunks = await collect(stream_deltas(
            deltas(("Hel", None), ("lo", None), ("", "stop"), ("", None)), logger, "m", "r"
        ))

        assert [c.text for c in chunks] == ["Hel", "lo"]
        assert [c.candidates[0].finish_reason for c in chunks] == [None, "stop"]

    @pytest.mark.asyncio
    async def test_finish_reason_on_text_event(self, logger):
        chunks = await collect(stream_deltas(deltas(("done", "length")), logger, "m", "r"))

        assert chunks[0].candidates[0].finish_reason == "length"

    @pytest.mark.asyncio
    async def test_finish_without_text_yields_empty_chunk(self, logger):
        chunks = await collect(stream_deltas(deltas(("", None), ("", "content_filter")), logger, "m", "r"))

        assert len(chunks) == 1
        assert chunks[0].text == ""
        assert chunks[0].candidates[0].finish_reason == "content_filter"

    @pytest.mark.asyncio
    async def test_empty_stream(self, logger):
        assert await collect(stream_deltas(deltas(), logger, "m", "r")) == []

    @pytest.mark.asyncio
    async def test_error_raised_after_delivered_chunks(self, logger):
        stream = stream_deltas(
            deltas(("a", None), ("b", None), error=httpx.ReadError("reset")), logger, "m", "r"
        )
        received = []

        with pytest.raises(httpx.ReadError):
            async for chunk in stream:
                received.append(chunk.text)

        assert received == ["a", "b"]
