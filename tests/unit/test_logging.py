"""Unit tests for provider logging."""

import logging

import pytest

from contentgen_sdk.models.content import UsageMetadata
from contentgen_sdk.observability.logging import ProviderLogger


@pytest.fixture
def provider_logger():
    return ProviderLogger("openai")


class TestProviderLogger:
    def test_logger_name(self, provider_logger):
        assert provider_logger.logger.name == "contentgen_sdk.providers.openai"

    def test_format_message_skips_none(self, provider_logger):
        message = provider_logger._format_message("hello", model="gpt-4o", request_id=None)

        assert message == "[provider=openai model=gpt-4o] hello"

    def test_track_request_success(self, provider_logger, caplog):
        with caplog.at_level(logging.DEBUG, logger="contentgen_sdk"):
            with provider_logger.track_request("generate_content", "gpt-4o", request_id="abc") as info:
                assert info["request_id"] == "abc"

        messages = [record.getMessage() for record in caplog.records]
        assert any("Starting generate_content request" in m for m in messages)
        assert any("Completed generate_content request" in m and "request_id=abc" in m for m in messages)

    def test_track_request_reraises(self, provider_logger, caplog):
        with caplog.at_level(logging.DEBUG, logger="contentgen_sdk"):
            with pytest.raises(KeyError):
                with provider_logger.track_request("embed_content", "emb"):
                    raise KeyError("boom")

        failed = [r for r in caplog.records if "Failed embed_content request" in r.getMessage()]
        assert len(failed) == 1
        assert failed[0].levelno == logging.DEBUG
        assert "error_type=KeyError" in failed[0].getMessage()

    def test_generated_request_id(self, provider_logger):
        with provider_logger.track_request("generate_content", "m") as info:
            assert len(info["request_id"]) == 8

    def test_log_usage(self, provider_logger, caplog):
        usage = UsageMetadata(prompt_token_count=4, candidates_token_count=6, total_token_count=10)

        with caplog.at_level(logging.DEBUG, logger="contentgen_sdk"):
            provider_logger.log_usage(usage, "m", "rid")
            provider_logger.log_usage(None, "m", "rid")

        assert len(caplog.records) == 1
        assert "total_tokens=10" in caplog.records[0].getMessage()

    def test_silent_above_debug(self, provider_logger, caplog):
        with caplog.at_level(logging.INFO, logger="contentgen_sdk"):
            with provider_logger.track_request("generate_content", "m"):
                pass

        assert caplog.records == []
