"""Unit tests for the canonical content models."""

import pytest
from google.genai import types
from pydantic import ValidationError

from contentgen_sdk.models.content import (
    Content,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    UsageMetadata,
)


class TestGenerateContentParameters:
    def test_string_contents(self):
        request = GenerateContentParameters(model="m", contents="hello")

        assert request.contents == "hello"
        assert request.config is None

    def test_empty_list_rejected(self):
        with pytest.raises(ValidationError):
            GenerateContentParameters(model="m", contents=[])

    def test_dict_turns_are_validated(self):
        request = GenerateContentParameters(model="m", contents=[{"role": "user", "parts": [{"text": "hi"}]}])

        assert isinstance(request.contents[0], Content)
        assert request.contents[0].text == "hi"

    @pytest.mark.parametrize("options", [
        {"temperature": 2.5},
        {"top_p": 1.5},
        {"max_output_tokens": 0},
    ])
    def test_config_bounds(self, options):
        with pytest.raises(ValidationError):
            GenerateContentConfig(**options)

    def test_config_allows_backend_specific_fields(self):
        config = GenerateContentConfig(temperature=0.1, candidate_count=2)

        assert config.model_dump(exclude_none=True) == {"temperature": 0.1, "candidate_count": 2}


class TestGenerateContentResponse:
    def test_from_text(self):
        usage = UsageMetadata(prompt_token_count=1, candidates_token_count=2, total_token_count=3)

        response = GenerateContentResponse.from_text("hi", usage=usage, finish_reason="stop")

        assert len(response.candidates) == 1
        assert response.candidates[0].content.role == "model"
        assert response.candidates[0].finish_reason == "stop"
        assert response.text == "hi"
        assert response.usage_metadata is usage

    def test_empty_response_text(self):
        assert GenerateContentResponse().text == ""


class TestContent:
    def test_text_skips_non_text_parts(self):
        content = Content(role="user", parts=["a", Part(text="b"), Part(function_call={"name": "f"})])

        assert content.text == "ab"

    def test_accepts_google_genai_content(self):
        content = types.Content(role="model", parts=[types.Part(text="Hel"), types.Part(text="lo")])

        request = GenerateContentParameters(model="m", contents=[content])

        assert isinstance(request.contents[0], Content)
        assert request.contents[0].role == "model"
        assert request.contents[0].text == "Hello"

    def test_own_models_are_not_redumped(self):
        part = Part(text="x")

        assert Content(parts=[part]).parts[0] is part
