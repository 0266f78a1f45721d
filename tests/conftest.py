"""Shared pytest fixtures for ContentGen SDK tests."""

import pytest
from unittest.mock import Mock, AsyncMock, MagicMock

from contentgen_sdk.core.config import ContentGeneratorConfig, SessionConfig
from contentgen_sdk.models.content import (
    Content,
    GenerateContentConfig,
    GenerateContentParameters,
    Part,
)
from tests.helpers.streaming_mocks import (
    create_openai_stream, create_anthropic_stream, create_xai_stream
)

CREDENTIAL_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GOOGLE_CLOUD_PROJECT",
    "GOOGLE_CLOUD_LOCATION",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "GROK_API_KEY",
    "DOUBAO_API_KEY",
    "QWEN_API_KEY",
    "KIMI_API_KEY",
    "DEEPSEEK_API_KEY",
    "CLI_VERSION",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without credentials, whatever .env provides."""
    for key in CREDENTIAL_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_env_vars(monkeypatch):
    """Mock environment variables for testing."""
    env_vars = {
        "GEMINI_API_KEY": "test-gemini-key",
        "OPENAI_API_KEY": "test-openai-key",
        "ANTHROPIC_API_KEY": "test-anthropic-key",
        "GROK_API_KEY": "test-grok-key",
        "DOUBAO_API_KEY": "test-doubao-key",
        "QWEN_API_KEY": "test-qwen-key",
        "KIMI_API_KEY": "test-kimi-key",
        "DEEPSEEK_API_KEY": "test-deepseek-key",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def session_config():
    return SessionConfig(model="test-model", proxy=None)


@pytest.fixture
def keyed_config():
    """Build a config for a provider with an explicit API key."""
    def _build(provider, **kwargs):
        kwargs.setdefault("api_key", "test-key")
        return ContentGeneratorConfig(model="test-model", provider=provider, **kwargs)
    return _build


@pytest.fixture
def sample_request():
    """A short conversation with every role and generation options."""
    return GenerateContentParameters(
        model="test-model",
        contents=[
            Content(role="system", parts=[Part(text="You are helpful.")]),
            Content(role="user", parts=[Part(text="What is "), Part(text="2+2?")]),
            Content(role="model", parts=[Part(text="4")]),
            Content(role="user", parts=[Part(text="And 3+3?")]),
        ],
        config=GenerateContentConfig(temperature=0.5, top_p=0.9, max_output_tokens=100),
    )


@pytest.fixture
def mock_openai_client():
    """Mock AsyncOpenAI client."""
    client = MagicMock()

    completion = Mock()
    completion.choices = [Mock(message=Mock(content="Test response"), finish_reason="stop")]
    completion.usage = Mock(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    completion.model = "gpt-4o-mini"

    chunks = ["Test", " response", " streaming"]

    async def create_response(**kwargs):
        if kwargs.get("stream"):
            return create_openai_stream(chunks)
        return completion

    client.chat.completions.create = AsyncMock(side_effect=create_response)

    embeddings = Mock()
    embeddings.data = [
        Mock(embedding=[0.1, 0.2], index=0),
        Mock(embedding=[0.3, 0.4], index=1),
    ]
    client.embeddings.create = AsyncMock(return_value=embeddings)

    return client


@pytest.fixture
def mock_anthropic_client():
    """Mock AsyncAnthropic client."""
    client = MagicMock()

    message = Mock()
    message.content = [Mock(type="text", text="Test response")]
    message.stop_reason = "end_turn"
    message.usage = Mock(input_tokens=10, output_tokens=5)

    chunks = ["Test", " response"]

    async def create_response(**kwargs):
        if kwargs.get("stream"):
            return create_anthropic_stream(chunks)
        return message

    client.messages.create = AsyncMock(side_effect=create_response)

    return client


@pytest.fixture
def mock_xai_client():
    """Mock xai_sdk AsyncClient."""
    client = MagicMock()

    chat = Mock()
    usage = Mock(prompt_tokens=7, completion_tokens=3, total_tokens=10)
    chat.sample = AsyncMock(return_value=Mock(content="Test response", finish_reason="stop", usage=usage))
    chat.stream = lambda: create_xai_stream(["Test", " response"])

    # chat.create is synchronous in xai_sdk
    client.chat.create = Mock(return_value=chat)

    return client
