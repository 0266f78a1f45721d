"""
ContentGen SDK - one content-generation interface over many LLM providers.

Supported backends:
- Google Gemini / Vertex AI (google-genai)
- OpenAI
- Anthropic Claude
- xAI Grok
- Doubao, Qwen, Kimi and DeepSeek (OpenAI-compatible endpoints)

Features:
- Provider selection from auth mode and environment
- Canonical request/response model shared by every backend
- Streaming generation as lazy async iterators
- Token counting and embeddings where the backend supports them
"""

__version__ = "0.1.0"

from .core import (
    AuthType,
    ContentGeneratorConfig,
    Provider,
    SessionConfig,
    create_content_generator,
    create_content_generator_config,
)
from .models import (
    Candidate,
    Content,
    ContentEmbedding,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    Role,
    UsageMetadata,
    UserTierId,
)
from .providers import (
    ConfigurationError,
    ContentGenerator,
    ContentGeneratorError,
    UnsupportedOperationError,
    UnsupportedProviderError,
)

__all__ = [
    # Factory
    "AuthType",
    "Provider",
    "SessionConfig",
    "ContentGeneratorConfig",
    "create_content_generator_config",
    "create_content_generator",

    # Interface and errors
    "ContentGenerator",
    "ContentGeneratorError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "UnsupportedProviderError",

    # Models
    "Candidate",
    "Content",
    "ContentEmbedding",
    "CountTokensParameters",
    "CountTokensResponse",
    "EmbedContentParameters",
    "EmbedContentResponse",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "GenerateContentResponse",
    "Part",
    "Role",
    "UsageMetadata",
    "UserTierId",
]
