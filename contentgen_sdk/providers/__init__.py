"""
Provider Adapters Layer

Each adapter translates between the canonical content model and one
backend's wire format behind the ``ContentGenerator`` interface.
"""

from .base import ContentGenerator
from .errors import (
    ConfigurationError,
    ContentGeneratorError,
    UnsupportedOperationError,
    UnsupportedProviderError,
)
from .claude.adapter import ClaudeProvider
from .deepseek.adapter import DeepSeekProvider
from .doubao.adapter import DoubaoProvider
from .gemini.adapter import GeminiProvider
from .grok.adapter import GrokProvider
from .kimi.adapter import KimiProvider
from .openai.adapter import OpenAICompatibleProvider, OpenAIProvider
from .qwen.adapter import QwenProvider

__all__ = [
    "ContentGenerator",
    "ContentGeneratorError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "UnsupportedProviderError",
    "ClaudeProvider",
    "DeepSeekProvider",
    "DoubaoProvider",
    "GeminiProvider",
    "GrokProvider",
    "KimiProvider",
    "OpenAICompatibleProvider",
    "OpenAIProvider",
    "QwenProvider",
]
