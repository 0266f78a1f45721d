"""
Content generator factory.

Picks exactly one adapter for a session from a resolved
``ContentGeneratorConfig``. The provider set is closed: dispatch is an
explicit branch per ``Provider`` member, and any other tag is rejected
before a backend client is constructed.
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from ..providers.base import ContentGenerator
from ..providers.claude.adapter import ClaudeProvider
from ..providers.deepseek.adapter import DeepSeekProvider
from ..providers.doubao.adapter import DoubaoProvider
from ..providers.errors import ConfigurationError, UnsupportedProviderError
from ..providers.gemini.adapter import GeminiProvider
from ..providers.grok.adapter import GrokProvider
from ..providers.kimi.adapter import KimiProvider
from ..providers.openai.adapter import OpenAIProvider
from ..providers.qwen.adapter import QwenProvider
from .config import MANAGED_AUTH_TYPES, AuthType, ContentGeneratorConfig, Provider
from .http_options import build_http_options

# (http_options, auth_type, session_config, session_id) -> generator
CodeAssistFactory = Callable[
    [Dict[str, Any], AuthType, Any, Optional[str]],
    Awaitable[ContentGenerator],
]


def _resolve_provider(tag: Any) -> Provider:
    if tag is None:
        return Provider.GEMINI
    try:
        return Provider(tag)
    except ValueError:
        raise UnsupportedProviderError(tag) from None


async def create_content_generator(
    config: ContentGeneratorConfig,
    session_config: Any,
    session_id: Optional[str] = None,
    *,
    code_assist_factory: Optional[CodeAssistFactory] = None
) -> ContentGenerator:
    """
    Create the content generator for a session.

    Args:
        config: Resolved configuration (see ``create_content_generator_config``)
        session_config: Session settings, handed through to the Code Assist factory
        session_id: Optional session identifier for the Code Assist factory
        code_assist_factory: Builds the managed generator for Google login and
            Cloud Shell auth; its result is returned unmodified

    Returns:
        ContentGenerator backed by exactly one adapter

    Raises:
        UnsupportedProviderError: Provider tag outside the supported set
        ConfigurationError: Required API key (or Code Assist factory) missing
    """
    provider = _resolve_provider(config.provider)

    if provider == Provider.GEMINI:
        if config.auth_type in MANAGED_AUTH_TYPES:
            if code_assist_factory is None:
                raise ConfigurationError(
                    f"A Code Assist generator factory is required for {config.auth_type.value} auth",
                    provider=provider.value,
                )
            return await code_assist_factory(
                build_http_options(),
                config.auth_type,
                session_config,
                session_id,
            )
        return GeminiProvider(config)
    elif provider == Provider.OPENAI:
        return OpenAIProvider(config)
    elif provider == Provider.CLAUDE:
        return ClaudeProvider(config)
    elif provider == Provider.GROK:
        return GrokProvider(config)
    elif provider == Provider.DOUBAO:
        return DoubaoProvider(config)
    elif provider == Provider.QWEN:
        return QwenProvider(config)
    elif provider == Provider.KIMI:
        return KimiProvider(config)
    elif provider == Provider.DEEPSEEK:
        return DeepSeekProvider(config)

    raise UnsupportedProviderError(provider)
