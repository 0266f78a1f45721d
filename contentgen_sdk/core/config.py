"""
Content generator configuration.

Resolves a session's auth mode and environment into an immutable
``ContentGeneratorConfig``. Resolution never fails: a missing credential is
simply left unset and surfaces later, when the factory constructs the
adapter.
"""

import os
from enum import Enum
from typing import Any, Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from ..config.constants import (
    ANTHROPIC_API_KEY_ENV,
    DEEPSEEK_API_KEY_ENV,
    DEFAULT_GEMINI_MODEL,
    DOUBAO_API_KEY_ENV,
    GEMINI_API_KEY_ENV,
    GOOGLE_API_KEY_ENV,
    GOOGLE_CLOUD_LOCATION_ENV,
    GOOGLE_CLOUD_PROJECT_ENV,
    GROK_API_KEY_ENV,
    KIMI_API_KEY_ENV,
    OPENAI_API_KEY_ENV,
    QWEN_API_KEY_ENV,
)

# Load environment variables
load_dotenv()


class AuthType(str, Enum):
    """Supported authentication modes."""
    LOGIN_WITH_GOOGLE = "oauth-personal"
    USE_GEMINI = "gemini-api-key"
    USE_VERTEX_AI = "vertex-ai"
    USE_OPENAI = "openai"
    USE_CLAUDE = "claude"
    USE_GROK = "grok"
    USE_DOUBAO = "doubao"
    USE_QWEN = "qwen"
    USE_KIMI = "kimi"
    USE_DEEPSEEK = "deepseek"
    CLOUD_SHELL = "cloud-shell"


class Provider(str, Enum):
    """Supported content generation backends."""
    GEMINI = "gemini"
    OPENAI = "openai"
    CLAUDE = "claude"
    GROK = "grok"
    DOUBAO = "doubao"
    QWEN = "qwen"
    KIMI = "kimi"
    DEEPSEEK = "deepseek"


MANAGED_AUTH_TYPES = (AuthType.LOGIN_WITH_GOOGLE, AuthType.CLOUD_SHELL)

# Key-based auth modes of the chat-style providers
_API_KEY_AUTH = {
    AuthType.USE_OPENAI: (Provider.OPENAI, OPENAI_API_KEY_ENV),
    AuthType.USE_CLAUDE: (Provider.CLAUDE, ANTHROPIC_API_KEY_ENV),
    AuthType.USE_GROK: (Provider.GROK, GROK_API_KEY_ENV),
    AuthType.USE_DOUBAO: (Provider.DOUBAO, DOUBAO_API_KEY_ENV),
    AuthType.USE_QWEN: (Provider.QWEN, QWEN_API_KEY_ENV),
    AuthType.USE_KIMI: (Provider.KIMI, KIMI_API_KEY_ENV),
    AuthType.USE_DEEPSEEK: (Provider.DEEPSEEK, DEEPSEEK_API_KEY_ENV),
}


class SessionConfig(BaseModel):
    """The slice of session settings the factory reads."""
    model: Optional[str] = None
    proxy: Optional[str] = None


class ContentGeneratorConfig(BaseModel):
    """Resolved, immutable settings for one session's content generator."""
    model_config = ConfigDict(frozen=True)

    model: str
    provider: Optional[Union[Provider, str]] = None
    api_key: Optional[str] = None
    vertexai: Optional[bool] = None
    auth_type: Optional[AuthType] = None
    proxy: Optional[str] = None


def _env(name: str) -> Optional[str]:
    # Empty values count as unset
    return os.getenv(name) or None


def create_content_generator_config(
    session_config: Any,
    auth_type: Optional[AuthType]
) -> ContentGeneratorConfig:
    """
    Resolve the content generator configuration for a session.

    Only the environment variables belonging to ``auth_type`` are read.
    Managed auth modes return immediately without touching credentials;
    key-based modes whose key is absent return a config without ``api_key``.

    Args:
        session_config: Object exposing ``model`` and ``proxy`` (e.g. SessionConfig)
        auth_type: The selected authentication mode

    Returns:
        ContentGeneratorConfig
    """
    if auth_type is not None:
        auth_type = AuthType(auth_type)

    base = {
        "model": getattr(session_config, "model", None) or DEFAULT_GEMINI_MODEL,
        "auth_type": auth_type,
        "proxy": getattr(session_config, "proxy", None),
    }

    if auth_type in MANAGED_AUTH_TYPES:
        return ContentGeneratorConfig(provider=Provider.GEMINI, **base)

    if auth_type == AuthType.USE_GEMINI:
        gemini_api_key = _env(GEMINI_API_KEY_ENV)
        if gemini_api_key:
            return ContentGeneratorConfig(
                provider=Provider.GEMINI, api_key=gemini_api_key, vertexai=False, **base
            )
        return ContentGeneratorConfig(provider=Provider.GEMINI, **base)

    if auth_type == AuthType.USE_VERTEX_AI:
        google_api_key = _env(GOOGLE_API_KEY_ENV)
        if google_api_key or (_env(GOOGLE_CLOUD_PROJECT_ENV) and _env(GOOGLE_CLOUD_LOCATION_ENV)):
            return ContentGeneratorConfig(
                provider=Provider.GEMINI, api_key=google_api_key, vertexai=True, **base
            )
        return ContentGeneratorConfig(provider=Provider.GEMINI, **base)

    if auth_type in _API_KEY_AUTH:
        provider, env_var = _API_KEY_AUTH[auth_type]
        return ContentGeneratorConfig(provider=provider, api_key=_env(env_var), **base)

    return ContentGeneratorConfig(**base)
