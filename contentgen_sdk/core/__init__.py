"""Core configuration resolution and generator factory."""

from .config import (
    AuthType,
    ContentGeneratorConfig,
    Provider,
    SessionConfig,
    create_content_generator_config,
)
from .factory import CodeAssistFactory, create_content_generator
from .http_options import build_http_options, user_agent

__all__ = [
    "AuthType",
    "CodeAssistFactory",
    "ContentGeneratorConfig",
    "Provider",
    "SessionConfig",
    "build_http_options",
    "create_content_generator",
    "create_content_generator_config",
    "user_agent",
]
