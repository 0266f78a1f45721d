"""
Error taxonomy for content generators.

Only failures detected locally are defined here. Errors raised by a
backend's client library propagate to the caller unmodified.
"""

from typing import Optional


class ContentGeneratorError(Exception):
    """Base exception for content generator errors."""
    pass


class ConfigurationError(ContentGeneratorError):
    """A required credential or collaborator is missing at construction time."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        env_var: Optional[str] = None
    ):
        self.provider = provider
        self.env_var = env_var
        super().__init__(message)

    @classmethod
    def missing_api_key(cls, env_var: str, display_name: str, provider: str) -> "ConfigurationError":
        return cls(
            f"{env_var} is required for {display_name} provider",
            provider=provider,
            env_var=env_var,
        )


class UnsupportedOperationError(ContentGeneratorError, NotImplementedError):
    """The selected backend cannot perform the requested operation."""

    def __init__(self, operation: str, provider: str):
        self.operation = operation
        self.provider = provider
        super().__init__(f"{operation} is not implemented for {provider} provider")


class UnsupportedProviderError(ContentGeneratorError, ValueError):
    """The provider tag is outside the supported set."""

    def __init__(self, provider: object):
        self.provider = provider
        super().__init__(f"Error creating content generator: Unsupported provider: {provider}")
