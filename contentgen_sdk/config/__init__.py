"""Configuration constants for the content generation SDK."""

from .constants import DEFAULT_GEMINI_MODEL

__all__ = ["DEFAULT_GEMINI_MODEL"]
