"""
Usage normalization module.

Passes through the token counters a backend reports, renamed to the
canonical ``UsageMetadata`` fields. Nothing is estimated locally: a counter
the backend omits stays ``None``.
"""

from typing import Any, Optional

from ...models.content import UsageMetadata

# Canonical field -> backend attribute, per wire family
_FIELD_MAP = {
    "openai": {
        "prompt_token_count": "prompt_tokens",
        "candidates_token_count": "completion_tokens",
        "total_token_count": "total_tokens",
    },
    "anthropic": {
        "prompt_token_count": "input_tokens",
        "candidates_token_count": "output_tokens",
    },
    "xai": {
        "prompt_token_count": "prompt_tokens",
        "candidates_token_count": "completion_tokens",
        "total_token_count": "total_tokens",
    },
}


def _count(usage: Any, name: str) -> Optional[int]:
    if isinstance(usage, dict):
        value = usage.get(name)
    else:
        value = getattr(usage, name, None)
    # bool is an int subclass; counters never are
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def normalize_usage(usage: Any, wire_format: str) -> Optional[UsageMetadata]:
    """
    Convert a backend usage object to ``UsageMetadata``.

    Args:
        usage: Usage object or dict from the backend response (may be None)
        wire_format: One of "openai", "anthropic", "xai"

    Returns:
        UsageMetadata, or None when the backend reported no counters
    """
    if usage is None:
        return None

    fields = {
        field: _count(usage, attr)
        for field, attr in _FIELD_MAP[wire_format].items()
    }
    if all(value is None for value in fields.values()):
        return None

    return UsageMetadata(**fields)
