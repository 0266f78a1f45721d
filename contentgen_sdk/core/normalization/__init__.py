"""Normalization layer shared by the chat-style adapters.

This layer handles:
- Canonical contents <-> chat message translation
- Generation option mapping
- Usage counter pass-through
"""

from .messages import (
    embedding_inputs,
    flatten_parts,
    from_chat_messages,
    normalize_contents,
    split_system_messages,
    to_chat_messages,
)
from .params import normalize_params
from .usage import normalize_usage

__all__ = [
    "embedding_inputs",
    "flatten_parts",
    "from_chat_messages",
    "normalize_contents",
    "normalize_params",
    "normalize_usage",
    "split_system_messages",
    "to_chat_messages",
]
