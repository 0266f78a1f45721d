from __future__ import annotations

from typing import Any, List, Optional


def extract_text_from_completion(completion: Any) -> str:
    """Text of the first choice of a chat completion; ``""`` when there is none."""
    choices = getattr(completion, "choices", None)
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""


def extract_finish_reason(completion: Any) -> Optional[str]:
    choices = getattr(completion, "choices", None)
    if not choices:
        return None
    reason = getattr(choices[0], "finish_reason", None)
    return reason if isinstance(reason, str) else None


def extract_delta_text(chunk: Any) -> str:
    """Incremental text carried by one streamed chunk; ``""`` for non-text events."""
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    content = getattr(delta, "content", None)
    return content if isinstance(content, str) else ""


def extract_embeddings(response: Any) -> List[List[float]]:
    """Embedding vectors ordered by the backend's ``index`` field when present."""
    data = list(getattr(response, "data", None) or [])
    if all(isinstance(getattr(item, "index", None), int) for item in data):
        data.sort(key=lambda item: item.index)
    return [list(item.embedding) for item in data]
