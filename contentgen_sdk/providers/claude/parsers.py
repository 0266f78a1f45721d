from __future__ import annotations

from typing import Any, Optional


def extract_text_from_messages_response(response: Any) -> str:
    """Extract concatenated text from an Anthropic messages.create response."""
    text_content = ""
    for content_block in getattr(response, "content", None) or []:
        if getattr(content_block, "type", None) == "text":
            text_piece = getattr(content_block, "text", "")
            if isinstance(text_piece, str):
                text_content += text_piece
    return text_content


def extract_stop_reason(response: Any) -> Optional[str]:
    reason = getattr(response, "stop_reason", None)
    return reason if isinstance(reason, str) else None


def extract_delta_text(event: Any) -> str:
    """Text of a ``content_block_delta`` event; ``""`` for every other event."""
    if getattr(event, "type", None) != "content_block_delta":
        return ""
    text = getattr(getattr(event, "delta", None), "text", None)
    return text if isinstance(text, str) else ""


def extract_stream_stop_reason(event: Any) -> Optional[str]:
    """Stop reason carried by a ``message_delta`` event."""
    if getattr(event, "type", None) != "message_delta":
        return None
    reason = getattr(getattr(event, "delta", None), "stop_reason", None)
    return reason if isinstance(reason, str) else None
