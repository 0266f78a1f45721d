from __future__ import annotations

from typing import Any, Dict

from ...config.constants import CLAUDE_DEFAULT_MAX_TOKENS
from ...core.normalization import normalize_params, split_system_messages, to_chat_messages
from ...models.content import GenerateContentParameters


def build_messages_payload(request: GenerateContentParameters, stream: bool = False) -> Dict[str, Any]:
    """Build Anthropic messages.create keyword arguments.

    System turns move to the top-level ``system`` parameter, which is
    omitted entirely when there are none. ``max_tokens`` is always present.
    """
    params = normalize_params(request, default_max_tokens=CLAUDE_DEFAULT_MAX_TOKENS)
    system_message, messages = split_system_messages(to_chat_messages(request.contents))
    params["messages"] = messages
    if system_message is not None:
        params["system"] = system_message
    if stream:
        params["stream"] = True
    return params
