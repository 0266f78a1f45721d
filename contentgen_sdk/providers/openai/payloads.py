from typing import Any, Dict

from ...core.normalization import normalize_params, to_chat_messages
from ...models.content import GenerateContentParameters


def build_chat_completion_payload(request: GenerateContentParameters, stream: bool = False) -> Dict[str, Any]:
    """Build Chat Completions keyword arguments from a canonical request.

    Only options the caller set are included; ``stream`` is added for the
    streaming call.
    """
    payload = normalize_params(request)
    payload["messages"] = to_chat_messages(request.contents)
    if stream:
        payload["stream"] = True
    return payload
