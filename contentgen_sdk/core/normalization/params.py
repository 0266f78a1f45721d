"""
Parameter normalization module.

Maps canonical generation options onto the keyword arguments chat-style
backends accept. Options are forwarded only when the caller set them.
"""

from typing import Any, Dict, Optional

from ...models.content import GenerateContentConfig, GenerateContentParameters


def normalize_params(
    request: GenerateContentParameters,
    default_max_tokens: Optional[int] = None
) -> Dict[str, Any]:
    """
    Build the backend keyword arguments for a generation request.

    Args:
        request: Canonical generation request
        default_max_tokens: Value for ``max_tokens`` when the request sets none;
            required by backends that reject requests without it

    Returns:
        Dict with ``model`` and any of ``temperature``, ``top_p``, ``max_tokens``
    """
    config = request.config or GenerateContentConfig()

    normalized: Dict[str, Any] = {
        "model": request.model,
    }

    if config.temperature is not None:
        normalized["temperature"] = config.temperature

    if config.top_p is not None:
        normalized["top_p"] = config.top_p

    if config.max_output_tokens is not None:
        normalized["max_tokens"] = config.max_output_tokens
    elif default_max_tokens is not None:
        normalized["max_tokens"] = default_max_tokens

    return normalized
