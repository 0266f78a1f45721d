"""Data models for the content generation SDK."""

from .content import (
    Candidate,
    Content,
    ContentEmbedding,
    ContentListUnion,
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    EmbedContentResponse,
    GenerateContentConfig,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    Role,
    UsageMetadata,
    UserTierId,
)

__all__ = [
    # Request models
    "Content",
    "ContentListUnion",
    "GenerateContentConfig",
    "GenerateContentParameters",
    "CountTokensParameters",
    "EmbedContentParameters",
    "Part",
    "Role",

    # Response models
    "Candidate",
    "GenerateContentResponse",
    "UsageMetadata",
    "CountTokensResponse",
    "ContentEmbedding",
    "EmbedContentResponse",
    "UserTierId",
]
