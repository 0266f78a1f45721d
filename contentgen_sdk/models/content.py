"""
Canonical content model.

Provider-agnostic request and response shapes shared by every adapter.
Field names follow the primary backend's native schema so that the
Gemini adapter can pass its SDK objects through untouched.
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Role(str, Enum):
    """Turn roles."""
    USER = "user"
    MODEL = "model"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class UserTierId(str, Enum):
    """Account tiers reported by the managed (Code Assist) backend."""
    FREE = "free-tier"
    LEGACY = "legacy-tier"
    STANDARD = "standard-tier"


class _ForeignModelInput(BaseModel):
    """Accepts equivalent pydantic models from other packages, e.g. google-genai types.

    The primary backend returns its SDK objects unchanged, so a turn taken from
    one of its responses must validate when fed back in as history.
    """

    @model_validator(mode="before")
    @classmethod
    def _dump_foreign_model(cls, data: Any) -> Any:
        if isinstance(data, BaseModel) and not isinstance(data, _ForeignModelInput):
            return data.model_dump(exclude_none=True)
        return data


class Part(_ForeignModelInput):
    """One fragment of a turn. Only ``text`` is understood by the chat adapters."""
    model_config = ConfigDict(extra="allow")

    text: Optional[str] = None


class Content(_ForeignModelInput):
    """A role-tagged turn made of ordered parts."""
    model_config = ConfigDict(extra="allow")

    role: Optional[str] = None
    parts: List[Union[str, Part]] = Field(default_factory=list)

    @classmethod
    def from_text(cls, text: str, role: str = Role.USER.value) -> "Content":
        return cls(role=role, parts=[Part(text=text)])

    @property
    def text(self) -> str:
        pieces = []
        for part in self.parts:
            if isinstance(part, str):
                pieces.append(part)
            elif part.text:
                pieces.append(part.text)
        return "".join(pieces)


ContentListUnion = Union[str, Content, List[Union[str, Content]]]


class GenerateContentConfig(BaseModel):
    """Generation options. Unset fields are left for the backend to default."""
    model_config = ConfigDict(extra="allow")

    temperature: Optional[float] = Field(None, ge=0.0, le=2.0, description="Sampling temperature")
    top_p: Optional[float] = Field(None, ge=0.0, le=1.0, description="Nucleus sampling parameter")
    max_output_tokens: Optional[int] = Field(None, ge=1, description="Maximum tokens to generate")


class GenerateContentParameters(BaseModel):
    """A generation request: target model, conversation and options."""

    model: str = Field(..., description="Model identifier")
    contents: ContentListUnion
    config: Optional[GenerateContentConfig] = None

    @field_validator("contents")
    def validate_contents(cls, v):
        if isinstance(v, list) and not v:
            raise ValueError("contents must not be empty")
        return v


class Candidate(BaseModel):
    content: Content
    finish_reason: Optional[str] = None
    index: int = 0


class UsageMetadata(BaseModel):
    """Token counters exactly as reported by the backend."""
    prompt_token_count: Optional[int] = None
    candidates_token_count: Optional[int] = None
    total_token_count: Optional[int] = None


class GenerateContentResponse(BaseModel):
    """
    A complete response, or one incremental delta when produced by a stream.

    Chat-style adapters always produce exactly one candidate with role ``model``.
    """
    candidates: List[Candidate] = Field(default_factory=list)
    usage_metadata: Optional[UsageMetadata] = None

    @classmethod
    def from_text(cls, text: str, usage: Optional[UsageMetadata] = None,
                  finish_reason: Optional[str] = None) -> "GenerateContentResponse":
        return cls(
            candidates=[
                Candidate(
                    content=Content.from_text(text, role=Role.MODEL.value),
                    finish_reason=finish_reason,
                )
            ],
            usage_metadata=usage,
        )

    @property
    def text(self) -> str:
        if not self.candidates:
            return ""
        return self.candidates[0].content.text


class CountTokensParameters(BaseModel):
    model: str
    contents: ContentListUnion


class CountTokensResponse(BaseModel):
    total_tokens: int


class EmbedContentParameters(BaseModel):
    """One or many inputs to embed; a single string is treated as one input."""
    model: str
    contents: Union[str, Content, List[Union[str, Content]]]


class ContentEmbedding(BaseModel):
    values: List[float] = Field(default_factory=list)


class EmbedContentResponse(BaseModel):
    embeddings: List[ContentEmbedding] = Field(default_factory=list)
    metadata: Optional[Any] = None
