"""Wire models for the generateContent REST resource."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import (
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_K,
    DEFAULT_TOP_P,
)


class GenerationConfig(BaseModel):
    """Fixed sampling parameters sent with every request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    temperature: float = Field(default=DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    top_k: int = Field(default=DEFAULT_TOP_K, alias="topK", ge=1)
    top_p: float = Field(default=DEFAULT_TOP_P, alias="topP", gt=0.0, le=1.0)
    max_output_tokens: int = Field(
        default=DEFAULT_MAX_OUTPUT_TOKENS,
        alias="maxOutputTokens",
        ge=1,
        description="Upper bound on generated tokens"
    )


class Part(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class Content(BaseModel):
    model_config = ConfigDict(frozen=True)

    parts: list[Part]


class GenerateContentRequest(BaseModel):
    """Request body for a single-prompt generateContent call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default_factory=GenerationConfig,
        alias="generationConfig"
    )

    @classmethod
    def for_prompt(
        cls,
        prompt: str,
        generation_config: GenerationConfig | None = None
    ) -> "GenerateContentRequest":
        """Wrap one prompt as the only content part."""
        return cls(
            contents=[Content(parts=[Part(text=prompt)])],
            generation_config=generation_config or GenerationConfig(),
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize with the camelCase field names the service expects."""
        return self.model_dump(by_alias=True)


def extract_candidate_text(data: Any) -> str | None:
    """Return candidates[0].content.parts[0].text, or None if any level is absent.

    Every level is type-checked before it is dereferenced, so arbitrary JSON
    never raises here.
    """
    if not isinstance(data, dict):
        return None

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None

    candidate = candidates[0]
    if not isinstance(candidate, dict):
        return None

    content = candidate.get("content")
    if not isinstance(content, dict):
        return None

    parts = content.get("parts")
    if not isinstance(parts, list) or not parts:
        return None

    part = parts[0]
    if not isinstance(part, dict):
        return None

    text = part.get("text")
    if not isinstance(text, str) or not text:
        return None

    return text


def extract_error_message(data: Any) -> str | None:
    """Return error.message from a failure body when it is a non-empty string."""
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    if isinstance(message, str) and message:
        return message
    return None
