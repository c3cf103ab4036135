"""Models for encoded images and image model responses."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class EncodedImage:
    """Base64 image payload with its MIME type."""

    mime_type: str
    data: str

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InlineData(_CamelModel):
    """Inline binary payload returned by the model."""

    mime_type: str | None = None
    data: str


class ContentPart(_CamelModel):
    """Single part of a model response."""

    text: str | None = None
    inline_data: InlineData | None = None


class Content(_CamelModel):
    """Content block of a candidate."""

    parts: list[ContentPart] | None = None
    role: str | None = None


class Candidate(_CamelModel):
    """Generated candidate."""

    content: Content | None = None
    finish_reason: str | None = None


class GenerateContentResponse(_CamelModel):
    """Structured output of a generateContent call."""

    candidates: list[Candidate] | None = None
