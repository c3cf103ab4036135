"""Background removal via a generative image model."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError as PydanticValidationError

from laundry_tracker.domain.errors import InvalidImageError, UpstreamFailureError
from laundry_tracker.domain.images import EncodedImage, GenerateContentResponse

logger = logging.getLogger(__name__)

REMOVE_BACKGROUND_PROMPT = (
    "Remove the background from this image completely and make it transparent. "
    "Keep only the main subject/foreground of the image. "
    "The output should be a PNG image with a transparent background. "
    "Do not add any new elements, just remove the background."
)

_DATA_URL_PATTERN = re.compile(r"data:([^;]+);base64,(.+)")


class ImageModelClient(Protocol):
    """Interface for generative image model calls."""

    async def generate_content(
        self, *, model: str, parts: list[dict[str, object]]
    ) -> dict[str, object]:
        """Return the raw generateContent response."""


def parse_encoded_image(value: str) -> EncodedImage:
    """Split a ``data:<mime>;base64,<payload>`` URL into its parts."""
    match = _DATA_URL_PATTERN.fullmatch(value)
    if not match:
        raise InvalidImageError("Invalid image data URL format")
    return EncodedImage(mime_type=match.group(1), data=match.group(2))


@dataclass
class BackgroundRemovalService:
    """Service that forwards images to the model and extracts the result."""

    client: ImageModelClient
    model: str

    async def remove_background(
        self, data: str, mime_type: str = "image/png"
    ) -> EncodedImage:
        """Return the first inline image the model produces for the input."""
        parts: list[dict[str, object]] = [
            {"text": REMOVE_BACKGROUND_PROMPT},
            {"inlineData": {"mimeType": mime_type, "data": data}},
        ]
        try:
            raw = await self.client.generate_content(model=self.model, parts=parts)
            response = GenerateContentResponse.model_validate(raw)
        except PydanticValidationError as exc:
            logger.exception("Unexpected image model response")
            raise UpstreamFailureError("Malformed response from AI model") from exc
        except Exception as exc:
            logger.exception("Image model request failed", extra={"model": self.model})
            raise UpstreamFailureError(_describe(exc)) from exc
        return _first_inline_image(response)


def _first_inline_image(response: GenerateContentResponse) -> EncodedImage:
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    if content is None or not content.parts:
        raise UpstreamFailureError("No response from AI model")
    for part in content.parts:
        if part.inline_data:
            return EncodedImage(
                mime_type=part.inline_data.mime_type or "image/png",
                data=part.inline_data.data,
            )
    raise UpstreamFailureError("No image generated in response")


def _describe(exc: Exception) -> str:
    return str(exc).strip() or type(exc).__name__
