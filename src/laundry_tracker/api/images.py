"""Image editing endpoints backed by the generative model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from laundry_tracker.api.models import ImageResponse, RemoveBackgroundRequest
from laundry_tracker.domain.errors import ValidationError
from laundry_tracker.services.background_removal import parse_encoded_image

if TYPE_CHECKING:
    from laundry_tracker.containers import AppContainer

router = APIRouter(prefix="/api", tags=["images"])


@router.post("/remove-background")
async def remove_background(
    payload: RemoveBackgroundRequest, request: Request
) -> ImageResponse:
    """Strip the background from a data URL image."""
    if not payload.image:
        raise ValidationError("No image provided")
    source = parse_encoded_image(payload.image)
    container: AppContainer = request.app.state.container
    result = await container.background_removal_service.remove_background(
        source.data, source.mime_type
    )
    return ImageResponse(image=result.to_data_url())
