"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from laundry_tracker.config import Settings
from laundry_tracker.containers import AppContainer
from laundry_tracker.services.background_removal import (
    BackgroundRemovalService,
    ImageModelClient,
)
from laundry_tracker.services.occupancy import OccupancyStore


def image_response(data: str = "UkVTVUxU", mime_type: str = "image/png") -> dict:
    """Build a generateContent payload carrying one inline image."""
    return {
        "candidates": [
            {
                "content": {
                    "role": "model",
                    "parts": [
                        {"text": "Here is the image without its background."},
                        {"inlineData": {"mimeType": mime_type, "data": data}},
                    ],
                },
                "finishReason": "STOP",
            }
        ]
    }


@dataclass
class FakeImageModelClient(ImageModelClient):
    """Fake image model client returning a fixed payload."""

    payload: dict[str, object] = field(default_factory=image_response)
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate_content(
        self, *, model: str, parts: list[dict[str, object]]
    ) -> dict[str, object]:
        self.calls.append({"model": model, "parts": parts})
        return self.payload


@dataclass
class FailingImageModelClient(ImageModelClient):
    """Fake image model client that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("quota exceeded"))

    async def generate_content(
        self, *, model: str, parts: list[dict[str, object]]
    ) -> dict[str, object]:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key", environment="test")


@pytest.fixture
def image_client() -> FakeImageModelClient:
    return FakeImageModelClient()


@pytest.fixture
def container(settings: Settings, image_client: FakeImageModelClient) -> AppContainer:
    occupancy_store = OccupancyStore(
        machine_count=settings.machine_count,
        strict_transitions=settings.strict_status_transitions,
    )
    background_removal_service = BackgroundRemovalService(
        client=image_client,
        model=settings.gemini_model,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        occupancy_store=occupancy_store,
        background_removal_service=background_removal_service,
        close_resources=close_resources,
    )
