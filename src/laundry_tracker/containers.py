"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from laundry_tracker.adapters.gemini_image_client import HttpxGeminiImageClient
from laundry_tracker.config import Settings
from laundry_tracker.services.background_removal import BackgroundRemovalService
from laundry_tracker.services.occupancy import OccupancyStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    occupancy_store: OccupancyStore
    background_removal_service: BackgroundRemovalService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    occupancy_store = OccupancyStore(
        machine_count=resolved_settings.machine_count,
        strict_transitions=resolved_settings.strict_status_transitions,
    )
    gemini_client = HttpxGeminiImageClient.create(
        api_key=resolved_settings.gemini_api_key,
        base_url=resolved_settings.gemini_base_url,
        timeout=resolved_settings.gemini_timeout_seconds,
    )
    background_removal_service = BackgroundRemovalService(
        client=gemini_client,
        model=resolved_settings.gemini_model,
    )

    async def close_resources() -> None:
        await gemini_client.close()

    return AppContainer(
        settings=resolved_settings,
        occupancy_store=occupancy_store,
        background_removal_service=background_removal_service,
        close_resources=close_resources,
    )
