"""Gemini generateContent REST client for image editing."""

from dataclasses import dataclass

import httpx

from laundry_tracker.services.background_removal import ImageModelClient


@dataclass
class HttpxGeminiImageClient(ImageModelClient):
    """HTTPX-backed Gemini client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 120.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout: float = 120.0
    ) -> "HttpxGeminiImageClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def generate_content(
        self, *, model: str, parts: list[dict[str, object]]
    ) -> dict[str, object]:
        """Call generateContent with a single user turn."""
        url = f"{self.base_url.rstrip('/')}/models/{model}:generateContent"
        response = await self.http_client.post(
            url,
            headers={"x-goog-api-key": self.api_key},
            json={
                "contents": [{"role": "user", "parts": parts}],
                "generationConfig": {"responseModalities": ["TEXT", "IMAGE"]},
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
