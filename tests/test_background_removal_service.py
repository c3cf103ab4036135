"""Tests for the background removal service."""

import asyncio

import httpx
import pytest

from laundry_tracker.domain.errors import InvalidImageError, UpstreamFailureError
from laundry_tracker.domain.images import EncodedImage
from laundry_tracker.services.background_removal import (
    REMOVE_BACKGROUND_PROMPT,
    BackgroundRemovalService,
    parse_encoded_image,
)
from tests.conftest import FailingImageModelClient, FakeImageModelClient


def test_parse_encoded_image_splits_data_url() -> None:
    parsed = parse_encoded_image("data:image/png;base64,QUJD")

    assert parsed == EncodedImage(mime_type="image/png", data="QUJD")


@pytest.mark.parametrize(
    "value",
    [
        "QUJD",
        "data:image/png,QUJD",
        "data:;base64,QUJD",
        "data:image/png;base64,",
        "data:image/png;base64,QUJD\n",
        " data:image/png;base64,QUJD",
    ],
)
def test_parse_encoded_image_rejects_other_strings(value: str) -> None:
    with pytest.raises(InvalidImageError):
        parse_encoded_image(value)


def test_remove_background_returns_first_inline_image() -> None:
    client = FakeImageModelClient()
    service = BackgroundRemovalService(client=client, model="gemini-2.5-flash-image")

    result = asyncio.run(service.remove_background("QUJD", "image/jpeg"))

    assert result == EncodedImage(mime_type="image/png", data="UkVTVUxU")
    call = client.calls[0]
    assert call["model"] == "gemini-2.5-flash-image"
    assert call["parts"] == [
        {"text": REMOVE_BACKGROUND_PROMPT},
        {"inlineData": {"mimeType": "image/jpeg", "data": "QUJD"}},
    ]


def test_remove_background_defaults_missing_mime_type() -> None:
    client = FakeImageModelClient(
        payload={
            "candidates": [{"content": {"parts": [{"inlineData": {"data": "WA=="}}]}}]
        }
    )
    service = BackgroundRemovalService(client=client, model="m")

    result = asyncio.run(service.remove_background("QUJD"))

    assert result.mime_type == "image/png"
    assert client.calls[0]["parts"][1]["inlineData"]["mimeType"] == "image/png"


@pytest.mark.parametrize(
    ("payload", "reason"),
    [
        ({}, "No response from AI model"),
        ({"candidates": []}, "No response from AI model"),
        ({"candidates": [{"content": {"parts": []}}]}, "No response from AI model"),
        (
            {"candidates": [{"content": {"parts": [{"text": "I can't do that."}]}}]},
            "No image generated in response",
        ),
    ],
)
def test_remove_background_without_image_fails(payload: dict, reason: str) -> None:
    service = BackgroundRemovalService(
        client=FakeImageModelClient(payload=payload), model="m"
    )

    with pytest.raises(UpstreamFailureError) as excinfo:
        asyncio.run(service.remove_background("QUJD"))

    assert excinfo.value.message == reason


def test_remove_background_wraps_client_errors() -> None:
    service = BackgroundRemovalService(client=FailingImageModelClient(), model="m")

    with pytest.raises(UpstreamFailureError) as excinfo:
        asyncio.run(service.remove_background("QUJD"))

    assert excinfo.value.message == "quota exceeded"
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_remove_background_wraps_transport_errors() -> None:
    error = httpx.ConnectError("connection refused")
    service = BackgroundRemovalService(
        client=FailingImageModelClient(error=error), model="m"
    )

    with pytest.raises(UpstreamFailureError) as excinfo:
        asyncio.run(service.remove_background("QUJD"))

    assert "connection refused" in excinfo.value.message


def test_remove_background_rejects_malformed_response() -> None:
    service = BackgroundRemovalService(
        client=FakeImageModelClient(payload={"candidates": "nope"}), model="m"
    )

    with pytest.raises(UpstreamFailureError) as excinfo:
        asyncio.run(service.remove_background("QUJD"))

    assert excinfo.value.message


def test_encoded_image_to_data_url() -> None:
    image = EncodedImage(mime_type="image/webp", data="QUJD")

    assert image.to_data_url() == "data:image/webp;base64,QUJD"
