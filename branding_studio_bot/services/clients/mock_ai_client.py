# branding_studio_bot/services/clients/mock_ai_client.py
from __future__ import annotations
import asyncio
import io
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict
from PIL import Image, ImageOps

logger = structlog.get_logger(__name__)


class MockAIClientResponse(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_bytes: bytes
    content_type: str = "image/png"
    response_payload: dict[str, Any]


class _MockImagesNamespace:
    def __init__(self, delay: float) -> None:
        self._delay = delay

    async def generate(
        self,
        *,
        prompt: str,
        image_bytes: bytes,
        mime_type: str,
        aspect_ratio: str | None = None,
        **_kwargs: Any,
    ) -> MockAIClientResponse:
        """Returns a sepia-toned copy of the input so the whole flow can run offline."""
        logger.info("MOCK Images: Simulating image generation...", aspect_ratio=aspect_ratio)
        if self._delay:
            await asyncio.sleep(self._delay)

        try:
            with Image.open(io.BytesIO(image_bytes)) as src:
                toned = ImageOps.colorize(ImageOps.grayscale(src), "#2b1d0e", "#f5e6c8")
        except OSError:
            logger.warning("MOCK Images: Input is not decodable, using a fallback canvas.", mime_type=mime_type)
            toned = Image.new("RGB", (1024, 1024), "gray")

        buffer = io.BytesIO()
        toned.save(buffer, format="PNG")

        return MockAIClientResponse(
            image_bytes=buffer.getvalue(),
            response_payload={"mock_data": True, "prompt_length": len(prompt)},
        )


class MockAIClient:
    def __init__(self, delay: float = 1.0, **_kwargs: Any) -> None:
        self.images = _MockImagesNamespace(delay)
