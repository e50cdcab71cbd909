# branding_studio_bot/services/image_generation_service.py
import time
from typing import Any, Optional

import structlog
from pydantic import BaseModel, ConfigDict

from branding_studio_bot.services import image_utils
from branding_studio_bot.services.errors import ImageGenerationError, InvalidApiKeyError
from branding_studio_bot.services.prompt_enhancer import build_enhanced_prompt

logger = structlog.get_logger(__name__)

_INVALID_API_KEY_MARKER = "API key not valid"


class GenerationResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_bytes: bytes
    content_type: str
    data_url: str
    enhanced_prompt: str
    response_payload: dict
    generation_time_ms: int


async def generate_branded_image(
    image_data_url: str,
    user_prompt: str,
    ai_client: Any,
    *,
    aspect_ratio: Optional[str] = None,
    user_id: Optional[int] = None,
) -> GenerationResult:
    """
    Sends the cropped photo and the enhanced prompt to the image model, once.

    Raises:
        InvalidApiKeyError: The provider rejected the configured key.
        ImageGenerationError: Any other failure, including a response without an image.
    """
    log = logger.bind(user_id=user_id, aspect_ratio=aspect_ratio)
    start_time = time.monotonic()

    try:
        mime_type, image_bytes = image_utils.decode_data_url(image_data_url)
        enhanced_prompt = build_enhanced_prompt(user_prompt)

        log.info("Sending request to Image Generation API", mime_type=mime_type, prompt_length=len(user_prompt))
        client_response = await ai_client.images.generate(
            prompt=enhanced_prompt,
            image_bytes=image_bytes,
            mime_type=mime_type,
            aspect_ratio=aspect_ratio,
        )
        if not getattr(client_response, "image_bytes", None):
            raise ValueError("No image was generated in the response.")
    except Exception as e:
        log.exception(
            "Error generating image",
            generation_time_ms=int((time.monotonic() - start_time) * 1000),
        )
        if _INVALID_API_KEY_MARKER in str(e):
            raise InvalidApiKeyError() from e
        raise ImageGenerationError() from e

    generation_time_ms = int((time.monotonic() - start_time) * 1000)
    content_type = client_response.content_type or "image/png"
    log.info(
        "Image generation successful",
        generation_time_ms=generation_time_ms,
        response_summary=str(client_response.response_payload)[:200],
    )

    return GenerationResult(
        image_bytes=client_response.image_bytes,
        content_type=content_type,
        data_url=image_utils.to_data_url(client_response.image_bytes, content_type),
        enhanced_prompt=enhanced_prompt,
        response_payload=client_response.response_payload,
        generation_time_ms=generation_time_ms,
    )
