# branding_studio_bot/services/clients/google_ai_client.py
from __future__ import annotations
import json
from typing import Any, List

import structlog
from pydantic import BaseModel, ConfigDict

from branding_studio_bot.data.settings import GeminiConfig, settings

# Google Gen AI SDK (Developer API or Vertex AI backend)
from google import genai
from google.genai import types
from google.genai.types import Modality

# Service account credentials
from google.oauth2.service_account import Credentials

logger = structlog.get_logger(__name__)


class GoogleGeminiClientResponse(BaseModel):
    """Standardized response from Gemini client."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image_bytes: bytes
    content_type: str = "image/png"
    response_payload: dict


def _serialize_response(resp: Any) -> dict:
    """Small logging payload; inline image bytes are replaced by their size."""
    if not resp:
        return {}
    out: dict[str, Any] = {"candidates": []}
    for cand in getattr(resp, "candidates", None) or []:
        content = getattr(cand, "content", None)
        parts_out = []
        for p in getattr(content, "parts", None) or []:
            inline = getattr(p, "inline_data", None)
            if inline is not None:
                data = getattr(inline, "data", None) or b""
                parts_out.append({
                    "inline_data": {
                        "mime_type": getattr(inline, "mime_type", None),
                        "data": f"<redacted {len(data)} bytes>",
                    }
                })
            elif getattr(p, "text", None):
                parts_out.append({"text": p.text})
        finish_reason = getattr(cand, "finish_reason", None)
        out["candidates"].append({
            "finish_reason": str(finish_reason) if finish_reason is not None else None,
            "parts": parts_out,
        })
    usage = getattr(resp, "usage_metadata", None)
    if usage is not None and hasattr(usage, "model_dump"):
        out["usage_metadata"] = usage.model_dump(mode="json", exclude_none=True)
    return out


def _first_inline_image(parts: List[Any]) -> tuple[bytes, str] | None:
    """Return the first inline image (bytes, mime) from parts."""
    for p in parts or []:
        inline = getattr(p, "inline_data", None)
        if inline and getattr(inline, "data", None):
            return inline.data, getattr(inline, "mime_type", None) or "image/png"
    return None


def _build_genai_client(config: GeminiConfig) -> genai.Client:
    """Creates a google-genai client from either an API key or Vertex AI service account."""
    if config.api_key:
        return genai.Client(api_key=config.api_key.get_secret_value())

    if config.project_id and config.service_account_creds_json:
        creds_info = json.loads(config.service_account_creds_json.get_secret_value())
        scoped_creds = Credentials.from_service_account_info(creds_info).with_scopes(
            ["https://www.googleapis.com/auth/cloud-platform"]
        )
        return genai.Client(
            vertexai=True,
            project=config.project_id,
            location=config.location,
            credentials=scoped_creds,
        )

    raise RuntimeError(
        "Missing Gemini configuration. Set GEMINI__API_KEY, or "
        "GEMINI__PROJECT_ID and GEMINI__SERVICE_ACCOUNT_CREDS_JSON for Vertex AI."
    )


class _ImagesNamespace:
    """
    Handles image editing via the Gemini API using google-genai.

    One call per request: the cropped photo goes in as an inline part, followed
    by the instruction text, and only the image modality is requested back.
    """
    DEFAULT_MODEL = "gemini-2.5-flash-image"

    def __init__(self, config: GeminiConfig) -> None:
        self._config = config
        try:
            self._client = _build_genai_client(config)
            logger.info("GenAI client initialized.", vertexai=not config.api_key)
        except Exception:
            logger.exception("Failed to initialize Google Gen AI client.")
            raise

    async def generate(
        self,
        *,
        prompt: str,
        image_bytes: bytes,
        mime_type: str,
        aspect_ratio: str | None = None,
        model: str | None = None,
    ) -> GoogleGeminiClientResponse:
        """Restyle ``image_bytes`` according to ``prompt`` with Gemini 2.5 Flash Image."""
        model_name = model or self._config.model or self.DEFAULT_MODEL
        log = logger.bind(model=model_name, aspect_ratio=aspect_ratio)

        parts: List[Any] = [
            types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
            types.Part.from_text(text=prompt),
        ]

        config_kwargs: dict[str, Any] = {"response_modalities": [Modality.IMAGE]}
        if self._config.temperature is not None:
            config_kwargs["temperature"] = self._config.temperature
        if aspect_ratio:
            config_kwargs["image_config"] = types.ImageConfig(aspect_ratio=aspect_ratio)

        log.info("Calling Gemini for image generation.", image_size=len(image_bytes))
        try:
            response = await self._client.aio.models.generate_content(
                model=model_name,
                contents=parts,
                config=types.GenerateContentConfig(**config_kwargs),
            )
        except Exception as e:
            log.error("Gemini API error during image generation", error=str(e))
            raise

        if not response or not getattr(response, "candidates", None):
            log.error("Empty or invalid response from Gemini.", payload=str(response))
            raise ValueError("No image was generated in the response.")

        candidate = response.candidates[0]
        content = getattr(candidate, "content", None)
        picked = _first_inline_image(getattr(content, "parts", None) or [])

        if not picked:
            log.error(
                "No inline image in response.",
                reason=str(getattr(candidate, "finish_reason", "UNKNOWN")),
                payload=_serialize_response(response),
            )
            raise ValueError("No image was generated in the response.")

        data, content_type = picked
        return GoogleGeminiClientResponse(
            image_bytes=data,
            content_type=content_type,
            response_payload=_serialize_response(response),
        )


class GoogleGeminiClient:
    """Gemini client focused on image generation."""
    def __init__(self, config: GeminiConfig | None = None, **_kwargs: Any) -> None:
        self.images = _ImagesNamespace(config or settings.gemini)
