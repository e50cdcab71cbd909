# branding_studio_bot/services/image_utils.py
import base64
import binascii
import io
import re
from typing import NamedTuple

import structlog
from PIL import Image, ImageOps, UnidentifiedImageError

from branding_studio_bot.data.constants import AspectRatio
from branding_studio_bot.data.settings import settings
from branding_studio_bot.services.errors import ImageProcessingError

logger = structlog.get_logger(__name__)

_DATA_URL_RE = re.compile(r"^data:(.+);base64,(.+)$", re.DOTALL)


class CropBox(NamedTuple):
    """Source rectangle of a center crop, in (possibly fractional) pixels."""
    left: float
    top: float
    width: float
    height: float

    def to_pixels(self, image_width: int, image_height: int) -> tuple[int, int, int, int]:
        """Rounds the box to a Pillow ``(left, upper, right, lower)`` tuple inside the image."""
        left = min(max(round(self.left), 0), image_width - 1)
        top = min(max(round(self.top), 0), image_height - 1)
        right = min(max(round(self.left + self.width), left + 1), image_width)
        bottom = min(max(round(self.top + self.height), top + 1), image_height)
        return left, top, right, bottom


# --- Data URL helpers ---

def to_data_url(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def parse_data_url(data_url: str) -> tuple[str, str]:
    """
    Splits a ``data:<mime>;base64,<payload>`` URL.

    Returns:
        A ``(mime_type, base64_payload)`` tuple.

    Raises:
        ImageProcessingError: If the string is not a base64 data URL.
    """
    match = _DATA_URL_RE.match(data_url or "")
    if not match:
        raise ImageProcessingError("Invalid data URL format")
    return match.group(1), match.group(2)


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Returns ``(mime_type, raw_bytes)`` for a base64 data URL."""
    mime_type, payload = parse_data_url(data_url)
    try:
        return mime_type, base64.b64decode(payload, validate=True)
    except binascii.Error as e:
        raise ImageProcessingError("Invalid base64 payload in data URL") from e


def _sniff_image_mime(data: bytes) -> str:
    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise ImageProcessingError("File is not a readable image") from e
    mime = Image.MIME.get(image_format or "")
    if not mime:
        raise ImageProcessingError(f"Unsupported image format: {image_format}")
    return mime


def file_to_data_url(data: bytes, mime_type: str | None = None) -> str:
    """
    Encodes an uploaded file as a base64 data URL.

    The bytes are always checked to be a readable image. A declared ``image/*``
    MIME type is kept; anything else is replaced by the sniffed one.
    """
    if not data:
        raise ImageProcessingError("Uploaded file is empty")
    sniffed = _sniff_image_mime(data)
    if not mime_type or not mime_type.startswith("image/"):
        mime_type = sniffed
    return to_data_url(data, mime_type)


# --- Crop geometry ---

def compute_center_crop(width: float, height: float, target_ratio: float) -> CropBox:
    """
    Computes the largest centered rectangle of ``target_ratio`` (width / height)
    that fits in a ``width`` x ``height`` image.

    A wider source loses its sides, a taller (or equal) one loses top and bottom.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
    if target_ratio <= 0:
        raise ValueError(f"Target aspect ratio must be positive, got {target_ratio}")

    if width / height > target_ratio:
        crop_width = height * target_ratio
        return CropBox(left=(width - crop_width) / 2, top=0.0, width=crop_width, height=float(height))

    crop_height = width / target_ratio
    return CropBox(left=0.0, top=(height - crop_height) / 2, width=float(width), height=crop_height)


def crop_image(
    image_data_url: str,
    aspect_ratio: AspectRatio,
    *,
    quality: int | None = None,
) -> str:
    """
    Center-crops an image to the given aspect ratio.

    The result is always re-encoded as JPEG, which keeps API payloads small.

    Args:
        image_data_url: The source image as a base64 data URL.
        aspect_ratio: One of the supported ratios.
        quality: JPEG quality, defaults to ``settings.image.jpeg_quality``.

    Returns:
        The cropped image as an ``image/jpeg`` data URL.
    """
    _, raw = decode_data_url(image_data_url)
    quality = quality or settings.image.jpeg_quality

    try:
        with Image.open(io.BytesIO(raw)) as src:
            img = ImageOps.exif_transpose(src)
            box = compute_center_crop(img.width, img.height, aspect_ratio.value_ratio)
            cropped = img.crop(box.to_pixels(img.width, img.height))
            if cropped.mode != "RGB":
                cropped = cropped.convert("RGB")
            buf = io.BytesIO()
            cropped.save(buf, format="JPEG", quality=quality)
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
        raise ImageProcessingError("Could not crop the image") from e

    logger.debug(
        "Image cropped",
        ratio=aspect_ratio.value,
        source_size=(img.width, img.height),
        cropped_size=cropped.size,
    )
    return to_data_url(buf.getvalue(), "image/jpeg")
