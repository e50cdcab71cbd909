# branding_studio_bot/services/__init__.py
from . import image_utils
from .image_generation_service import (
    GenerationResult,
    generate_branded_image,
)

__all__ = [
    "GenerationResult",
    "generate_branded_image",
    "image_utils",
]
