# branding_studio_bot/keyboards/inline/__init__.py
from .aspect_ratio import aspect_ratio_kb
from .callbacks import AspectRatioCallback, ResultActionCallback
from .result_actions import close_preview_kb, result_actions_kb

__all__ = [
    "AspectRatioCallback",
    "ResultActionCallback",
    "aspect_ratio_kb",
    "close_preview_kb",
    "result_actions_kb",
]
