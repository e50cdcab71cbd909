# branding_studio_bot/handlers/__init__.py
from . import error, menu, photo_handler, prompt_handler, result_handler, utility

__all__ = [
    "error",
    "menu",
    "photo_handler",
    "prompt_handler",
    "result_handler",
    "utility",
]
