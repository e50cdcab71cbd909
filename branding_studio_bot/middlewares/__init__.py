# branding_studio_bot/middlewares/__init__.py
from .locale import LocaleTextsMiddleware
from .logging import StructLoggingMiddleware

__all__ = [
    "LocaleTextsMiddleware",
    "StructLoggingMiddleware",
]
