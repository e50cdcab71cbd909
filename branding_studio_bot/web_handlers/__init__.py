# branding_studio_bot/web_handlers/__init__.py
from .tg_updates import tg_webhook_handler

__all__ = ["tg_webhook_handler"]
