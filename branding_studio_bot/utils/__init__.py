# branding_studio_bot/utils/__init__.py
from . import bot_commands, logging, smart_session, status_manager

__all__ = [
    "bot_commands",
    "logging",
    "smart_session",
    "status_manager",
]
