# branding_studio_bot/middlewares/locale.py
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from branding_studio_bot.data import texts


class LocaleTextsMiddleware(BaseMiddleware):
    """Injects ``locale`` and the matching ``texts`` bundle into handler data."""

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        user = data.get("event_from_user")
        locale = texts.resolve_locale(user.language_code if user else None)
        data["locale"] = locale
        data["texts"] = texts.get_texts(locale)
        return await handler(event, data)
