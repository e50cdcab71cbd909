# branding_studio_bot/utils/status_manager.py
import asyncio
import time
from contextlib import suppress

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import Message


class StatusMessageManager:
    """
    Stands in for the spinner of a long-running step: a single text message that
    stays visible for at least ``min_duration`` seconds and is removed afterwards.
    """

    def __init__(self, bot: Bot, chat_id: int, message_id: int, min_duration: float = 1.0) -> None:
        self.bot = bot
        self.chat_id = chat_id
        self.message_id = message_id
        self.min_duration = min_duration
        self._shown_at = time.monotonic()

    @classmethod
    async def show(cls, message: Message, text: str, min_duration: float = 1.0) -> "StatusMessageManager":
        """Sends ``text`` as a reply to ``message`` and tracks it."""
        sent = await message.answer(text)
        return cls(message.bot, sent.chat.id, sent.message_id, min_duration=min_duration)

    async def delete(self) -> None:
        # A crop can finish within milliseconds; avoid a flicker
        remaining = self.min_duration - (time.monotonic() - self._shown_at)
        if remaining > 0:
            await asyncio.sleep(remaining)
        with suppress(TelegramBadRequest):
            await self.bot.delete_message(chat_id=self.chat_id, message_id=self.message_id)
