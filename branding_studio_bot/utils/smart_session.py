# branding_studio_bot/utils/smart_session.py
import time
from typing import Any

import structlog.typing
from aiogram import Bot
from aiogram.client.session.aiohttp import AiohttpSession
from aiogram.exceptions import TelegramBadRequest
from aiogram.methods.base import TelegramMethod, TelegramType

# Expected when a status or preview message was already removed by the user
_BENIGN_BAD_REQUESTS = ("message to delete not found", "message is not modified")


class StructLogAiogramAiohttpSession(AiohttpSession):
    """Aiohttp session that logs every Bot API call with its duration."""

    def __init__(
        self,
        logger: structlog.typing.FilteringBoundLogger,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._logger = logger

    async def make_request(
        self,
        bot: Bot,
        method: TelegramMethod[TelegramType],
        timeout: int | None = None,
    ) -> TelegramType:
        # Photo payloads are not dumped: uploads carry the whole image
        req_logger = self._logger.bind(
            bot=bot.token.split(":")[0],
            method=method.__api_method__,
            chat_id=getattr(method, "chat_id", None),
            timeout=timeout,
        )
        st = time.monotonic()
        req_logger.debug("Making request to API")
        try:
            res = await super().make_request(bot, method, timeout)
        except TelegramBadRequest as e:
            if any(marker in str(e).lower() for marker in _BENIGN_BAD_REQUESTS):
                req_logger.warning(
                    "API warning (non-critical)",
                    error=str(e),
                    time_spent_ms=(time.monotonic() - st) * 1000,
                )
            else:
                req_logger.exception(
                    "API error: TelegramBadRequest",
                    error=str(e),
                    time_spent_ms=(time.monotonic() - st) * 1000,
                )
            raise
        except Exception as e:
            req_logger.exception(
                "API error",
                error=str(e),
                time_spent_ms=(time.monotonic() - st) * 1000,
            )
            raise
        req_logger.debug("API response", time_spent_ms=(time.monotonic() - st) * 1000)
        return res
