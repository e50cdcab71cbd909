# branding_studio_bot/middlewares/logging.py
import time
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, Update


class StructLoggingMiddleware(BaseMiddleware):
    """Logs each incoming update with its type, sender and processing time."""

    def __init__(self, logger: structlog.typing.FilteringBoundLogger) -> None:
        self.logger = logger

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        if not isinstance(event, Update):
            return await handler(event, data)

        user = data.get("event_from_user")
        log = self.logger.bind(
            update_id=event.update_id,
            update_type=event.event_type,
            user_id=user.id if user else None,
        )
        st = time.monotonic()
        log.debug("Received update")
        try:
            result = await handler(event, data)
        except Exception:
            log.warning("Update processing failed", time_spent_ms=(time.monotonic() - st) * 1000)
            raise
        log.info(
            "Processed update",
            handled=result is not None,
            time_spent_ms=(time.monotonic() - st) * 1000,
        )
        return result
