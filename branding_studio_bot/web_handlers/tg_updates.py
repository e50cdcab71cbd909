# branding_studio_bot/web_handlers/tg_updates.py
import secrets
from typing import TYPE_CHECKING

import orjson
import structlog
from aiogram import Bot, Dispatcher, types
from aiohttp import web

from branding_studio_bot.data.settings import WebhookConfig, settings

if TYPE_CHECKING:
    import aiojobs

logger = structlog.get_logger(__name__)

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"


def _is_from_telegram(req: web.Request, webhook: WebhookConfig) -> bool:
    """Checks the secret token header and the bot id in the path."""
    token_ok = secrets.compare_digest(
        req.headers.get(SECRET_HEADER, ""),
        webhook.secret_token.get_secret_value(),
    )
    return token_ok and req.match_info.get("bot_id") == str(settings.bot.id)


async def _feed(bot: Bot, dp: Dispatcher, update: types.Update, app: web.Application) -> None:
    await dp.feed_webhook_update(bot, update, app=app)


async def tg_webhook_handler(req: web.Request) -> web.Response:
    """
    Accepts a Telegram update and answers at once; the update is processed by
    the aiojobs scheduler so slow generations never block the webhook.
    """
    webhook = settings.webhook
    if webhook is None or not _is_from_telegram(req, webhook):
        logger.warning("Rejected webhook request", remote=req.remote, path=req.path)
        raise web.HTTPNotFound

    scheduler: aiojobs.Scheduler = req.app["scheduler"]
    if scheduler.closed:
        raise web.HTTPServiceUnavailable(reason="Closed queue")
    if scheduler.pending_count > settings.bot.max_updates_in_queue:
        logger.warning("Update queue is full", pending=scheduler.pending_count)
        raise web.HTTPTooManyRequests

    update = types.Update.model_validate(await req.json(loads=orjson.loads))
    await scheduler.spawn(_feed(req.app["bot"], req.app["dp"], update, req.app))
    return web.Response()
