# branding_studio_bot/bot.py
import asyncio
import sys
from urllib.parse import urlparse

import aiojobs
import orjson
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage
from aiohttp import web

from branding_studio_bot import utils
from branding_studio_bot.data.settings import settings
from branding_studio_bot.middlewares import LocaleTextsMiddleware, StructLoggingMiddleware
from branding_studio_bot.services.clients import get_ai_client
from branding_studio_bot.web_handlers.tg_updates import tg_webhook_handler

from branding_studio_bot.handlers import (
    error,
    menu,
    photo_handler,
    prompt_handler,
    result_handler,
    utility,
)


async def setup_aiohttp_app(bot: Bot, dp: Dispatcher) -> web.Application:
    scheduler = aiojobs.Scheduler()
    app = web.Application()

    webhook_path_from_url = urlparse(str(settings.webhook.address)).path
    full_webhook_path = f"{webhook_path_from_url.rstrip('/')}/bot/{{bot_id}}"

    app.router.add_post(full_webhook_path, tg_webhook_handler)

    app["bot"] = bot
    app["dp"] = dp
    app["scheduler"] = scheduler
    app.on_startup.append(aiohttp_on_startup)
    app.on_shutdown.append(aiohttp_on_shutdown)
    return app


def setup_handlers(dp: Dispatcher) -> None:
    # Order matters: commands first, the catch-all utility router last
    dp.include_router(error.router)
    dp.include_router(menu.router)
    dp.include_router(photo_handler.router)
    dp.include_router(result_handler.router)
    dp.include_router(prompt_handler.router)
    dp.include_router(utility.router)


def setup_middlewares(dp: Dispatcher) -> None:
    dp.update.outer_middleware(StructLoggingMiddleware(logger=dp["aiogram_logger"]))
    dp.update.outer_middleware(LocaleTextsMiddleware())


def setup_logging(dp: Dispatcher) -> None:
    dp["aiogram_logger"] = utils.logging.setup_logger().bind(type="aiogram")
    dp["business_logger"] = utils.logging.setup_logger().bind(type="business")


def setup_ai_client(dp: Dispatcher) -> None:
    logger = dp["business_logger"]
    try:
        dp["ai_client"] = get_ai_client(settings.gemini.client)
    except (RuntimeError, ValueError):
        logger.exception("Failed to create the image generation client", client=settings.gemini.client)
        sys.exit(1)
    logger.info("Image generation client ready", client=settings.gemini.client, model=settings.gemini.model)


async def aiohttp_on_startup(app: web.Application) -> None:
    dp: Dispatcher = app["dp"]
    workflow_data = {"app": app, "dispatcher": dp, "bot": app["bot"]}
    await dp.emit_startup(**workflow_data)


async def aiohttp_on_shutdown(app: web.Application) -> None:
    dp: Dispatcher = app["dp"]
    await app["scheduler"].close()
    workflow_data = {"app": app, "dispatcher": dp, "bot": app.get("bot")}
    await dp.emit_shutdown(**workflow_data)


async def aiogram_on_startup(dispatcher: Dispatcher, bot: Bot) -> None:
    logger = dispatcher["aiogram_logger"]
    await utils.bot_commands.publish_bot_profile(bot)

    if settings.webhook is None:
        logger.info("Starting in long polling mode")
        await bot.delete_webhook(drop_pending_updates=True)
        return

    webhook_logger = logger.bind(webhook_url=str(settings.webhook.address))
    webhook_logger.debug("Configuring webhook")
    webhook_url_for_telegram = (
        f"{str(settings.webhook.address).rstrip('/')}/bot/{settings.bot.id}"
    )
    await bot.set_webhook(
        url=webhook_url_for_telegram,
        allowed_updates=dispatcher.resolve_used_update_types(),
        secret_token=settings.webhook.secret_token.get_secret_value(),
    )
    webhook_logger.info("Configured webhook")


async def aiogram_on_shutdown(dispatcher: Dispatcher, bot: Bot) -> None:
    dispatcher["aiogram_logger"].debug("Stopping bot")
    await dispatcher.storage.close()
    await bot.session.close()
    dispatcher["aiogram_logger"].info("Stopped bot")


def create_dispatcher() -> Dispatcher:
    # Sessions are intentionally kept in memory only
    dp = Dispatcher(storage=MemoryStorage())
    setup_logging(dp)
    setup_ai_client(dp)
    setup_handlers(dp)
    setup_middlewares(dp)
    dp.startup.register(aiogram_on_startup)
    dp.shutdown.register(aiogram_on_shutdown)
    return dp


def main() -> None:
    aiogram_session_logger = utils.logging.setup_logger().bind(type="aiogram_session")
    session = utils.smart_session.StructLogAiogramAiohttpSession(
        json_loads=orjson.loads,
        logger=aiogram_session_logger,
    )
    bot = Bot(
        token=settings.bot.token.get_secret_value(),
        session=session,
        default=DefaultBotProperties(parse_mode="HTML"),
    )
    dp = create_dispatcher()

    if settings.webhook is None:
        asyncio.run(dp.start_polling(bot, handle_signals=True))
        return

    web.run_app(
        setup_aiohttp_app(bot, dp),
        handle_signals=True,
        host=settings.webhook.listening_host,
        port=settings.webhook.listening_port,
    )


if __name__ == "__main__":
    main()
