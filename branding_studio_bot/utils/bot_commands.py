# branding_studio_bot/utils/bot_commands.py
from aiogram import Bot
from aiogram.types import BotCommand, BotCommandScopeDefault

from branding_studio_bot.data import texts


def _language_code(locale: str) -> str | None:
    # The default bundle is what users with any other language see
    return None if locale == texts.DEFAULT_LOCALE else locale


async def publish_bot_profile(bot: Bot) -> None:
    """Registers the command menu and descriptions for every bundled locale."""
    for locale, bundle in texts.ALL_TEXTS.items():
        language_code = _language_code(locale)
        await bot.set_my_commands(
            [BotCommand(command=c.command, description=c.description) for c in bundle.commands],
            scope=BotCommandScopeDefault(),
            language_code=language_code,
        )
        await bot.set_my_description(description=bundle.bot_info.description, language_code=language_code)
        await bot.set_my_short_description(
            short_description=bundle.bot_info.short_description,
            language_code=language_code,
        )
