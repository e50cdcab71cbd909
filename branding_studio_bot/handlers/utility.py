# branding_studio_bot/handlers/utility.py
from aiogram import Router
from aiogram.filters import Command, StateFilter
from aiogram.types import Message

from branding_studio_bot.data.settings import settings
from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.states.user import BUSY_STATES

router = Router(name="utility-handlers")


@router.message(Command("help"))
async def help_cmd(msg: Message, texts: LocaleTexts) -> None:
    await msg.answer(texts.messages.help.format(email=settings.bot.support_email))


@router.message(StateFilter(*BUSY_STATES))
async def handle_input_while_busy(msg: Message, texts: LocaleTexts) -> None:
    """Only one crop or generation runs per chat; everything else waits for it."""
    await msg.answer(texts.messages.still_working)


@router.message()
async def handle_unexpected_input(msg: Message, texts: LocaleTexts) -> None:
    """
    Catches any input no other handler wanted and gently guides the user back
    to the flow.
    """
    await msg.answer(texts.messages.unexpected_input)
