# branding_studio_bot/handlers/helpers.py
from contextlib import suppress

from aiogram import Bot
from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import BufferedInputFile

from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.services import image_utils
from branding_studio_bot.services.errors import InvalidApiKeyError, SessionNotReadyError
from branding_studio_bot.states.user import BUSY_STATES

# FSM keys of messages whose keyboards belong to the current session
PREVIEW_MESSAGE_KEY = "preview_message_id"
RESULT_MESSAGE_KEY = "result_message_id"
FULL_SIZE_MESSAGE_KEY = "full_size_message_id"


def data_url_to_input_file(data_url: str, filename: str) -> BufferedInputFile:
    _, data = image_utils.decode_data_url(data_url)
    return BufferedInputFile(data, filename=filename)


def generation_error_text(exc: Exception, texts: LocaleTexts) -> str:
    if isinstance(exc, InvalidApiKeyError):
        return texts.errors.invalid_api_key
    if isinstance(exc, SessionNotReadyError):
        return texts.errors.session_not_ready
    return texts.errors.generation_failed


async def retire_result_messages(bot: Bot, chat_id: int, state: FSMContext) -> None:
    """
    Detaches the shown result from the session: its keyboard is removed, an open
    full-size preview is deleted and both ids are forgotten.
    """
    data = await state.get_data()

    if message_id := data.get(RESULT_MESSAGE_KEY):
        with suppress(TelegramBadRequest):
            await bot.edit_message_reply_markup(chat_id=chat_id, message_id=message_id, reply_markup=None)

    if message_id := data.get(FULL_SIZE_MESSAGE_KEY):
        with suppress(TelegramBadRequest):
            await bot.delete_message(chat_id=chat_id, message_id=message_id)

    await state.update_data({RESULT_MESSAGE_KEY: None, FULL_SIZE_MESSAGE_KEY: None})


async def cleanup_session_messages(bot: Bot, chat_id: int, state: FSMContext) -> None:
    """Makes every message of the previous session non-interactive."""
    await retire_result_messages(bot, chat_id, state)

    if message_id := (await state.get_data()).get(PREVIEW_MESSAGE_KEY):
        with suppress(TelegramBadRequest):
            await bot.edit_message_reply_markup(chat_id=chat_id, message_id=message_id, reply_markup=None)


async def is_busy(state: FSMContext) -> bool:
    """True while a crop or a generation request of this chat is in flight."""
    return await state.get_state() in {s.state for s in BUSY_STATES}
