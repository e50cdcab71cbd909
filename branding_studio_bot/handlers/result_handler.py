# branding_studio_bot/handlers/result_handler.py
import time
from contextlib import suppress

from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery

from branding_studio_bot.data.constants import ResultAction
from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.handlers.helpers import FULL_SIZE_MESSAGE_KEY, data_url_to_input_file, is_busy
from branding_studio_bot.keyboards.inline import close_preview_kb
from branding_studio_bot.keyboards.inline.callbacks import ResultActionCallback
from branding_studio_bot.services.editor_session import load_session, save_session
from branding_studio_bot.states.user import Editor

router = Router(name="result-handler")


def download_filename() -> str:
    return f"branded-image-{int(time.time() * 1000)}.png"


@router.callback_query(ResultActionCallback.filter(F.action == ResultAction.DOWNLOAD))
async def download_result(cb: CallbackQuery, state: FSMContext, bot: Bot, texts: LocaleTexts) -> None:
    """Sends the generated image uncompressed, as a file."""
    session = await load_session(state)
    if await is_busy(state) or not session.generated_image:
        await cb.answer(texts.messages.no_result, show_alert=True)
        return
    await cb.answer()
    await bot.send_document(
        chat_id=cb.from_user.id if not cb.message else cb.message.chat.id,
        document=data_url_to_input_file(session.generated_image, download_filename()),
    )


@router.callback_query(ResultActionCallback.filter(F.action == ResultAction.PREVIEW))
async def open_preview(cb: CallbackQuery, state: FSMContext, bot: Bot, texts: LocaleTexts) -> None:
    session = await load_session(state)
    if session.is_preview_open:
        await cb.answer()
        return
    if not session.open_preview():
        await cb.answer(texts.messages.no_result, show_alert=True)
        return
    await cb.answer()
    preview = await bot.send_photo(
        chat_id=cb.from_user.id if not cb.message else cb.message.chat.id,
        photo=data_url_to_input_file(session.generated_image, "preview.png"),
        caption=texts.messages.preview_caption,
        reply_markup=close_preview_kb(texts),
    )
    await save_session(state, session)
    await state.update_data({FULL_SIZE_MESSAGE_KEY: preview.message_id})


@router.callback_query(ResultActionCallback.filter(F.action == ResultAction.CLOSE_PREVIEW))
async def close_preview(cb: CallbackQuery, state: FSMContext) -> None:
    await cb.answer()
    session = await load_session(state)
    session.close_preview()
    await save_session(state, session)
    await state.update_data({FULL_SIZE_MESSAGE_KEY: None})
    if cb.message:
        with suppress(TelegramBadRequest):
            await cb.message.delete()


@router.callback_query(ResultActionCallback.filter(F.action == ResultAction.NEW_PROMPT))
async def ask_new_prompt(cb: CallbackQuery, state: FSMContext, bot: Bot, texts: LocaleTexts) -> None:
    """Keeps the current crop and waits for another description."""
    if await is_busy(state):
        await cb.answer(texts.messages.still_working, show_alert=True)
        return
    session = await load_session(state)
    if not session.cropped_image:
        await cb.answer(texts.messages.no_photo, show_alert=True)
        return
    await cb.answer()
    await state.set_state(Editor.waiting_for_prompt)
    await bot.send_message(cb.from_user.id if not cb.message else cb.message.chat.id, texts.messages.new_prompt)
