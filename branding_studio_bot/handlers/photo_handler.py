# branding_studio_bot/handlers/photo_handler.py
import asyncio
from contextlib import suppress

import structlog
from aiogram import Bot, F, Router
from aiogram.exceptions import TelegramAPIError, TelegramBadRequest
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import default_state
from aiogram.types import CallbackQuery, InputMediaPhoto, Message

from branding_studio_bot.data.settings import settings
from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.handlers.helpers import (
    FULL_SIZE_MESSAGE_KEY,
    PREVIEW_MESSAGE_KEY,
    RESULT_MESSAGE_KEY,
    cleanup_session_messages,
    data_url_to_input_file,
    is_busy,
)
from branding_studio_bot.keyboards.inline import aspect_ratio_kb
from branding_studio_bot.keyboards.inline.callbacks import AspectRatioCallback
from branding_studio_bot.services import image_utils
from branding_studio_bot.services.editor_session import EditorSession, load_session, save_session
from branding_studio_bot.services.errors import ImageProcessingError
from branding_studio_bot.states.user import Editor
from branding_studio_bot.utils.status_manager import StatusMessageManager

router = Router(name="photo-handler")

IDLE_STATES = (default_state, Editor.waiting_for_photo, Editor.waiting_for_prompt, Editor.reviewing_result)


async def _download_file(bot: Bot, file_id: str) -> bytes:
    """Fetches a file through the get_file -> download_file sequence."""
    file_info = await bot.get_file(file_id)
    if not file_info.file_path:
        raise ImageProcessingError("Telegram returned no file path")
    file_io = await bot.download_file(file_info.file_path)
    if not file_io:
        raise ImageProcessingError("Telegram returned an empty download")
    return file_io.read()


async def crop_session_image(
    session: EditorSession,
    texts: LocaleTexts,
    log: structlog.typing.FilteringBoundLogger,
) -> bool:
    """
    Crops ``session.original_image`` to the session's ratio off the event loop.

    Returns:
        True on success; on failure the session carries the error message.
    """
    session.begin_crop()
    try:
        cropped = await asyncio.to_thread(
            image_utils.crop_image, session.original_image, session.aspect_ratio
        )
    except ImageProcessingError:
        log.exception("Failed to crop image", ratio=session.aspect_ratio.value)
        session.fail_crop(texts.errors.crop_failed)
        return False
    session.finish_crop(cropped)
    return True


def _preview_caption(session: EditorSession, texts: LocaleTexts) -> str:
    return texts.messages.cropped_caption.format(
        ratio=texts.aspect_ratios.for_ratio(session.aspect_ratio)
    )


@router.message(StateFilter(*IDLE_STATES), F.photo | F.document)
async def process_image_upload(
    message: Message,
    state: FSMContext,
    bot: Bot,
    texts: LocaleTexts,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """
    Accepts a new photo: resets the session, encodes the upload, crops it with
    the default ratio and shows the preview with the ratio keyboard.
    """
    log = business_logger.bind(user_id=message.from_user.id if message.from_user else None, chat_id=message.chat.id)

    if message.photo:
        largest = max(message.photo, key=lambda p: p.width * p.height)
        file_id, file_size, mime_type = largest.file_id, largest.file_size, "image/jpeg"
    else:
        document = message.document
        if not document.mime_type or not document.mime_type.startswith("image/"):
            await message.answer(texts.errors.not_an_image)
            return
        file_id, file_size, mime_type = document.file_id, document.file_size, document.mime_type

    if file_size and file_size > settings.image.max_upload_bytes:
        await message.answer(texts.errors.file_too_large)
        return

    await cleanup_session_messages(bot, message.chat.id, state)
    await state.update_data({PREVIEW_MESSAGE_KEY: None, RESULT_MESSAGE_KEY: None, FULL_SIZE_MESSAGE_KEY: None})
    session = await load_session(state)
    session.start_upload()
    await state.set_state(Editor.cropping)
    await save_session(state, session)

    status = await StatusMessageManager.show(message, texts.messages.cropping)
    try:
        data = await _download_file(bot, file_id)
        session.set_original(image_utils.file_to_data_url(data, mime_type))
    except (TelegramAPIError, ImageProcessingError):
        log.exception("Failed to read uploaded file", file_id=file_id)
        session.record_error(texts.errors.upload_failed)
        await status.delete()
        await save_session(state, session)
        await state.set_state(Editor.waiting_for_photo)
        await message.answer(texts.errors.upload_failed)
        return

    cropped = await crop_session_image(session, texts, log)
    await status.delete()
    await save_session(state, session)

    if not cropped:
        await state.set_state(Editor.waiting_for_photo)
        await message.answer(session.error)
        return

    preview = await message.answer_photo(
        data_url_to_input_file(session.cropped_image, "cropped.jpg"),
        caption=_preview_caption(session, texts),
        reply_markup=aspect_ratio_kb(session.aspect_ratio, texts),
    )
    await state.update_data({PREVIEW_MESSAGE_KEY: preview.message_id})
    await state.set_state(Editor.waiting_for_prompt)
    log.info("Photo uploaded and cropped", ratio=session.aspect_ratio.value)


@router.callback_query(AspectRatioCallback.filter())
async def process_aspect_ratio(
    cb: CallbackQuery,
    callback_data: AspectRatioCallback,
    state: FSMContext,
    texts: LocaleTexts,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """Re-crops the original photo (never the previous crop) to the chosen ratio."""
    if await is_busy(state):
        await cb.answer(texts.messages.still_working, show_alert=True)
        return

    session = await load_session(state)
    if not session.original_image:
        await cb.answer(texts.messages.no_photo, show_alert=True)
        return
    if callback_data.ratio == session.aspect_ratio and session.cropped_image:
        await cb.answer()
        return

    await cb.answer(texts.messages.cropping)
    log = business_logger.bind(user_id=cb.from_user.id, ratio=callback_data.ratio.value)

    previous_state = await state.get_state()
    previous_ratio = session.aspect_ratio
    session.select_aspect_ratio(callback_data.ratio)
    await state.set_state(Editor.cropping)
    await save_session(state, session)

    try:
        cropped = await crop_session_image(session, texts, log)
        if not cropped and session.cropped_image:
            # The preview and its keyboard still show the previous crop
            session.aspect_ratio = previous_ratio
        await save_session(state, session)
    finally:
        await state.set_state(previous_state)

    if not cropped:
        if cb.message:
            await cb.message.answer(session.error)
        return

    if cb.message:
        with suppress(TelegramBadRequest):
            await cb.message.edit_media(
                InputMediaPhoto(
                    media=data_url_to_input_file(session.cropped_image, "cropped.jpg"),
                    caption=_preview_caption(session, texts),
                ),
                reply_markup=aspect_ratio_kb(session.aspect_ratio, texts),
            )
    log.info("Photo re-cropped")
