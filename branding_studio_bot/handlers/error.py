# branding_studio_bot/handlers/error.py
import structlog
from aiogram import Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import ErrorEvent, Update
from contextlib import suppress

from branding_studio_bot.data import texts as texts_module
from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.services.editor_session import load_session, save_session
from branding_studio_bot.states.user import BUSY_STATES, Editor

logger = structlog.get_logger(__name__)

router = Router(name="error-handler")


async def _release_busy_state(state: FSMContext) -> None:
    """Returns a chat stuck in a transient state to the last stable one."""
    if await state.get_state() not in {s.state for s in BUSY_STATES}:
        return
    session = await load_session(state)
    session.is_loading = False
    session.is_cropping = False
    await save_session(state, session)
    await state.set_state(Editor.waiting_for_prompt if session.cropped_image else Editor.waiting_for_photo)


@router.errors()
async def global_error_handler(
    event: ErrorEvent,
    texts: LocaleTexts | None = None,
    state: FSMContext | None = None,
) -> bool:
    """Handle all uncaught exceptions."""
    exception = event.exception
    actual_update: Update = event.update

    # Immediately acknowledge the callback to prevent timeout errors for the user
    if actual_update.callback_query:
        with suppress(TelegramBadRequest):
            await actual_update.callback_query.answer()

    if isinstance(exception, TelegramBadRequest):
        if "message to delete not found" in str(exception).lower():
            logger.warning("Tried to delete a message that was already deleted.")
            return True
        if "message is not modified" in str(exception).lower():
            logger.warning("Tried to edit a message with the same content.")
            return True

    logger.error(
        "An unhandled exception occurred",
        exc_info=exception,
        update_id=actual_update.update_id,
        update_type=actual_update.event_type,
    )

    if state is not None:
        await _release_busy_state(state)

    texts = texts or texts_module.get_texts(texts_module.DEFAULT_LOCALE)
    target_message = (
        actual_update.callback_query.message if actual_update.callback_query else actual_update.message
    )
    if target_message:
        with suppress(TelegramBadRequest):
            await target_message.answer(texts.errors.unexpected)

    return True
