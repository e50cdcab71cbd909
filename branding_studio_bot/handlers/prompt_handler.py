# branding_studio_bot/handlers/prompt_handler.py
from typing import Any

import structlog
from aiogram import Bot, F, Router
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.fsm.state import default_state
from aiogram.types import BufferedInputFile, Message

from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.handlers.helpers import (
    RESULT_MESSAGE_KEY,
    generation_error_text,
    retire_result_messages,
)
from branding_studio_bot.keyboards.inline import result_actions_kb
from branding_studio_bot.services import image_generation_service
from branding_studio_bot.services.editor_session import load_session, save_session
from branding_studio_bot.services.errors import (
    GenerationInProgressError,
    ImageGenerationError,
    SessionNotReadyError,
)
from branding_studio_bot.states.user import Editor
from branding_studio_bot.utils.status_manager import StatusMessageManager

router = Router(name="prompt-handler")

RESULT_FILENAME = "branded-image.png"


@router.message(
    StateFilter(default_state, Editor.waiting_for_photo, Editor.waiting_for_prompt, Editor.reviewing_result),
    F.text & ~F.text.startswith("/"),
)
async def process_prompt(
    message: Message,
    state: FSMContext,
    bot: Bot,
    texts: LocaleTexts,
    ai_client: Any,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """
    Treats the text as the description of the wanted photo and runs exactly one
    generation request with the current crop.
    """
    user_id = message.from_user.id if message.from_user else None
    log = business_logger.bind(user_id=user_id, chat_id=message.chat.id)

    session = await load_session(state)
    try:
        session.begin_generation(message.text)
    except GenerationInProgressError:
        await message.answer(texts.messages.still_working)
        return
    except SessionNotReadyError as e:
        session.record_error(generation_error_text(e, texts))
        await save_session(state, session)
        await message.answer(session.error)
        return

    await state.set_state(Editor.generating)
    await save_session(state, session)
    # The session holds one result; an older one must not act on the next image
    await retire_result_messages(bot, message.chat.id, state)

    status = await StatusMessageManager.show(message, texts.messages.generating)
    try:
        result = await image_generation_service.generate_branded_image(
            session.cropped_image,
            session.prompt,
            ai_client,
            aspect_ratio=session.aspect_ratio.value,
            user_id=user_id,
        )
    except ImageGenerationError as e:
        session.fail_generation(generation_error_text(e, texts))
        await status.delete()
        await save_session(state, session)
        await state.set_state(Editor.waiting_for_prompt)
        await message.answer(session.error)
        return
    except Exception:
        session.fail_generation(texts.errors.unexpected)
        await status.delete()
        await save_session(state, session)
        await state.set_state(Editor.waiting_for_prompt)
        raise

    session.finish_generation(result.data_url)
    await save_session(state, session)
    await state.set_state(Editor.reviewing_result)
    await status.delete()

    result_message = await message.answer_photo(
        BufferedInputFile(result.image_bytes, filename=RESULT_FILENAME),
        caption=texts.messages.result_caption,
        reply_markup=result_actions_kb(texts),
    )
    await state.update_data({RESULT_MESSAGE_KEY: result_message.message_id})
    log.info(
        "Branded image delivered",
        generation_time_ms=result.generation_time_ms,
        ratio=session.aspect_ratio.value,
    )


@router.message(StateFilter(Editor.waiting_for_prompt, Editor.reviewing_result), ~F.text)
async def expect_text_for_prompt(message: Message, texts: LocaleTexts) -> None:
    await message.answer(texts.messages.unexpected_input)
