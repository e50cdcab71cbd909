from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from branding_studio_bot.data.constants import AspectRatio
from branding_studio_bot.data.texts import get_texts
from branding_studio_bot.handlers import menu, result_handler
from branding_studio_bot.handlers.helpers import FULL_SIZE_MESSAGE_KEY, PREVIEW_MESSAGE_KEY, RESULT_MESSAGE_KEY
from branding_studio_bot.services.editor_session import EditorSession, load_session, save_session
from branding_studio_bot.states.user import Editor
from tests.conftest import make_callback, make_data_url

TEXTS = get_texts("en")


async def prepare_result(state):
    image = make_data_url((64, 64))
    session = EditorSession(
        original_image=image,
        cropped_image=image,
        prompt="in a studio",
        aspect_ratio=AspectRatio.VERTICAL,
        generated_image=image,
    )
    await save_session(state, session)
    await state.set_state(Editor.reviewing_result)
    await state.update_data({PREVIEW_MESSAGE_KEY: 10, RESULT_MESSAGE_KEY: 77})
    return session


@pytest.mark.parametrize("handler", [result_handler.download_result, result_handler.open_preview])
async def test_result_actions_refuse_without_result(fsm_state, handler):
    await save_session(fsm_state, EditorSession())
    bot = AsyncMock()
    cb = make_callback()

    await handler(cb, fsm_state, bot, TEXTS)

    cb.answer.assert_awaited_once_with(TEXTS.messages.no_result, show_alert=True)
    bot.send_document.assert_not_awaited()
    bot.send_photo.assert_not_awaited()


async def test_download_sends_the_result_as_a_png_document(fsm_state):
    await prepare_result(fsm_state)
    bot = AsyncMock()

    await result_handler.download_result(make_callback(), fsm_state, bot, TEXTS)

    document = bot.send_document.await_args.kwargs["document"]
    assert document.filename.startswith("branded-image-")
    assert document.filename.endswith(".png")
    assert bot.send_document.await_args.kwargs["chat_id"] == 42


async def test_preview_opens_once_and_closes(fsm_state):
    await prepare_result(fsm_state)
    bot = AsyncMock()
    bot.send_photo = AsyncMock(return_value=MagicMock(message_id=88))
    cb = make_callback()

    await result_handler.open_preview(cb, fsm_state, bot, TEXTS)
    await result_handler.open_preview(cb, fsm_state, bot, TEXTS)

    bot.send_photo.assert_awaited_once()
    assert (await load_session(fsm_state)).is_preview_open
    assert (await fsm_state.get_data())[FULL_SIZE_MESSAGE_KEY] == 88

    await result_handler.close_preview(cb, fsm_state)

    cb.message.delete.assert_awaited_once()
    assert not (await load_session(fsm_state)).is_preview_open
    assert (await fsm_state.get_data())[FULL_SIZE_MESSAGE_KEY] is None


async def test_new_prompt_keeps_the_crop(fsm_state):
    before = await prepare_result(fsm_state)
    bot = AsyncMock()

    await result_handler.ask_new_prompt(make_callback(), fsm_state, bot, TEXTS)

    assert await fsm_state.get_state() == Editor.waiting_for_prompt.state
    assert (await load_session(fsm_state)).cropped_image == before.cropped_image
    bot.send_message.assert_awaited_once_with(42, TEXTS.messages.new_prompt)


async def test_reset_button_clears_the_session(fsm_state):
    await prepare_result(fsm_state)
    bot = AsyncMock()

    await menu.reset_from_button(make_callback(), fsm_state, bot, TEXTS)

    assert await fsm_state.get_state() == Editor.waiting_for_photo.state
    assert await load_session(fsm_state) == EditorSession()
    stripped = {c.kwargs["message_id"] for c in bot.edit_message_reply_markup.await_args_list}
    assert stripped == {10, 77}
    bot.send_message.assert_awaited_once_with(42, TEXTS.messages.restart)


async def test_reset_is_refused_while_generating(fsm_state):
    before = await prepare_result(fsm_state)
    await fsm_state.set_state(Editor.generating)
    cb = make_callback()

    await menu.reset_from_button(cb, fsm_state, AsyncMock(), TEXTS)

    cb.answer.assert_awaited_once_with(TEXTS.messages.still_working, show_alert=True)
    assert await load_session(fsm_state) == before


async def test_start_command_opens_a_fresh_session(fsm_state):
    await prepare_result(fsm_state)
    msg = MagicMock()
    msg.chat.id = 42
    msg.from_user.id = 42
    msg.answer = AsyncMock()

    await menu.start_flow(msg, fsm_state, AsyncMock(), TEXTS, structlog.get_logger())

    msg.answer.assert_awaited_once_with(TEXTS.messages.welcome)
    assert await load_session(fsm_state) == EditorSession()
    assert await fsm_state.get_state() == Editor.waiting_for_photo.state
