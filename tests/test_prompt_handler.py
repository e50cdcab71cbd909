from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from branding_studio_bot.data.constants import AspectRatio
from branding_studio_bot.data.texts import get_texts
from branding_studio_bot.handlers import prompt_handler, result_handler
from branding_studio_bot.handlers.helpers import FULL_SIZE_MESSAGE_KEY, RESULT_MESSAGE_KEY
from branding_studio_bot.services.editor_session import EditorSession, load_session, save_session
from branding_studio_bot.states.user import Editor
from tests.conftest import make_callback, make_data_url

TEXTS = get_texts("en")


@pytest.fixture(autouse=True)
def instant_status(monkeypatch):
    status = SimpleNamespace(delete=AsyncMock())
    monkeypatch.setattr(prompt_handler.StatusMessageManager, "show", AsyncMock(return_value=status))
    return status


def make_message(text="a portrait in a bright office"):
    message = MagicMock()
    message.text = text
    message.from_user.id = 42
    message.chat.id = 42
    message.answer = AsyncMock()
    message.answer_photo = AsyncMock(return_value=SimpleNamespace(message_id=77))
    return message


def make_client(result=None, error=None):
    return SimpleNamespace(images=SimpleNamespace(generate=AsyncMock(return_value=result, side_effect=error)))


async def prepare(state, **fields):
    session = EditorSession(**fields)
    await save_session(state, session)
    await state.set_state(Editor.waiting_for_prompt)
    return session


async def run(message, state, client, bot=None):
    await prompt_handler.process_prompt(
        message,
        state=state,
        bot=bot or AsyncMock(),
        texts=TEXTS,
        ai_client=client,
        business_logger=structlog.get_logger(),
    )


async def test_successful_generation_shows_result(fsm_state):
    cropped = make_data_url((300, 300), fmt="JPEG")
    await prepare(fsm_state, original_image=cropped, cropped_image=cropped, aspect_ratio=AspectRatio.SQUARE)
    response = SimpleNamespace(image_bytes=b"\x89PNG-result", content_type="image/png", response_payload={})
    client = make_client(result=response)
    message = make_message()

    await run(message, fsm_state, client)

    assert client.images.generate.await_args.kwargs["aspect_ratio"] == "1:1"
    message.answer_photo.assert_awaited_once()
    assert await fsm_state.get_state() == Editor.reviewing_result.state
    assert (await fsm_state.get_data())[RESULT_MESSAGE_KEY] == 77
    session = await load_session(fsm_state)
    assert session.generated_image is not None
    assert session.prompt == "a portrait in a bright office"
    assert not session.is_loading


async def test_invalid_key_is_shown_and_session_stays_editable(fsm_state):
    cropped = make_data_url(fmt="JPEG")
    await prepare(fsm_state, original_image=cropped, cropped_image=cropped)
    message = make_message()

    await run(message, fsm_state, make_client(error=RuntimeError("API key not valid")))

    message.answer.assert_awaited_with(TEXTS.errors.invalid_api_key)
    message.answer_photo.assert_not_awaited()
    assert await fsm_state.get_state() == Editor.waiting_for_prompt.state
    session = await load_session(fsm_state)
    assert session.error == TEXTS.errors.invalid_api_key
    assert session.cropped_image == cropped


async def test_missing_photo_is_not_sent_to_the_model(fsm_state):
    await prepare(fsm_state)
    client = make_client()
    message = make_message()

    await run(message, fsm_state, client)

    message.answer.assert_awaited_once_with(TEXTS.errors.session_not_ready)
    client.images.generate.assert_not_awaited()


async def test_second_request_while_generating_is_refused(fsm_state):
    cropped = make_data_url(fmt="JPEG")
    await prepare(fsm_state, cropped_image=cropped, is_loading=True, prompt="first")
    client = make_client()
    message = make_message("second")

    await run(message, fsm_state, client)

    message.answer.assert_awaited_once_with(TEXTS.messages.still_working)
    client.images.generate.assert_not_awaited()
    assert (await load_session(fsm_state)).prompt == "first"


async def test_new_description_detaches_the_previous_result(fsm_state):
    cropped = make_data_url(fmt="JPEG")
    await prepare(fsm_state, original_image=cropped, cropped_image=cropped, generated_image=cropped)
    await fsm_state.set_state(Editor.reviewing_result)
    await fsm_state.update_data({RESULT_MESSAGE_KEY: 50, FULL_SIZE_MESSAGE_KEY: 51})
    bot = AsyncMock()

    await result_handler.ask_new_prompt(make_callback(), fsm_state, bot, TEXTS)
    assert await fsm_state.get_state() == Editor.waiting_for_prompt.state

    response = SimpleNamespace(image_bytes=b"\x89PNG-second", content_type="image/png", response_payload={})
    await run(make_message("second"), fsm_state, make_client(result=response), bot=bot)

    bot.edit_message_reply_markup.assert_awaited_once_with(chat_id=42, message_id=50, reply_markup=None)
    bot.delete_message.assert_awaited_once_with(chat_id=42, message_id=51)
    data = await fsm_state.get_data()
    assert data[RESULT_MESSAGE_KEY] == 77
    assert data[FULL_SIZE_MESSAGE_KEY] is None
