import pytest

from branding_studio_bot.data.constants import AspectRatio, EditorStep
from branding_studio_bot.services.editor_session import (
    EditorSession,
    load_session,
    save_session,
)
from branding_studio_bot.services.errors import GenerationInProgressError, SessionNotReadyError

ORIGINAL = "data:image/png;base64,T1JJR0lOQUw="
CROPPED = "data:image/jpeg;base64,Q1JPUFBFRA=="
GENERATED = "data:image/png;base64,R0VORVJBVEVE"


@pytest.fixture
def ready_session() -> EditorSession:
    session = EditorSession()
    session.set_original(ORIGINAL)
    session.begin_crop()
    session.finish_crop(CROPPED)
    return session


def test_new_session_is_idle_and_square():
    session = EditorSession()
    assert session.step is EditorStep.IDLE
    assert session.aspect_ratio is AspectRatio.SQUARE
    assert not session.can_generate


def test_crop_lifecycle(ready_session):
    assert ready_session.step is EditorStep.READY
    assert ready_session.cropped_image == CROPPED
    assert not ready_session.is_cropping


def test_begin_crop_clears_previous_error():
    session = EditorSession(original_image=ORIGINAL, error="boom")
    session.begin_crop()
    assert session.error is None
    assert session.step is EditorStep.CROPPING


def test_failed_crop_keeps_the_previous_crop(ready_session):
    ready_session.select_aspect_ratio(AspectRatio.VERTICAL)
    ready_session.begin_crop()
    ready_session.fail_crop("Could not crop the image.")
    assert ready_session.cropped_image == CROPPED
    assert ready_session.error == "Could not crop the image."
    assert ready_session.step is EditorStep.ERROR


def test_select_aspect_ratio_asks_for_recrop_only_with_an_original():
    assert EditorSession().select_aspect_ratio(AspectRatio.HORIZONTAL) is False
    session = EditorSession(original_image=ORIGINAL)
    assert session.select_aspect_ratio(AspectRatio.HORIZONTAL) is True
    assert session.aspect_ratio is AspectRatio.HORIZONTAL


def test_new_upload_resets_everything(ready_session):
    ready_session.select_aspect_ratio(AspectRatio.VERTICAL)
    ready_session.begin_generation("in a black suit")
    ready_session.finish_generation(GENERATED)

    ready_session.start_upload()

    assert ready_session == EditorSession()


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
def test_blank_prompt_is_not_ready(ready_session, prompt):
    with pytest.raises(SessionNotReadyError):
        ready_session.begin_generation(prompt)
    assert not ready_session.is_loading


def test_generation_needs_a_crop():
    with pytest.raises(SessionNotReadyError):
        EditorSession().begin_generation("a portrait in an office")


def test_generation_lifecycle(ready_session):
    ready_session.error = "old error"
    ready_session.generated_image = GENERATED

    ready_session.begin_generation("a portrait in an office")

    assert ready_session.step is EditorStep.GENERATING
    assert ready_session.prompt == "a portrait in an office"
    assert ready_session.error is None
    assert ready_session.generated_image is None
    assert not ready_session.can_generate

    ready_session.finish_generation(GENERATED)
    assert ready_session.step is EditorStep.DONE
    assert not ready_session.is_loading


def test_only_one_generation_in_flight(ready_session):
    ready_session.begin_generation("first")
    with pytest.raises(GenerationInProgressError):
        ready_session.begin_generation("second")
    assert ready_session.prompt == "first"


def test_failed_generation_returns_to_ready_with_error(ready_session):
    ready_session.begin_generation("first")
    ready_session.fail_generation("Failed to generate the image.")
    assert not ready_session.is_loading
    assert ready_session.error == "Failed to generate the image."
    assert ready_session.cropped_image == CROPPED
    assert ready_session.can_generate


def test_preview_opens_only_with_a_result(ready_session):
    assert ready_session.open_preview() is False
    ready_session.begin_generation("first")
    ready_session.finish_generation(GENERATED)
    assert ready_session.open_preview() is True
    ready_session.close_preview()
    assert not ready_session.is_preview_open


def test_reset_restores_defaults(ready_session):
    ready_session.select_aspect_ratio(AspectRatio.HORIZONTAL)
    ready_session.record_error("boom")
    ready_session.reset()
    assert ready_session == EditorSession()


async def test_session_survives_fsm_storage(fsm_state, ready_session):
    ready_session.select_aspect_ratio(AspectRatio.VERTICAL)
    await save_session(fsm_state, ready_session)

    restored = await load_session(fsm_state)

    assert restored == ready_session
    assert restored.aspect_ratio is AspectRatio.VERTICAL


async def test_missing_session_loads_as_new(fsm_state):
    assert await load_session(fsm_state) == EditorSession()
