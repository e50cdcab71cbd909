# branding_studio_bot/services/editor_session.py
from typing import Any

from aiogram.fsm.context import FSMContext
from pydantic import BaseModel

from branding_studio_bot.data.constants import DEFAULT_ASPECT_RATIO, AspectRatio, EditorStep
from branding_studio_bot.services.errors import GenerationInProgressError, SessionNotReadyError

SESSION_KEY = "editor_session"


class EditorSession(BaseModel):
    """
    Ephemeral state of one chat's editing session.

    Image fields hold base64 data URLs. The model only tracks state; cropping and
    generation are performed by the handlers, which report back through the
    ``begin_*`` / ``finish_*`` / ``fail_*`` methods.
    """
    original_image: str | None = None
    cropped_image: str | None = None
    prompt: str = ""
    aspect_ratio: AspectRatio = DEFAULT_ASPECT_RATIO
    generated_image: str | None = None
    is_loading: bool = False
    is_cropping: bool = False
    is_preview_open: bool = False
    error: str | None = None

    @property
    def step(self) -> EditorStep:
        if self.is_loading:
            return EditorStep.GENERATING
        if self.is_cropping:
            return EditorStep.CROPPING
        if self.error:
            return EditorStep.ERROR
        if self.generated_image:
            return EditorStep.DONE
        if self.cropped_image:
            return EditorStep.READY
        return EditorStep.IDLE

    @property
    def can_generate(self) -> bool:
        return bool(self.cropped_image and self.prompt.strip() and not self.is_loading)

    def reset(self) -> None:
        """Returns every field to its default."""
        for name, field in type(self).model_fields.items():
            setattr(self, name, field.get_default(call_default_factory=True))

    def record_error(self, message: str) -> None:
        self.error = message

    # --- Upload & crop ---

    def start_upload(self) -> None:
        """A new file replaces everything, including the chosen ratio."""
        self.reset()

    def set_original(self, data_url: str) -> None:
        self.original_image = data_url

    def select_aspect_ratio(self, ratio: AspectRatio) -> bool:
        """
        Changes the target ratio.

        Returns:
            True if the original has to be cropped again.
        """
        self.aspect_ratio = ratio
        return self.original_image is not None

    def begin_crop(self) -> None:
        self.is_cropping = True
        self.error = None

    def finish_crop(self, cropped_data_url: str) -> None:
        self.cropped_image = cropped_data_url
        self.is_cropping = False

    def fail_crop(self, message: str) -> None:
        self.is_cropping = False
        self.record_error(message)

    # --- Generation ---

    def begin_generation(self, prompt: str) -> None:
        """
        Starts a generation request for ``prompt``.

        Raises:
            GenerationInProgressError: If a request is already outstanding.
            SessionNotReadyError: If there is no cropped image or the prompt is blank.
        """
        if self.is_loading:
            raise GenerationInProgressError()
        self.prompt = prompt or ""
        if not self.cropped_image or not self.prompt.strip():
            raise SessionNotReadyError()
        self.is_loading = True
        self.error = None
        self.generated_image = None
        self.is_preview_open = False

    def finish_generation(self, generated_data_url: str) -> None:
        self.generated_image = generated_data_url
        self.is_loading = False

    def fail_generation(self, message: str) -> None:
        self.is_loading = False
        self.record_error(message)

    # --- Result preview ---

    def open_preview(self) -> bool:
        if self.generated_image:
            self.is_preview_open = True
        return self.is_preview_open

    def close_preview(self) -> None:
        self.is_preview_open = False

    # --- FSM storage ---

    def to_state(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    @classmethod
    def from_state(cls, data: dict[str, Any] | None) -> "EditorSession":
        return cls.model_validate(data or {})


async def load_session(state: FSMContext) -> EditorSession:
    data = await state.get_data()
    return EditorSession.from_state(data.get(SESSION_KEY))


async def save_session(state: FSMContext, session: EditorSession) -> None:
    await state.update_data({SESSION_KEY: session.to_state()})
