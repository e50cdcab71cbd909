# branding_studio_bot/data/constants.py
from enum import Enum


class AspectRatio(str, Enum):
    """Aspect ratios offered for the center crop. Values are sent to the model as-is."""
    SQUARE = "1:1"
    HORIZONTAL = "16:9"
    VERTICAL = "9:16"

    @property
    def value_ratio(self) -> float:
        """Width divided by height."""
        width, height = self.value.split(":")
        return int(width) / int(height)


DEFAULT_ASPECT_RATIO = AspectRatio.SQUARE


class EditorStep(str, Enum):
    """Coarse stage of an editing session, derived from its flags."""
    IDLE = "idle"
    CROPPING = "cropping"
    READY = "ready"
    GENERATING = "generating"
    DONE = "done"
    ERROR = "error"


class ResultAction(str, Enum):
    """Actions offered under a generated image."""
    DOWNLOAD = "download"
    PREVIEW = "preview"
    CLOSE_PREVIEW = "close_preview"
    NEW_PROMPT = "new_prompt"
    RESET = "reset"
