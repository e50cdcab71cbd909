# branding_studio_bot/data/texts/dto.py
from pydantic import BaseModel
from typing import List

from branding_studio_bot.data.constants import AspectRatio


class BotCommandInfo(BaseModel):
    """Stores information for a single bot command."""
    command: str
    description: str


class BotInfo(BaseModel):
    """Stores the bot's description and short description."""
    description: str
    short_description: str


class AspectRatioLabels(BaseModel):
    square: str
    horizontal: str
    vertical: str

    def for_ratio(self, ratio: AspectRatio) -> str:
        label = {
            AspectRatio.SQUARE: self.square,
            AspectRatio.HORIZONTAL: self.horizontal,
            AspectRatio.VERTICAL: self.vertical,
        }[ratio]
        return f"{label} {ratio.value}"


class ButtonTexts(BaseModel):
    download: str
    preview: str
    close_preview: str
    new_prompt: str
    reset: str


class MessageTexts(BaseModel):
    """Regular messages of the editing flow."""
    welcome: str
    restart: str
    help: str
    cropping: str
    cropped_caption: str
    generating: str
    result_caption: str
    preview_caption: str
    still_working: str
    new_prompt: str
    no_photo: str
    no_result: str
    unexpected_input: str


class ErrorTexts(BaseModel):
    """User-visible error banners, one per failure kind."""
    upload_failed: str
    not_an_image: str
    file_too_large: str
    crop_failed: str
    session_not_ready: str
    invalid_api_key: str
    generation_failed: str
    unexpected: str


class LocaleTexts(BaseModel):
    """A collection of all texts for a specific locale."""
    commands: List[BotCommandInfo]
    bot_info: BotInfo
    aspect_ratios: AspectRatioLabels
    buttons: ButtonTexts
    messages: MessageTexts
    errors: ErrorTexts
