# branding_studio_bot/keyboards/inline/result_actions.py
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from branding_studio_bot.data.constants import ResultAction
from branding_studio_bot.data.texts import LocaleTexts
from .callbacks import ResultActionCallback


def _button(text: str, action: ResultAction) -> InlineKeyboardButton:
    return InlineKeyboardButton(text=text, callback_data=ResultActionCallback(action=action).pack())


def result_actions_kb(texts: LocaleTexts) -> InlineKeyboardMarkup:
    """Keyboard attached to a generated image."""
    b = texts.buttons
    return InlineKeyboardMarkup(
        inline_keyboard=[
            [_button(b.download, ResultAction.DOWNLOAD), _button(b.preview, ResultAction.PREVIEW)],
            [_button(b.new_prompt, ResultAction.NEW_PROMPT), _button(b.reset, ResultAction.RESET)],
        ]
    )


def close_preview_kb(texts: LocaleTexts) -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(
        inline_keyboard=[[_button(texts.buttons.close_preview, ResultAction.CLOSE_PREVIEW)]]
    )
