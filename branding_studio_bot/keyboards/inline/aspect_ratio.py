# branding_studio_bot/keyboards/inline/aspect_ratio.py
from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from branding_studio_bot.data.constants import AspectRatio
from branding_studio_bot.data.texts import LocaleTexts
from .callbacks import AspectRatioCallback


def aspect_ratio_kb(selected: AspectRatio, texts: LocaleTexts) -> InlineKeyboardMarkup:
    """
    Creates a one-row keyboard with the three supported aspect ratios.

    Args:
        selected: The ratio the current preview was cropped to; its button is marked.
        texts: Locale texts for the button labels.

    Returns:
        An inline keyboard with aspect ratio options.
    """
    buttons = []
    for ratio in AspectRatio:
        label = texts.aspect_ratios.for_ratio(ratio)
        buttons.append(
            InlineKeyboardButton(
                text=f"✅ {label}" if ratio == selected else label,
                callback_data=AspectRatioCallback(ratio=ratio).pack(),
            )
        )
    return InlineKeyboardMarkup(inline_keyboard=[buttons])
