# branding_studio_bot/keyboards/inline/callbacks.py
from aiogram.filters.callback_data import CallbackData

from branding_studio_bot.data.constants import AspectRatio, ResultAction


class AspectRatioCallback(CallbackData, prefix="ratio", sep="|"):
    """Callback for re-cropping the uploaded photo to another aspect ratio.

    Ratio values contain ":", so a different separator is used.
    """
    ratio: AspectRatio


class ResultActionCallback(CallbackData, prefix="result"):
    """Callback for the actions under a generated image."""
    action: ResultAction
