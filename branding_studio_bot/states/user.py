# branding_studio_bot/states/user.py
from aiogram.fsm.state import State, StatesGroup


class Editor(StatesGroup):
    """
    The editing flow of a single chat.

    ``cropping`` and ``generating`` are transient: the handler that enters them
    also leaves them once its work is done.
    """
    waiting_for_photo = State()
    cropping = State()
    waiting_for_prompt = State()
    generating = State()
    reviewing_result = State()


BUSY_STATES = (Editor.cropping, Editor.generating)
