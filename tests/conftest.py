import base64
import io
import os
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time
os.environ.setdefault("BOT__TOKEN", "123456:TEST-TOKEN")
os.environ.setdefault("GEMINI__CLIENT", "mock")

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from PIL import Image


def make_image_bytes(size=(400, 200), mode="RGB", fmt="PNG", color="navy") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()


def make_data_url(size=(400, 200), mode="RGB", fmt="PNG") -> str:
    mime = {"PNG": "image/png", "JPEG": "image/jpeg"}[fmt]
    payload = base64.b64encode(make_image_bytes(size, mode, fmt)).decode("ascii")
    return f"data:{mime};base64,{payload}"


@pytest.fixture
def image_data_url():
    return make_data_url()


@pytest.fixture
def fsm_state():
    return FSMContext(
        storage=MemoryStorage(),
        key=StorageKey(bot_id=123456, chat_id=42, user_id=42),
    )


def make_callback(chat_id=42):
    """A callback query pressed under a bot message in ``chat_id``."""
    cb = MagicMock()
    cb.from_user.id = chat_id
    cb.message.chat.id = chat_id
    cb.answer = AsyncMock()
    cb.message.answer = AsyncMock()
    cb.message.edit_media = AsyncMock()
    cb.message.delete = AsyncMock()
    return cb
