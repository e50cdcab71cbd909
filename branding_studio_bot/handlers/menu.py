# branding_studio_bot/handlers/menu.py
import structlog
from aiogram import Bot, F, Router
from aiogram.filters import Command, StateFilter
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from branding_studio_bot.data.constants import ResultAction
from branding_studio_bot.data.texts import LocaleTexts
from branding_studio_bot.handlers.helpers import cleanup_session_messages, is_busy
from branding_studio_bot.keyboards.inline.callbacks import ResultActionCallback
from branding_studio_bot.services.editor_session import EditorSession, save_session
from branding_studio_bot.states.user import Editor

router = Router(name="menu-handlers")


async def reset_session(bot: Bot, chat_id: int, state: FSMContext) -> None:
    """Drops everything of the current session and waits for a new photo."""
    await cleanup_session_messages(bot, chat_id, state)
    await state.clear()
    await save_session(state, EditorSession())
    await state.set_state(Editor.waiting_for_photo)


@router.message(Command("start"), StateFilter("*"))
async def start_flow(
    msg: Message,
    state: FSMContext,
    bot: Bot,
    texts: LocaleTexts,
    business_logger: structlog.typing.FilteringBoundLogger,
) -> None:
    """Handles /start: greets the user and opens a fresh session."""
    if await is_busy(state):
        await msg.answer(texts.messages.still_working)
        return
    await reset_session(bot, msg.chat.id, state)
    business_logger.info("Session started", user_id=msg.from_user.id if msg.from_user else None)
    await msg.answer(texts.messages.welcome)


@router.message(Command("cancel"), StateFilter("*"))
async def cancel_flow(msg: Message, state: FSMContext, bot: Bot, texts: LocaleTexts) -> None:
    """Handles /cancel, the equivalent of the reset button."""
    if await is_busy(state):
        await msg.answer(texts.messages.still_working)
        return
    await reset_session(bot, msg.chat.id, state)
    await msg.answer(texts.messages.restart)


@router.callback_query(ResultActionCallback.filter(F.action == ResultAction.RESET))
async def reset_from_button(cb: CallbackQuery, state: FSMContext, bot: Bot, texts: LocaleTexts) -> None:
    if await is_busy(state):
        await cb.answer(texts.messages.still_working, show_alert=True)
        return
    await cb.answer()
    chat_id = cb.message.chat.id if cb.message else cb.from_user.id
    await reset_session(bot, chat_id, state)
    await bot.send_message(chat_id, texts.messages.restart)
