import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from aiogram import F, Router
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters import Command, CommandObject
from aiogram.types import CallbackQuery, Message

from ..errors import (
    INPUT_TOO_LONG,
    MAX_RETRIES_REACHED,
    OUTPUT_TOO_LONG,
    TASK_NOT_FOUND,
    UNEXPECTED_ERROR,
    PlannerError,
)
from ..logging import redact_text
from ..service import SchedulingService
from ..settings import Settings
from .keyboards import RETRY_CALLBACK, retry_keyboard
from .session import SessionStore
from .templates import HELP_TEXT, build_error, build_schedule, build_task_list

logger = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 4096


def _parse_index(raw: str) -> Optional[int]:
    try:
        return int(raw) - 1
    except ValueError:
        return None


def _split_index_and_text(args: Optional[str]) -> Tuple[Optional[int], str]:
    if not args:
        return None, ""
    head, _, rest = args.strip().partition(" ")
    return _parse_index(head), rest


def create_router(settings: Settings, service: SchedulingService, store: Optional[SessionStore] = None) -> Router:
    r = Router()
    if store is None:
        store = SessionStore(settings.max_manual_retries)

    async def run_plan(message: Message, chat_id: int) -> None:
        s = store.get(chat_id)
        tasks = list(s.tasks) if s else []
        try:
            schedule = await service.plan_tasks(tasks)
        except PlannerError as e:
            logger.warning(f"Planning failed for chat {chat_id}: {e.code.value}")
            store.record_failure(chat_id, e.message)
            can_retry = e.is_retryable and store.can_retry(chat_id)
            await message.answer(
                build_error(e.message, can_retry),
                reply_markup=retry_keyboard() if can_retry else None,
            )
            return
        except Exception:
            logger.exception(f"Unexpected planning failure for chat {chat_id}")
            store.record_failure(chat_id, UNEXPECTED_ERROR)
            await message.answer(build_error(UNEXPECTED_ERROR, False))
            return
        store.record_schedule(chat_id, schedule)
        text = build_schedule(schedule)
        if len(text) > MAX_MESSAGE_LENGTH:
            await message.answer(OUTPUT_TOO_LONG)
            return
        await message.answer(text)

    @r.message(Command("start", "help"))
    async def help_cmd(message: Message):
        await message.answer(HELP_TEXT)

    @r.message(Command("clear"))
    async def clear_cmd(message: Message):
        if message.chat:
            store.purge(message.chat.id)
        await message.answer("Session cleared.")

    @r.message(Command("tasks"))
    async def tasks_cmd(message: Message):
        s = store.get(message.chat.id)
        await message.answer(build_task_list(s.tasks if s else []))

    @r.message(Command("edit"))
    async def edit_cmd(message: Message, command: CommandObject):
        index, text = _split_index_and_text(command.args)
        if index is None:
            await message.answer("Usage: /edit N new task text")
            return
        error = store.edit_task(message.chat.id, index, text)
        if error:
            await message.answer(error)
            return
        await message.answer(build_task_list(store.get(message.chat.id).tasks))

    @r.message(Command("remove"))
    async def remove_cmd(message: Message, command: CommandObject):
        index, _ = _split_index_and_text(command.args)
        if index is None:
            await message.answer("Usage: /remove N")
            return
        error = store.remove_task(message.chat.id, index)
        if error:
            await message.answer(error)
            return
        await message.answer(build_task_list(store.get(message.chat.id).tasks))

    @r.message(Command("move"))
    async def move_cmd(message: Message, command: CommandObject):
        parts = (command.args or "").split()
        if len(parts) != 2:
            await message.answer("Usage: /move FROM TO")
            return
        source, destination = _parse_index(parts[0]), _parse_index(parts[1])
        if source is None or destination is None:
            await message.answer(TASK_NOT_FOUND)
            return
        error = store.move_task(message.chat.id, source, destination)
        if error:
            await message.answer(error)
            return
        await message.answer(build_task_list(store.get(message.chat.id).tasks))

    @r.message(Command("plan"))
    async def plan_cmd(message: Message):
        await run_plan(message, message.chat.id)

    @r.message(F.text & ~F.text.startswith("/"))
    async def on_text(message: Message):
        if not message.chat:
            return
        txt = message.text or ""
        if len(txt) > MAX_MESSAGE_LENGTH:
            await message.answer(INPUT_TOO_LONG)
            return
        now = message.date or datetime.now(timezone.utc)
        added = store.add_tasks(message.chat.id, txt.splitlines(), now)
        logger.info(f"Chat {message.chat.id} added {len(added)} task(s): {redact_text(txt)}")
        await message.answer(build_task_list(store.get(message.chat.id).tasks))

    @r.callback_query(F.data == RETRY_CALLBACK)
    async def on_retry(cb: CallbackQuery):
        await cb.answer()
        if not cb.message or not cb.message.chat:
            return
        chat_id = cb.message.chat.id
        try:
            await cb.message.edit_reply_markup(reply_markup=None)
        except TelegramBadRequest:
            pass
        if not store.register_retry(chat_id):
            await cb.message.answer(build_error(MAX_RETRIES_REACHED, False))
            return
        await run_plan(cb.message, chat_id)

    return r
