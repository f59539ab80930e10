from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton


RETRY_CALLBACK = "RETRY"


def retry_keyboard() -> InlineKeyboardMarkup:
    return InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton(text="🔁 Retry", callback_data=RETRY_CALLBACK)]])
