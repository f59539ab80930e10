import asyncio
import sys

from aiogram import Bot, Dispatcher

from .logging import configure_logging
from .service import SchedulingService
from .settings import get_settings
from .telegram.app import create_router


async def main() -> None:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("Please check your .env file and ensure all required variables are set")
        sys.exit(1)

    logger = configure_logging(settings.log_level)
    logger.info(f"model={settings.openai_model} rate_limit={settings.rate_limit_calls}/{settings.rate_limit_window_seconds:g}s")
    service = SchedulingService.from_settings(settings)
    bot = Bot(settings.telegram_bot_token)
    dp = Dispatcher()
    dp.include_router(create_router(settings, service))

    logger.info("ready")
    try:
        await dp.start_polling(bot)
    finally:
        await bot.session.close()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
