import logging
import os
import sys

NOISY_LOGGERS = ("httpx", "openai", "aiogram.event")


def configure_logging(level: str) -> logging.Logger:
    level = level.upper()
    logger = logging.getLogger("dayplanner")
    logger.setLevel(level)
    handler = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    if level != "DEBUG":
        # Client libraries log every HTTP request at INFO.
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    os.environ["LOGLEVEL"] = level
    return logger


def redact_text(text: str) -> str:
    """Hide user task text and raw model output unless running at DEBUG."""
    if os.getenv("LOGLEVEL", "INFO").upper() != "DEBUG":
        return "[REDACTED]"
    return text
