# branding_studio_bot/utils/logging.py
import logging
import sys
from typing import Any

import orjson
import structlog

from branding_studio_bot.data.settings import settings

# Libraries that log every request or decoded image at INFO/DEBUG
QUIET_LOGGERS: dict[str, int] = {
    "aiohttp.access": logging.WARNING,
    "aiogram.event": logging.WARNING,
    "httpx": logging.WARNING,
    "google_genai": logging.INFO,
    "PIL": logging.INFO,
}


def _orjson_dumps(obj: Any, *, default: Any = None, **_kwargs: Any) -> str:
    return orjson.dumps(obj, default=default).decode()


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _renderer() -> structlog.typing.Processor:
    if sys.stderr.isatty():
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer(serializer=_orjson_dumps)


def setup_logger(name: str = "branding_studio_bot") -> structlog.typing.FilteringBoundLogger:
    """
    Routes structlog and stdlib records (aiogram, aiohttp, google-genai) through
    one handler: a colored console on a terminal, JSON lines otherwise.

    Safe to call repeatedly; the root handler is replaced each time.
    """
    processors = _shared_processors()
    structlog.configure(
        processors=[*processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(foreign_pre_chain=processors, processor=_renderer())
    )
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.logging_level)

    for logger_name, level in QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(level)

    return structlog.get_logger(name)
