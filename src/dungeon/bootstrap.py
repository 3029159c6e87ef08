import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(raw: str | None = None) -> int:
    name = str(raw if raw is not None else os.getenv("DUNGEON_LOG_LEVEL", DEFAULT_LOG_LEVEL)).strip().upper()
    level = logging.getLevelName(name or DEFAULT_LOG_LEVEL)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging() -> None:
    logging.basicConfig(
        level=resolve_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
