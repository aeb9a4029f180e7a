import logging
import os
import sys
from typing import ClassVar, Optional

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_COLOR_FORMAT = "\x1b[90m%(asctime)s\x1b[0m | %(levelname_color)s | \x1b[36m%(name)s\x1b[0m | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Level the root logger was last configured with, None before the first call
_configured_level: Optional[str | int] = None


def _supports_color() -> bool:
    try:
        return sys.stdout.isatty() and os.getenv("NO_COLOR") is None
    except Exception:
        return False


class _LevelColorFormatter(logging.Formatter):
    """Adds `levelname_color` to records, ANSI-wrapped when color is on."""

    COLORS: ClassVar[dict[str, str]] = {
        "DEBUG": "\x1b[37m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[41m",
    }

    RESET: ClassVar[str] = "\x1b[0m"

    def __init__(self, fmt: str, datefmt: str, use_color: bool):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "") if self.use_color else ""
        record.levelname_color = f"{color}{record.levelname}{self.RESET}" if color else record.levelname
        return super().format(record)


def configure_logging(level: Optional[str | int] = None, fmt: Optional[str] = None) -> str | int:
    """Configure the root logger, once per distinct level.

    Args:
        level: Level name or number. Defaults to `Environment.get_log_level()`.
        fmt: Record format. Defaults to `CAPSIM_LOG_FORMAT`, or a colored
            format on terminals that support it.

    Returns:
        The level that was applied.
    """
    from capsim.config.environment import Environment

    global _configured_level

    if isinstance(level, str):
        level = level.upper()
    if level is None:
        level = Environment.get_log_level()

    if _configured_level == level:
        return level
    _configured_level = level

    use_color = _supports_color()
    if fmt is None:
        fmt = os.getenv("CAPSIM_LOG_FORMAT") or (_COLOR_FORMAT if use_color else _PLAIN_FORMAT)
    formatter = _LevelColorFormatter(fmt, _DATEFMT, use_color)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level)
    root.setLevel(level)
    # Existing stream handlers (e.g. pytest's) are realigned rather than replaced
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler):
            handler.setLevel(level)
            handler.setFormatter(formatter)
    return level


def get_logger(name: str) -> logging.Logger:
    """Return a module-scoped logger."""
    level = configure_logging()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
