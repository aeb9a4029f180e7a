"""
Environment Configuration Module

Centralizes how capsim reads its configuration. Values come from, in order of
precedence:

- Process environment variables
- `.env`, `.env.{ENV}` and `.env.{ENV}.local` files in the working directory
- Built-in defaults (`DEFAULT_ENV`)

The provisioning core itself takes no configuration; this module only drives
ambient behavior such as the log level.
"""

import os
from pathlib import Path
from typing import Any, Optional

DEFAULT_ENV: dict[str, Any] = {
    "ENV": "development",
    "LOG_LEVEL": None,
    "CAPSIM_LOG_LEVEL": "INFO",
    "DEBUG": None,
}

_TRUTHY_OFF = ("0", "false", "no", "off", "")


def load_dotenv_files(base_dir: Optional[Path] = None) -> list[Path]:
    """Load environment variables from .env files based on current environment.

    Existing process variables are never overridden.

    Returns:
        The files that were found and loaded, in load order.
    """
    from dotenv import load_dotenv

    root = base_dir if base_dir is not None else Path.cwd()
    env_name = os.environ.get("ENV", "development")

    # Later files fill in keys the earlier ones did not set
    env_files = [
        root / ".env",
        root / f".env.{env_name}",
        root / f".env.{env_name}.local",
    ]

    loaded = []
    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=False)
            loaded.append(env_file)
    return loaded


class Environment(object):
    """
    Class-level accessors for capsim configuration values.

    Nothing here is instance state; `.env` files are read lazily on the first
    call to `get()` and cached for the life of the process.
    """

    _dotenv_loaded: bool = False

    @classmethod
    def _ensure_loaded(cls) -> None:
        if not cls._dotenv_loaded:
            load_dotenv_files()
            cls._dotenv_loaded = True

    @classmethod
    def reset(cls) -> None:
        """Forget that .env files were loaded so the next `get()` reloads them."""
        cls._dotenv_loaded = False

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Return a configuration value from the environment, falling back to
        `DEFAULT_ENV` and then `default`.
        """
        cls._ensure_loaded()
        if key in os.environ:
            return os.environ[key]
        if DEFAULT_ENV.get(key) is not None:
            return DEFAULT_ENV[key]
        return default

    @classmethod
    def is_debug(cls) -> bool:
        """
        Is debug flag on?
        """
        value = cls.get("DEBUG")
        return value is not None and value.lower() not in _TRUTHY_OFF

    @classmethod
    def get_log_level(cls) -> str:
        """Return desired log level string.

        Values set in .env files count the same as process variables.

        Priority:
        1) Explicit LOG_LEVEL
        2) If DEBUG is truthy, return "DEBUG"
        3) CAPSIM_LOG_LEVEL (default "INFO")
        """
        level = cls.get("LOG_LEVEL")
        if level:
            return level.upper()
        if cls.is_debug():
            return "DEBUG"
        return cls.get("CAPSIM_LOG_LEVEL", "INFO").upper()
