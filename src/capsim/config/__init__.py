from .environment import Environment, load_dotenv_files
from .logging_config import configure_logging, get_logger

__all__ = [
    "Environment",
    "configure_logging",
    "get_logger",
    "load_dotenv_files",
]
