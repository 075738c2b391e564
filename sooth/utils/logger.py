"""
sooth/utils/logger.py
One "sooth" parent logger with console (Rich) + optional rotating file
output; every module gets a child of it.
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from sooth.utils.config import LOG_DIR, LOG_LEVEL

ROOT_NAME = "sooth"

_loggers: dict[str, logging.Logger] = {}


def _file_handler(log_dir: str) -> RotatingFileHandler:
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(log_dir, f"{ROOT_NAME}.log"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )
    return handler


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return root

    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.addHandler(RichHandler(rich_tracebacks=True, show_path=False))
    if LOG_DIR:
        root.addHandler(_file_handler(LOG_DIR))
    return root


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    """Return `sooth.<name>`; handlers live on the parent, so children only propagate."""
    if name in _loggers:
        return _loggers[name]

    root = _configure_root()
    if name == ROOT_NAME or name.startswith(f"{ROOT_NAME}."):
        logger = logging.getLogger(name)
    else:
        logger = root.getChild(name)

    _loggers[name] = logger
    return logger
