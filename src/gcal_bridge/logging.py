from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import get_settings
from .core import LOG_FILE, ensure_data_dir

# Third-party loggers that are chatty at INFO: one line per HTTP request or
# per discovery document build.
_NOISY_LOGGERS = {
    "googleapiclient.discovery_cache": logging.ERROR,
    "googleapiclient.discovery": logging.WARNING,
    "httpx": logging.WARNING,
    "openai": logging.WARNING,
}

_INITIALIZED = False


def configure_logging(level: Optional[str] = None, *, log_path: Optional[Path] = None) -> Path:
    """Send bridge logs to stderr and to a rotating file in the data dir.

    ``level`` defaults to ``GCAL_LOG_LEVEL``. stdout is never used because
    the MCP stdio transport owns it. Returns the log file path.
    """

    global _INITIALIZED
    log_file = log_path or LOG_FILE
    if _INITIALIZED:
        return log_file

    if log_path is None:
        ensure_data_dir()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    resolved = (level or get_settings().server.log_level).upper()
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(str(log_file), maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(getattr(logging, resolved, logging.INFO))
    root.addHandler(file_handler)
    root.addHandler(console_handler)

    for name, floor in _NOISY_LOGGERS.items():
        logging.getLogger(name).setLevel(floor)

    _INITIALIZED = True
    logging.getLogger(__name__).debug("Logging at %s to %s", resolved, log_file)
    return log_file


__all__ = ["configure_logging"]
