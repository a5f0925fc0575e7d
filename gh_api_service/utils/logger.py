"""
Process-wide logging setup
"""

import logging
import sys
import threading
from typing import Optional, Union

_lock = threading.Lock()
_initialized = False


def init_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the root logger once per process.

    The first call installs a console handler; later calls do nothing and
    return the same root logger, so tests and entry points can both call it.
    """
    global _initialized

    root_logger = logging.getLogger()
    with _lock:
        if _initialized:
            return root_logger

        if level is None:
            from ..config.settings import settings
            level = settings.log_level
        if isinstance(level, str):
            level = level.upper()

        # Example: 2026-10-19 12:49:55 | INFO     | gh_api_service.server | GET / 200 0.41ms
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        root_logger.setLevel(level)
        root_logger.addHandler(console_handler)

        # Silence noisy third-party libraries
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

        _initialized = True

    root_logger.info("Logging initialized.")
    return root_logger
