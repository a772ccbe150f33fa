"""
Shared logging utilities.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """
    Configure root logger.

    Args:
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        json_format: Emit one JSON object per record instead of plain text
    """
    # Imported here: the middleware module imports FastAPI/Starlette.
    from clarity.api.middleware.logging import JSONLogFormatter

    log_level = getattr(logging, level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    if json_format:
        console_handler.setFormatter(JSONLogFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    # Avoid duplicate handlers when the app factory runs more than once.
    for handler in list(root_logger.handlers):
        if getattr(handler, "_clarity_handler", False):
            root_logger.removeHandler(handler)
    console_handler._clarity_handler = True
    root_logger.addHandler(console_handler)
