import logging
import sys
import os
from datetime import datetime
from typing import Optional

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter adding ANSI colors per level to console output."""

    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: cyan + _FORMAT + reset,
        logging.INFO: green + _FORMAT + reset,
        logging.WARNING: yellow + _FORMAT + reset,
        logging.ERROR: red + _FORMAT + reset,
        logging.CRITICAL: bold_red + _FORMAT + reset,
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno, _FORMAT)
        formatter = logging.Formatter(log_fmt, datefmt=_DATEFMT)
        return formatter.format(record)


def setup_logging(level=logging.INFO, log_dir: Optional[str] = None):
    """Setup centralized logging: colored stderr, plus a dated file when log_dir is set."""
    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(
            os.path.join(log_dir, f"replacehcstrings_{datetime.now().strftime('%Y%m%d')}.log"),
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        root_logger.addHandler(file_handler)

    for logger_name in ["hcstrings", "uvicorn", "uvicorn.error", "uvicorn.access", "main"]:
        l = logging.getLogger(logger_name)
        l.setLevel(level)
        l.propagate = True

    root_logger.debug("Logging initialized (console%s).", " + file" if log_dir else "")
