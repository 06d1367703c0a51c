import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import settings

PACKAGE_LOGGER = "seller_analytics"


def setup_logger(
    name: str = PACKAGE_LOGGER,
    log_level: int | str = settings.LOG_LEVEL,
    log_dir: Path | None = None,
) -> logging.Logger:
    """
    Configures logging for applications that embed the analyzer.

    The analyzer modules only create child loggers of `seller_analytics` and never
    attach handlers. Call this once at startup to see their output: step messages
    go to stdout and a rotating `seller_analytics.log` under `settings.LOG_DIR`
    keeps the timestamped history, skipped-record DEBUG lines included.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # A second call returns the logger already set up
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    log_dir = log_dir or settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / "seller_analytics.log",
        maxBytes=5 * 1024 * 1024,  # 5 MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    return logger
