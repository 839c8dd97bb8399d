import logging
import os
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(
    name: str = "text_compare",
    log_file: str = "logs/text_compare.log",
    level=logging.INFO,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> logging.Logger:
    """
    Logger for a text_compare run.
    - Logs to both console and rotating file
    - log_file=None keeps console only
    - Safe for repeated calls (no duplicate handlers)
    """
    if isinstance(level, str):
        level_name = level
        level = logging.getLevelName(level_name.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    logger = logging.getLogger(name)
    if logger.handlers:  # already configured by an earlier call
        return logger

    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Rotating file first, so a bad path leaves the logger untouched
    fh = None
    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(fmt)

    # Console
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    if fh:
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def close_logger(name: str = "text_compare"):
    """Detach and close every handler so the next get_logger() starts fresh."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
