"""
Logging Configuration
Sets up the logger every module reports through.
"""
import logging
import sys
from typing import Optional, Union


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    logger_name: Optional[str] = None,
) -> logging.Logger:
    """
    Configures the root logger (or ``logger_name``) so every module's
    ``getLogger(__name__)`` reports through the same handlers.

    Args:
        level: Logging level (e.g. logging.DEBUG or "DEBUG")
        log_file: Optional path to save logs to a file.
        logger_name: Logger to configure; the root logger when None.

    Raises:
        ValueError: if ``level`` is a name logging doesn't know.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Avoid duplicate handlers when called twice
    if logger.handlers:
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
