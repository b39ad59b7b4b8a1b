"""
Logging Configuration - Centralized logging setup

Cung cap logging nhat quan cho toan bo CLI.
Diagnostics duoc ghi ra stderr de khong lan vao report tren stdout.

- Console handler: WARNING mac dinh, DEBUG khi bat debug mode
- File handler (chi khi debug mode): ~/.codemass/logs/ voi rotation (5 files, 2MB)
"""

import logging
import logging.handlers
import sys
from typing import Optional

from config.paths import APP_NAME, LOG_DIR, DEBUG_MODE

# Logger singleton
_logger: Optional[logging.Logger] = None
_debug_mode: bool = DEBUG_MODE

# Log rotation config
MAX_LOG_SIZE = 2 * 1024 * 1024  # 2MB per file
MAX_LOG_FILES = 5  # Keep 5 backup files


def get_logger() -> logging.Logger:
    """
    Get hoac tao logger singleton.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    _logger = logging.getLogger(APP_NAME)
    _logger.setLevel(logging.DEBUG if _debug_mode else logging.WARNING)

    # Avoid duplicate handlers
    if _logger.handlers:
        return _logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if _debug_mode else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _logger.addHandler(console_handler)

    if _debug_mode:
        _add_file_handler(_logger)

    return _logger


def _add_file_handler(logger: logging.Logger) -> None:
    """Them RotatingFileHandler vao logger. Loi tao file chi bi canh bao."""
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            LOG_DIR / "codemass.log",
            maxBytes=MAX_LOG_SIZE,
            backupCount=MAX_LOG_FILES,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    except OSError as e:
        logger.warning(f"Could not create log file: {e}")


def set_debug_mode(enabled: bool) -> None:
    """
    Enable or disable debug mode at runtime.

    Args:
        enabled: True to enable DEBUG level logging (and the log file)
    """
    global _debug_mode
    _debug_mode = enabled

    logger = get_logger()
    new_level = logging.DEBUG if enabled else logging.WARNING
    logger.setLevel(new_level)
    for handler in logger.handlers:
        if not isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.setLevel(new_level)

    has_file_handler = any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    )
    if enabled and not has_file_handler:
        _add_file_handler(logger)


def is_debug_mode() -> bool:
    return _debug_mode


def flush_logs() -> None:
    """
    Flush logs ra disk.
    Goi truoc khi CLI exit de dam bao tat ca logs duoc ghi.
    """
    if _logger:
        for handler in _logger.handlers:
            handler.flush()


def log_error(message: str, exc: Optional[Exception] = None):
    """Log error voi optional exception details"""
    logger = get_logger()
    if exc:
        logger.error(f"{message}: {exc}", exc_info=_debug_mode)
    else:
        logger.error(message)


def log_warning(message: str):
    """Log warning"""
    get_logger().warning(message)


def log_info(message: str):
    """Log info"""
    get_logger().info(message)


def log_debug(message: str):
    """Log debug - only written if debug mode is enabled"""
    if _debug_mode:
        get_logger().debug(message)
