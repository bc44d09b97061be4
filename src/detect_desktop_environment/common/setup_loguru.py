import os
import sys
from pathlib import Path

from loguru import logger

import detect_desktop_environment.constants as cnst
from detect_desktop_environment.schemas.config_struct import Config


def ensure_log_directory() -> Path | None:
    """Create the log directory and return the log file path, if writable"""
    log_dir = cnst.APP_LOG_DIR
    log_file = log_dir / "app.log"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        if not log_file.exists():
            log_file.touch(exist_ok=True)

        if not os.access(log_file, os.W_OK):
            raise PermissionError(f"No write access to: {log_file}")

        return log_file
    except OSError as e:
        logger.debug(f"Cannot use {log_dir}: {e}")
        return None


def disable_logging():
    logger.remove()


def setup_bootstrap_logging() -> None:
    """Only show warnings until the config is loaded"""
    disable_logging()
    logger.add(sink=sys.stderr, level="WARNING", format="{level} | {message}")


def setup_loguru(config: Config, verbose: bool = False) -> None:
    disable_logging()

    # Log file in the XDG state directory
    if config.logging.enable_file:
        log_file = ensure_log_directory()
        if log_file is not None:
            logger.add(
                log_file,
                rotation="10 MB",
                retention="14 days",
                compression="gz",
                level=config.logging.file_level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )

    # stdout carries the detection result, so the console sink writes to stderr
    if config.logging.enable_console or verbose:
        logger.add(
            sink=sys.stderr,
            level="DEBUG" if verbose else config.logging.console_level,
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
            colorize=config.logging.enable_colors,
        )
