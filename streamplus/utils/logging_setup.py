"""Logging setup for Stream+ with console and rotating file output"""

import logging
import logging.handlers
import sys
from pathlib import Path


def parse_size(value: str, default: int = 10 * 1024 * 1024) -> int:
    """
    Convert a size such as "10MB" or "512KB" to bytes.

    Unknown units fall back to ``default``.
    """
    units = {"KB": 1024, "MB": 1024 * 1024, "GB": 1024 * 1024 * 1024}
    value = value.strip().upper()
    for suffix, factor in units.items():
        if value.endswith(suffix):
            try:
                return int(value[: -len(suffix)]) * factor
            except ValueError:
                return default
    if value.isdigit():
        return int(value)
    return default


def setup_logging(
    log_level: str = "INFO",
    log_file_name: str | None = None,
    log_to_console: bool = True,
    log_to_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    log_format: str | None = None,
) -> logging.Logger:
    """
    Set up logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file_name: Path to log file (absolute, or relative to the working directory)
        log_to_console: Whether to log to stdout
        log_to_file: Whether to log to a rotating file
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep
        log_format: Custom format for the file handler

    Returns:
        Configured root logger
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear any existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_formatter = logging.Formatter(
        log_format or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    log_file_path = None
    if log_to_file:
        log_file_path = Path(log_file_name or "logs/streamplus.log")
        log_file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    root_logger.info(f"Stream+ logging initialized - Level: {log_level}")
    if log_file_path is not None:
        root_logger.info(
            f"Log file: {log_file_path} "
            f"(max {max_bytes / (1024 * 1024):.1f} MB, {backup_count} backups)"
        )

    return root_logger
