"""
Logging configuration for Pulse Canvas.

Provides file logging plus a rich console handler, with system information
captured on startup for troubleshooting.
"""

import logging
import platform
import sys
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler


def setup_logging(
    log_file: Optional[str] = "pulse_canvas.log",
    level: int = logging.DEBUG,
    console_level: int = logging.INFO
) -> None:
    """
    Configure logging for the application.

    Sets up file-based logging and a rich console handler, then logs system
    information.

    Args:
        log_file: Path to log file, or None for console only
        level: File logging level (default: logging.DEBUG)
        console_level: Console logging level (default: logging.INFO)

    Example:
        >>> setup_logging()
        >>> logging.info("Application started")
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_file,
            level=level,
            format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        logging.getLogger().setLevel(level)

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(message)s', datefmt='[%X]'))
    logging.getLogger().addHandler(console_handler)

    log_system_info()


def log_system_info() -> None:
    """Log platform, Python and Qt versions."""
    try:
        from PyQt6.QtCore import PYQT_VERSION_STR, QT_VERSION_STR

        logging.info("=" * 60)
        logging.info("Pulse Canvas - System Information")
        logging.info("=" * 60)
        logging.info(f"Platform: {platform.system()} {platform.release()}")
        logging.info(f"Machine: {platform.machine()}")
        logging.info(f"Python version: {sys.version}")
        logging.info(f"Qt version: {QT_VERSION_STR} (PyQt {PYQT_VERSION_STR})")
        logging.info("=" * 60)

    except Exception as e:
        logging.error(f"Failed to log system info: {e}")


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """
    Log an operation with details.

    Args:
        operation: Name of the operation (e.g., "draw", "resize")
        details: Additional details about the operation
        level: Logging level (default: logging.INFO)

    Example:
        >>> log_operation("resize", "200x80px")
    """
    logging.log(level, f"{operation}: {details}")
