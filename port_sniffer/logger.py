"""
logger.py - Centralized logging configuration for the port sniffer.

Configures a file handler and a console handler so every scan event
(start, discoveries, completion, errors) is recorded in the logs/
directory, while the console only shows warnings and above so the
port report on stdout stays readable.
"""

import logging
import os
from datetime import datetime
from typing import Union

LOGGER_NAME = "port_sniffer"


def _default_log_dir() -> str:
    return os.path.join(os.getcwd(), "logs")


def setup_logger(
    name: str = LOGGER_NAME,
    log_dir: Union[str, bool, None] = None,
    console_level: int = logging.WARNING,
) -> logging.Logger:
    """
    Create and return a configured logger instance.

    - Logs are saved to  <log_dir>/scan_<timestamp>.log
    - Console output (stderr) uses *console_level*
    - File output uses DEBUG level (captures everything)

    Args:
        name:          Logger name identifier.
        log_dir:       Directory for log files. ``None`` means ./logs,
                       ``False`` disables the file handler.
        console_level: Minimum level echoed to the console.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers if setup_logger is called multiple times
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)

    # ---------- Console handler ----------
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(console_fmt)
    logger.addHandler(console_handler)

    if log_dir is False:
        return logger

    # ---------- logs/ directory ----------
    directory = log_dir if isinstance(log_dir, str) and log_dir else _default_log_dir()
    os.makedirs(directory, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(directory, f"scan_{timestamp}.log")

    # ---------- File handler (DEBUG and above) ----------
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_fmt = logging.Formatter(
        "[%(asctime)s] [%(levelname)-8s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_fmt)
    logger.addHandler(file_handler)

    logger.debug("Logger initialised - log file: %s", log_file)
    return logger
