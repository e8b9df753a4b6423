"""
Centralized logging configuration for the combinator.

Provides:
- Console handler on stderr: WARNING by default, DEBUG when verbose
- Optional file handler: captures all details (DEBUG level)
"""

import logging
from pathlib import Path
from typing import Optional

# Module-level state
_logging_initialized = False


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Initialize logging with a stderr console handler and optional file handler.

    Args:
        verbose: Show DEBUG messages on the console instead of WARNING and up.
        log_file: If given, write all messages to this file.
    """
    global _logging_initialized

    # Avoid re-initialization
    if _logging_initialized:
        return

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Console handler - stderr keeps stdout free for piping
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        root_logger.addHandler(file_handler)

    _logging_initialized = True


def reset_logging() -> None:
    """Reset logging state. Useful for testing."""
    global _logging_initialized
    _logging_initialized = False

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
