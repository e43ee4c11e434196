"""Setup and configuration for the structured logging system."""

import logging
import sys
from pathlib import Path
from typing import Optional, Any

from .structured_logger import get_logger, session_context
from .handlers import ConsoleHandler, FileHandler


def setup_logging(config: Any,
                  session_id: Optional[str] = None,
                  log_file: Optional[str] = None,
                  console: bool = True,
                  log_level: Optional[str] = None):
    """Configure the structured logging system.

    Args:
        config: Config instance (anything with a dot-notation ``get``)
        session_id: Current layer session ID for context
        log_file: Optional log file path (uses config default if not provided)
        console: Whether to enable console logging
        log_level: Minimum log level (defaults to ``logging.level`` in config)
    """
    root_logger = logging.getLogger()

    log_level = log_level or config.get('logging.level', 'INFO')
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if console:
        console_handler = ConsoleHandler(
            use_colors=sys.stderr.isatty(),
            show_context=True
        )
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if log_file is None:
        log_file = config.get('logging.file') or (
            Path(config.get('paths.logs_dir', 'logs')) / 'hexmap.log'
        )

    file_handler = FileHandler(
        filename=str(log_file),
        max_bytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
        backup_count=config.get('logging.backup_count', 5),
        use_json=True
    )
    root_logger.addHandler(file_handler)

    if session_id:
        session_context.set(session_id)

    logger = get_logger(__name__)
    logger.info(
        "Structured logging system initialized",
        extra={
            'context': {
                'log_level': log_level,
                'handlers': {
                    'console': console,
                    'file': str(log_file),
                }
            }
        }
    )


def setup_simple_logging(log_level: str = 'INFO'):
    """Setup console-only logging for testing/debugging."""
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = ConsoleHandler(show_context=True)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)
