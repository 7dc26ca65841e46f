"""
Context Logger and Logging Setup.

Library code logs through ``logging.getLogger(__name__)`` like everywhere
else. ContextLogger sits on top of that for call sites that need the
formatted message back, typically to raise it:

    >>> log = ContextLogger("BlogPost Not Valid")
    >>> message = log.error("BlogPost slug: hello", "missing title")
    >>> message
    '[BlogPost Not Valid] BlogPost slug: hello missing title'

configure_logging() is meant for entry points only; library modules never
touch handlers.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUP_COUNT = 3


class ContextLogger:
    """Format, emit and return log messages under a context prefix.

    Attributes:
        context: Text shown in brackets before every message
        logger: Underlying standard library logger
    """

    def __init__(self, context: str, logger: Optional[logging.Logger] = None):
        self.context = context
        self.logger = logger or logging.getLogger(__name__)

    def format(self, *parts: Any) -> str:
        """Join message parts into a single line prefixed with the context.

        Parts are converted with str(), so exceptions render as their message.
        Empty parts are skipped.
        """
        text = " ".join(str(part) for part in parts if part is not None and str(part) != "")
        return f"[{self.context}] {text}" if text else f"[{self.context}]"

    def _log(self, level: int, *parts: Any) -> str:
        message = self.format(*parts)
        self.logger.log(level, message)
        return message

    def debug(self, *parts: Any) -> str:
        return self._log(logging.DEBUG, *parts)

    def info(self, *parts: Any) -> str:
        return self._log(logging.INFO, *parts)

    def warning(self, *parts: Any) -> str:
        return self._log(logging.WARNING, *parts)

    def error(self, *parts: Any) -> str:
        """Log the parts at ERROR level and return the formatted message."""
        return self._log(logging.ERROR, *parts)


def configure_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the root logger for a script or application entry point.

    Existing root handlers are removed first so repeated calls don't
    duplicate output.

    Args:
        debug: Log at DEBUG instead of INFO
        log_file: Optional path for a rotating log file (10MB, 3 backups)

    Returns:
        The configured root logger
    """
    log_level = logging.DEBUG if debug else logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger
