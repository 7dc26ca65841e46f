"""Diagnostics Package.

Logging helpers shared by the datasource utilities:

    ContextLogger: formats a message under a fixed context prefix, emits it
        through the standard logging module and returns the formatted text so
        callers can reuse it as an exception message.
    configure_logging: root logger setup for scripts and applications.
"""
from .logger import ContextLogger, configure_logging

__all__ = ["ContextLogger", "configure_logging"]
