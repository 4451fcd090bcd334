"""
Centralized logging configuration.

All modules obtain their logger with ``get_logger(__name__)``. Handlers are
installed once, by ``configure_logging()``, from the entry point that owns
the process (the CLI). Library code never configures the root logger itself.
"""

import logging

from rich.logging import RichHandler

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install a rich console handler on the root logger (idempotent)."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level)
    if _configured:
        return
    handler = RichHandler(rich_tracebacks=True, show_path=False, log_time_format=_DATE_FORMAT)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger.
    """
    return logging.getLogger(name)
