"""Logging setup for the stdio server.

- Diagnostics: stderr, through a :class:`rich.logging.RichHandler`.
- Exchange log: every inbound and outbound message line, written to the
  file named by ``LoggingSettings.exchange_log``.

stdout carries the protocol stream, so no handler here ever writes to it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from simple_mcp.config.models import LoggingSettings

EXCHANGE_LOGGER = "simple_mcp.exchange"

_installed: list[tuple[logging.Logger, logging.Handler]] = []


def configure_logging(settings: LoggingSettings) -> None:
    """Install the stderr handler and, if configured, the exchange log.

    Calling it again replaces the handlers installed by the previous call.
    """
    reset_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.level))
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _install(root_logger, console_handler)

    exchange_logger = logging.getLogger(EXCHANGE_LOGGER)
    if settings.exchange_log:
        path = Path(settings.exchange_log)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        exchange_logger.setLevel(logging.INFO)
        exchange_logger.propagate = False
        _install(exchange_logger, file_handler)


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _installed.append((logger, handler))


def reset_logging() -> None:
    """Remove the handlers installed by :func:`configure_logging`."""
    while _installed:
        logger, handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()
    exchange_logger = logging.getLogger(EXCHANGE_LOGGER)
    exchange_logger.setLevel(logging.NOTSET)
    exchange_logger.propagate = True
