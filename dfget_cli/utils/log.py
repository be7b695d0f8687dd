"""
Creates the client and server loggers attached to a run context.
Both write to files under the work home, tagged with the run sign.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from dfget_cli.models.context import RunContext

CLIENT_LOGGER_NAME = "dfget_cli.client"
SERVER_LOGGER_NAME = "dfget_cli.server"
CLIENT_LOG_FILE = "dfclient.log"
SERVER_LOG_FILE = "dfserver.log"
LOG_FORMAT = "%(asctime)s %(levelname)s sign:%(sign)s : %(message)s"


class SignFilter(logging.Filter):
    """Adds the run sign to every record passing through a handler."""

    def __init__(self, sign: str):
        super().__init__()
        self.sign = sign

    def filter(self, record: logging.LogRecord) -> bool:
        record.sign = self.sign
        return True


def _log_dir(ctx: RunContext) -> Path:
    log_dir = Path(ctx.work_home) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_logger(
    name: str, log_path: Path, sign: str, level: int, console: Console | None = None
) -> logging.Logger:
    """
    Configures a named logger with a file handler and, optionally, a Rich
    console handler. Handlers from a previous call are replaced.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    logger.propagate = False

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.addFilter(SignFilter(sign))
    logger.addHandler(file_handler)

    if console is not None:
        logger.addHandler(
            RichHandler(
                console=console,
                show_path=False,
                show_level=False,
                markup=False,
            )
        )
    return logger


def create_client_logger(
    ctx: RunContext, console: Console | None = None
) -> logging.Logger:
    """
    Creates the client logger, writing to '<work_home>/logs/dfclient.log'.

    Args:
        ctx: The run context; `verbose` selects DEBUG level and `console`
            mirrors records to the terminal.
        console: The Rich console to mirror to, a new one if not given.
    """
    level = logging.DEBUG if ctx.verbose else logging.INFO
    mirror = (console or Console(stderr=True)) if ctx.console else None
    return _build_logger(
        CLIENT_LOGGER_NAME,
        _log_dir(ctx) / CLIENT_LOG_FILE,
        ctx.sign,
        level,
        mirror,
    )


def create_server_logger(ctx: RunContext) -> logging.Logger:
    """Creates the server logger, writing to '<work_home>/logs/dfserver.log'."""
    level = logging.DEBUG if ctx.verbose else logging.INFO
    return _build_logger(
        SERVER_LOGGER_NAME, _log_dir(ctx) / SERVER_LOG_FILE, ctx.sign, level
    )


def close_loggers(*loggers: logging.Logger | None) -> None:
    """Flushes and detaches all handlers of the given loggers."""
    for logger in loggers:
        if logger is None:
            continue
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
