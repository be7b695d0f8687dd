"""
Builds the run context and validates it before a transfer may start.
"""

import getpass
import logging
import os
import time
from datetime import datetime
from pathlib import Path

from dfget_cli.core.sign import generate_sign
from dfget_cli.exceptions import (
    InvalidOutputError,
    InvalidURLError,
    MissingCollaboratorError,
)
from dfget_cli.models.context import RunContext
from dfget_cli.utils.path import check_output
from dfget_cli.utils.url import check_url

log = logging.getLogger(__name__)

WORK_HOME_NAME = ".small-dragonfly"


def current_identity() -> tuple[str, Path]:
    """
    Returns the name and home directory of the user running the process.

    On POSIX both come from the password database entry of the real uid.
    Where there is no such entry, or no uid at all, the environment is used.
    """
    if hasattr(os, "getuid"):
        import pwd

        try:
            entry = pwd.getpwuid(os.getuid())
            return entry.pw_name, Path(entry.pw_dir)
        except KeyError:
            log.debug(f"No password database entry for uid {os.getuid()}.")

    try:
        user = getpass.getuser()
    except OSError:
        log.debug("Could not determine the current user name.", exc_info=True)
        user = ""
    return user, Path(os.path.expanduser("~"))


def new_context() -> RunContext:
    """
    Creates a fresh context with its start time, sign and the identity of the
    current user filled in. All other fields keep their defaults.
    """
    now = time.time()
    user, home = current_identity()
    work_home = home / WORK_HOME_NAME
    system_data_dir = work_home / "data"

    return RunContext(
        start_time=datetime.fromtimestamp(now),
        sign=generate_sign(os.getpid(), now),
        user=user,
        work_home=str(work_home),
        meta_path=str(work_home / "meta" / "host.meta"),
        system_data_dir=str(system_data_dir),
        data_dir=str(system_data_dir),
    )


def assert_context(ctx: RunContext) -> RunContext:
    """
    Validates a populated context, stopping at the first failure.

    The checks run in a fixed order: client logger, server logger, URL, output.
    URL and output failures are logged on the client logger before being raised.

    Args:
        ctx: The context to validate. Its `url` and `output` are normalized
            in place.

    Returns:
        The same context, now resolved.

    Raises:
        MissingCollaboratorError: If a logger handle is missing.
        InvalidURLError: If the URL fails validation.
        InvalidOutputError: If the output path cannot be used.
    """
    if ctx.client_logger is None:
        raise MissingCollaboratorError("client log is not initialized")
    if ctx.server_logger is None:
        raise MissingCollaboratorError("server log is not initialized")

    try:
        check_url(ctx)
    except InvalidURLError as e:
        message = f"invalid url: {e}"
        ctx.client_logger.error(message)
        raise InvalidURLError(message, url=e.url) from e

    try:
        check_output(ctx)
    except InvalidOutputError as e:
        message = f"invalid output: {e}"
        ctx.client_logger.error(message)
        raise InvalidOutputError(message, path=e.path) from e

    ctx.client_logger.debug(f"run context: {ctx}")
    return ctx
