"""
Utilities for resolving the download destination path.
"""

import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import unquote

from pathvalidate import sanitize_filename

from dfget_cli.exceptions import InvalidOutputError

if TYPE_CHECKING:
    from dfget_cli.models.context import RunContext

log = logging.getLogger(__name__)


def file_name_from_url(url: str) -> str:
    """
    Extracts the last path segment of a URL to use as a local file name.

    The query string and fragment are ignored and percent-escapes decoded.

    Raises:
        InvalidOutputError: If the URL has no scheme or ends without a name.
    """
    scheme, sep, remainder = url.partition("://")
    if not scheme or not sep:
        raise InvalidOutputError(f"get output from url[{url}] error", path="")

    remainder = re.split(r"[?#]", remainder, maxsplit=1)[0]
    name = sanitize_filename(unquote(remainder.rpartition("/")[2]), platform="auto")
    if not name:
        raise InvalidOutputError(f"get output from url[{url}] error", path="")
    return name


def ensure_writable(path: Path, user: str) -> None:
    """
    Checks that the first existing entry on the way from `path` up to the
    filesystem root is writable by the current user. Missing entries are
    assumed creatable later.

    Raises:
        InvalidOutputError: If an entry cannot be inspected or is read-only.
    """
    for candidate in (path, *path.parents):
        try:
            os.stat(candidate)
        except (FileNotFoundError, NotADirectoryError):
            continue
        except PermissionError as e:
            raise InvalidOutputError(
                f"user[{user}] path[{path}] {e.strerror}", path=str(path)
            ) from e
        if os.access(candidate, os.W_OK):
            log.debug(f"Output '{path}' is writable through '{candidate}'.")
            return
        raise InvalidOutputError(
            f"user[{user}] path[{path}] is not writable", path=str(path)
        )


def resolve_output(url: str, output: str, user: str = "") -> str:
    """
    Resolves the destination of a download into one absolute file path.

    Args:
        url: The source URL, used to derive a file name when `output` is empty.
        output: The user-supplied path, absolute or relative to the cwd.
        user: The current user name, only used in error messages.

    Returns:
        The absolute, normalized output path.

    Raises:
        InvalidOutputError: If no file name can be derived, the path is an
            existing directory, or it is not writable.
    """
    if not output:
        output = file_name_from_url(url)

    resolved = Path(os.path.abspath(output))

    if os.path.isdir(resolved):
        raise InvalidOutputError(
            f"path[{resolved}] is directory but requires file path",
            path=str(resolved),
        )

    ensure_writable(resolved, user)
    return str(resolved)


def check_output(ctx: "RunContext") -> str:
    """Resolves `ctx.output` and stores the absolute path back on the context."""
    ctx.output = resolve_output(ctx.url, ctx.output, ctx.user)
    return ctx.output
