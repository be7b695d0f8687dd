"""
Validation of the source URL given on the command line.
"""

import re
from typing import TYPE_CHECKING

from dfget_cli.exceptions import InvalidURLError

if TYPE_CHECKING:
    from dfget_cli.models.context import RunContext

SCHEME_PATTERN = re.compile(r"(?P<scheme>https?)://", re.IGNORECASE)

# Scheme, optional credentials, a host with at least one '.' separator and
# an optional (possibly empty) port. Searched for anywhere after the leading
# scheme, so whatever follows the host is not constrained.
URL_PATTERN = re.compile(
    r"(?P<scheme>https?)://"
    r"(?:[\w.-]+:[\w.-]*@)?"
    r"(?P<host>(?:[\w-]+\.)+[\w-]+)"
    r"(?::(?P<port>\d*))?",
    re.IGNORECASE,
)

MAX_PORT = 65535


def validate_url(url: str) -> str:
    """
    Checks that a URL names an http(s) resource on a plausible host.

    The URL must start with an http(s) scheme, and an http(s) address with a
    dotted host must appear in it. This accepts a repeated scheme such as
    'http://https://a.com/x' while still rejecting hosts that are missing or
    made only of separators.

    Args:
        url: The URL as typed by the user, scheme included.

    Returns:
        The URL with its leading scheme lower-cased.

    Raises:
        InvalidURLError: If the URL is empty, does not start with an http(s)
            scheme, or carries no host with a '.' label separator.
    """
    leading = SCHEME_PATTERN.match(url) if url else None
    match = URL_PATTERN.search(url) if leading else None
    if match is None:
        raise InvalidURLError(url or "url is empty", url=url)

    port = match.group("port")
    if port and int(port) > MAX_PORT:
        raise InvalidURLError(url, url=url)

    scheme = leading.group("scheme")
    return scheme.lower() + url[len(scheme) :]


def check_url(ctx: "RunContext") -> str:
    """Validates `ctx.url` and stores the normalized form back on the context."""
    ctx.url = validate_url(ctx.url)
    return ctx.url
