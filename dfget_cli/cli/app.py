"""
Defines the command-line interface for the application using Typer.
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from dfget_cli import __version__
from dfget_cli.core.context import assert_context, new_context
from dfget_cli.exceptions import MissingCollaboratorError
from dfget_cli.storage.config_manager import (
    DEFAULT_PROPERTIES_FILE,
    ConfigManager,
    apply_properties,
)
from dfget_cli.utils.formatting import parse_rate
from dfget_cli.utils.log import (
    close_loggers,
    create_client_logger,
    create_server_logger,
)

from .formatters import print_context

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("dfget_cli")

app = typer.Typer(
    name="dfget",
    help=(
        "Validate and resolve the settings of a peer-assisted download before"
        " it starts."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


def _parse_optional_rate(rate: str | None) -> int | None:
    return None if rate is None else parse_rate(rate)


def _split_nodes(node: str | None) -> list[str] | None:
    if node is None:
        return None
    return [n.strip() for n in node.split(",") if n.strip()]


@app.command()
def dfget(
    url: str = typer.Option(
        "", "-u", "--url", help="URL of the file to download (http or https)."
    ),
    output: str = typer.Option(
        "",
        "-o",
        "--output",
        help="Destination file path. Defaults to the URL's file name in the cwd.",
    ),
    local_limit: str | None = typer.Option(
        None,
        "-s",
        "--locallimit",
        help="Rate limit for this download, e.g. 20M or 512K.",
    ),
    min_rate: str | None = typer.Option(
        None, "-m", "--minrate", help="Minimal acceptable rate, e.g. 64K."
    ),
    total_limit: str | None = typer.Option(
        None, "-e", "--totallimit", help="Rate limit for the whole host, e.g. 100M."
    ),
    timeout: int | None = typer.Option(
        None, "--timeout", help="Download timeout in seconds (0 = automatic)."
    ),
    md5: str | None = typer.Option(
        None, "--md5", help="Expected MD5 of the downloaded file."
    ),
    identifier: str | None = typer.Option(
        None, "-i", "--identifier", help="Identifier used to share the file."
    ),
    call_system: str | None = typer.Option(
        None, "--callsystem", help="Name of the calling system."
    ),
    pattern: str | None = typer.Option(
        None, "-p", "--pattern", help="Download pattern: [cyan]p2p[/cyan] or cdn."
    ),
    header: list[str] | None = typer.Option(  # noqa: B008
        None, "--header", help="Extra HTTP header 'Key: Value', repeatable."
    ),
    node: str | None = typer.Option(
        None, "-n", "--node", help="Comma-separated supernode addresses."
    ),
    not_back_source: bool = typer.Option(
        False, "--notbs", help="Never fall back to downloading from the source."
    ),
    version: bool = typer.Option(
        False, "-v", "--version", help="Show version and exit.", is_eager=True
    ),
    show_bar: bool = typer.Option(
        False, "-b", "--showbar", help="Show a progress bar during the download."
    ),
    show_console: bool = typer.Option(
        False, "--console", help="Mirror the client log to the terminal."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
    conf: Path = typer.Option(  # noqa: B008
        DEFAULT_PROPERTIES_FILE, "--conf", help="Path of the properties file."
    ),
):
    """
    Check the download settings and print the resolved run context.

    Validation failures propagate as DfgetError to the entry point, which
    renders them and exits.
    """
    if version:
        console.print(f"[bold]dfget[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    if verbose:
        logging.getLogger("dfget_cli").setLevel("DEBUG")

    ctx = new_context()
    try:
        properties = ConfigManager(conf).load_properties()
        cli_options = {
            "url": url,
            "output": output,
            "local_limit": _parse_optional_rate(local_limit),
            "min_rate": _parse_optional_rate(min_rate),
            "total_limit": _parse_optional_rate(total_limit),
            "timeout": timeout,
            "md5": md5,
            "identifier": identifier,
            "call_system": call_system,
            "pattern": pattern,
            "header": header,
            "node": _split_nodes(node),
            "not_back_source": not_back_source,
            "show_bar": show_bar,
            "console": show_console,
            "verbose": verbose,
        }
        apply_properties(ctx, properties, cli_options)

        try:
            ctx.client_logger = create_client_logger(ctx, console)
            ctx.server_logger = create_server_logger(ctx)
        except OSError as e:
            raise MissingCollaboratorError(
                f"cannot create log files under '{ctx.work_home}': {e}"
            ) from e

        assert_context(ctx)
    finally:
        close_loggers(ctx.client_logger, ctx.server_logger)

    log.debug(f"Run context resolved: {ctx}")
    print_context(ctx, console)
