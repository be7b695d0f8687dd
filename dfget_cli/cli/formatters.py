"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dfget_cli.models.context import RunContext
from dfget_cli.utils.formatting import format_rate


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "InvalidURLError": [
            "• Include the scheme, e.g. `http://` or `https://`.",
            "• Check the host name for typos and stray slashes.",
            "• Quote the URL if it contains '&' or '?'.",
        ],
        "InvalidOutputError": [
            "• Pass a file path with -o, not a directory.",
            "• Make sure the target directory is writable by the current user.",
            "• Without -o, the URL must end in a file name.",
        ],
        "MissingCollaboratorError": [
            "• The client or server logger was not initialized.",
            "• Check that the work home directory is writable.",
        ],
        "ConfigurationError": [
            "• Review the properties file (default /etc/dragonfly.conf).",
            "• Rates take a byte count or a K/M/G suffix, e.g. 20M.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with --verbose for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_context(ctx: RunContext, console: Console | None = None):
    """Displays a summary of the resolved run context."""
    console = console or Console()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Sign:", ctx.sign)
    table.add_row("URL:", Text(ctx.url))
    table.add_row("Output:", Text(ctx.output, style="green"))
    table.add_row("Pattern:", ctx.pattern or "p2p")
    table.add_row("Local Limit:", format_rate(ctx.local_limit))
    table.add_row("Total Limit:", format_rate(ctx.total_limit))
    table.add_row("Min Rate:", format_rate(ctx.min_rate))
    if ctx.node:
        table.add_row("Nodes:", ", ".join(ctx.node))
    table.add_row("User:", ctx.user or "unknown")
    table.add_row("Work Home:", f"[dim]{ctx.work_home}[/dim]")

    console.print(
        Panel(
            table,
            title="[bold green]✓ Resolved Run Context[/bold green]",
            border_style="green",
        )
    )
