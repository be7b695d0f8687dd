"""
Main entry point for the dfget-cli application.
This is the single place where startup failures are reported and turned
into a non-zero exit status.
"""

import logging
import sys

from rich.console import Console

from dfget_cli.cli.app import app
from dfget_cli.cli.formatters import format_error_with_suggestions
from dfget_cli.exceptions import DfgetError


def main() -> None:
    """Main entry point function."""
    log = logging.getLogger("dfget_cli")
    console = Console()

    try:
        app()
    except DfgetError as e:
        console.print()
        console.print(format_error_with_suggestions(e))
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
