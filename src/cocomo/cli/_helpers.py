"""CLI shared helpers."""

import logging
import sys

from rich.console import Console
from rich.markup import escape

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Send debug log records to stderr when verbose.

    Otherwise warnings reach stderr through logging's last-resort handler.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )


def fail(message: str) -> None:
    """Print an error and exit non-zero."""
    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(1)
