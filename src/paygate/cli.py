"""
Command Line Interface for paygate
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .demo import run_demo

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)]
)
logger = logging.getLogger("paygate")

app = typer.Typer(
    name="paygate",
    help="Payment gateway strategy pattern demonstration",
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"paygate version {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True}
)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:
    """Run the checkout demonstration against every payment gateway."""
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {ctx.args}")

    run_demo(console)


if __name__ == "__main__":
    app()
