"""Command-line interface for COCOMO estimates."""

import click

from cocomo import __version__
from cocomo.cli._helpers import configure_logging, console, fail  # noqa: F401
from cocomo.errors import CocomoError


# Main CLI group
@click.group()
@click.version_option(version=__version__, prog_name="cocomo")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with estimate defaults",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """COCOMO (Constructive Cost Model) - estimate software cost and schedule.

    See also: https://en.wikipedia.org/wiki/COCOMO
    """
    configure_logging(verbose)

    if config_path:
        from cocomo.config import EstimateConfig

        try:
            config = EstimateConfig.from_yaml(config_path)
        except CocomoError as e:
            fail(str(e))
        ctx.default_map = {"estimate": config.default_map()}


# --- Register commands from submodules ---

# estimate.py
from cocomo.cli.estimate import estimate, sloc  # noqa: E402

main.add_command(estimate)
main.add_command(sloc)

# tables.py
from cocomo.cli.tables import inflation, types  # noqa: E402

main.add_command(types)
main.add_command(inflation)
