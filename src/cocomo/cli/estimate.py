"""Estimation commands: estimate, sloc."""

import json
import logging

import click
from click.core import ParameterSource
from rich.table import Table

from cocomo.catalog import parse_coefficients, resolve_coefficients
from cocomo.cli._helpers import console, fail
from cocomo.constants import (
    DEFAULT_AVERAGE_WAGE,
    DEFAULT_CURRENCY,
    DEFAULT_DEV_TIME,
    DEFAULT_EAF,
    DEFAULT_INFLATION_MULTIPLIER,
    DEFAULT_OVERHEAD,
)
from cocomo.errors import CocomoError
from cocomo.estimator import compute_estimate
from cocomo.report import render_report
from cocomo.schema import OutputFormat, ProjectType
from cocomo.sloc import count_paths

logger = logging.getLogger(__name__)


@click.command("estimate")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option(
    "--average-wage", type=float, default=DEFAULT_AVERAGE_WAGE, show_default=True,
    help="Average annual wage",
)
@click.option("--overhead", type=float, default=DEFAULT_OVERHEAD, show_default=True, help="Overhead")
@click.option(
    "--eaf", type=float, default=DEFAULT_EAF, show_default=True,
    help="Effort Adjustment Factor (EAF); typically 0.9 - 1.4",
)
@click.option(
    "--project-type",
    type=click.Choice(ProjectType.choices(), case_sensitive=False),
    default=ProjectType.ORGANIC.value,
    show_default=True,
    help="Project type",
)
@click.option("--custom", metavar="a,b,c", help="Custom parameters (a, b, c)")
@click.option(
    "--development-time", type=float, default=DEFAULT_DEV_TIME, show_default=True,
    help="Development time (d)",
)
@click.option("--currency-symbol", default=DEFAULT_CURRENCY, show_default=True, help="Currency symbol")
@click.option("--inflation-year", type=int, help="Adjust the wage for inflation up to this year")
@click.option(
    "--inflation-multiplier", type=float, default=DEFAULT_INFLATION_MULTIPLIER, show_default=True,
    help="Wage multiplier used when no inflation year applies",
)
@click.option(
    "--output-format",
    "-o",
    type=click.Choice(OutputFormat.choices()),
    default=OutputFormat.MARKDOWN_TABLE.value,
    show_default=True,
    help="Output format",
)
@click.option("--sloc", "sloc_count", type=float, help="Use this line count instead of scanning PATHS")
@click.option("--no-ignore", is_flag=True, help="Count files matched by .gitignore and .ignore")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--yaml", "as_yaml", is_flag=True, help="Output as YAML")
@click.pass_context
def estimate(
    ctx: click.Context,
    paths: tuple[str, ...],
    average_wage: float,
    overhead: float,
    eaf: float,
    project_type: str,
    custom: str,
    development_time: float,
    currency_symbol: str,
    inflation_year: int,
    inflation_multiplier: float,
    output_format: str,
    sloc_count: float,
    no_ignore: bool,
    as_json: bool,
    as_yaml: bool,
):
    """Estimate cost, schedule and staffing for source code.

    PATHS are files or directories to count (default: current directory).

    Example:
        cocomo estimate src/
        cocomo estimate --project-type embedded -o sloccount .
        cocomo estimate --sloc 10000 --inflation-year 2024 -o sloccount-inflation
    """
    if as_json and as_yaml:
        fail("--json conflicts with --yaml")

    if custom is not None and ctx.get_parameter_source("project_type") == ParameterSource.COMMANDLINE:
        if ctx.get_parameter_source("custom") == ParameterSource.COMMANDLINE:
            fail("--custom conflicts with --project-type")
        # Explicit flag wins over a config file's custom coefficients
        custom = None

    try:
        if custom is not None:
            coefficients = parse_coefficients(custom, dev_time=development_time)
            selected_type = None
        else:
            selected_type = ProjectType.parse(project_type)
            coefficients = resolve_coefficients(selected_type, dev_time=development_time)
    except CocomoError as e:
        fail(str(e))

    logger.debug("Coefficients: %s (project type: %s)", coefficients, selected_type)

    if sloc_count is None:
        with console.status("[cyan]Counting source lines...[/cyan]"):
            sloc_count = float(count_paths(paths or (".",), use_ignore_files=not no_ignore).code)
    elif paths:
        logger.warning("--sloc given; ignoring paths %s", ", ".join(paths))

    result = compute_estimate(
        sloc_count,
        eaf=eaf,
        avg_wage=average_wage,
        overhead=overhead,
        coefficients=coefficients,
        inflation_multiplier=inflation_multiplier,
        inflation_year=inflation_year,
        currency=currency_symbol,
        project_type=selected_type,
    )

    if as_json:
        click.echo(result.to_json())
    elif as_yaml:
        click.echo(result.to_yaml(), nl=False)
    else:
        click.echo(render_report(result, OutputFormat(output_format)), nl=False)


@click.command("sloc")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--no-ignore", is_flag=True, help="Count files matched by .gitignore and .ignore")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def sloc(paths: tuple[str, ...], no_ignore: bool, as_json: bool):
    """Count source lines of code per language.

    PATHS are files or directories to count (default: current directory).
    """
    with console.status("[cyan]Counting source lines...[/cyan]"):
        report = count_paths(paths or (".",), use_ignore_files=not no_ignore)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    table = Table(title="Source Lines of Code")
    table.add_column("Language", style="cyan")
    table.add_column("Files", justify="right")
    table.add_column("Code", justify="right", style="green")
    table.add_column("Comments", justify="right")
    table.add_column("Blanks", justify="right")

    for name, lang in report.languages.items():
        table.add_row(
            name, f"{lang.files:,}", f"{lang.code:,}", f"{lang.comments:,}", f"{lang.blanks:,}"
        )
    table.add_row("[bold]Total[/bold]", f"{len(report.files):,}", f"[bold green]{report.code:,}[/bold green]", "", "")

    console.print(table)
