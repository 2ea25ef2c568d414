"""Reference table commands: types, inflation."""

import click
from rich.table import Table

from cocomo.catalog import resolve_coefficients
from cocomo.cli._helpers import console
from cocomo.constants import DEFAULT_AVERAGE_WAGE, INFLATION_BASE_YEAR
from cocomo.inflation import INFLATION_TABLE, adjust_wage, available_years, lookup_inflation
from cocomo.schema import ProjectType


@click.command("types")
def types():
    """List project types and their COCOMO coefficients."""
    table = Table(title="COCOMO Project Types")
    table.add_column("Type", style="cyan")
    table.add_column("a", justify="right")
    table.add_column("b", justify="right")
    table.add_column("d", justify="right")
    table.add_column("c", justify="right")
    table.add_column("Equivalent")

    for project_type in ProjectType:
        coeffs = resolve_coefficients(project_type)
        table.add_row(
            project_type.value,
            f"{coeffs.a:.2f}",
            f"{coeffs.b:.2f}",
            f"{coeffs.dev_time:.2f}",
            f"{coeffs.c:.2f}",
            f"--custom {coeffs.a},{coeffs.b:.2f},{coeffs.c}",
        )

    console.print(table)


@click.command("inflation")
@click.option("--year", "-y", type=int, help="Show a single year")
@click.option(
    "--wage", type=float, default=DEFAULT_AVERAGE_WAGE, show_default=True,
    help=f"Base wage ({INFLATION_BASE_YEAR} money) to adjust",
)
def inflation(year: int, wage: float):
    """Show the wage inflation table (multipliers relative to 1995)."""
    if year is not None:
        entry = lookup_inflation(year)
        if year not in INFLATION_TABLE:
            lo, hi = available_years()
            console.print(
                f"[yellow]{year} not in table ({lo}-{hi}); "
                f"multiplier {entry.multiplier:.4f} used[/yellow]"
            )
        else:
            console.print(
                f"[bold]{year}[/bold]: rate {entry.rate:+.2%}, multiplier {entry.multiplier:.4f}"
            )
        console.print(f"Adjusted wage: {adjust_wage(wage, inflation_year=year):,.2f}/year")
        return

    table = Table(title=f"Wage Inflation (base {INFLATION_BASE_YEAR})")
    table.add_column("Year", style="cyan")
    table.add_column("Rate", justify="right")
    table.add_column("Multiplier", justify="right", style="green")
    table.add_column("Wage", justify="right")

    for y, entry in INFLATION_TABLE.items():
        table.add_row(
            str(y), f"{entry.rate:+.2%}", f"{entry.multiplier:.4f}", f"{wage * entry.multiplier:,.0f}"
        )

    console.print(table)
