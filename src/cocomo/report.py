"""Text report rendering for COCOMO estimates."""

import math

from cocomo.constants import INFLATION_BASE_YEAR
from cocomo.schema import EstimateResult, OutputFormat


def integer(n: float) -> str:
    """Grouped thousands, no decimal places."""
    if math.isnan(n):
        return "NaN"
    return f"{n:,.0f}"


def decimal(n: float) -> str:
    """Grouped thousands, exactly 2 decimal places."""
    if math.isnan(n):
        return "NaN"
    return f"{n:,.2f}"


def _markdown_table(result: EstimateResult) -> str:
    lines = [
        "Description                | Value",
        "---------------------------|---------------------------------",
        f"Total Source Lines of Code | {integer(result.sloc)}",
        f"Estimated Cost to Develop  | {result.currency}{decimal(result.cost)}",
        f"Estimated Schedule Effort  | {decimal(result.months)} months",
        f"Estimated People Required  | {decimal(result.people)}",
    ]
    return "\n".join(lines) + "\n"


def _sloccount_lines(result: EstimateResult) -> list[str]:
    coeffs = result.coefficients
    cur = result.currency
    return [
        "Total Physical Source Lines of Code (SLOC)                    = "
        f"{integer(result.sloc)}",
        "Development Effort Estimate, Person-Years (Person-Months)     = "
        f"{decimal(result.person_years)} ({decimal(result.effort)})",
        "  (Basic COCOMO model, Person-Months = "
        f"{decimal(coeffs.a)}*(KSLOC**{decimal(coeffs.b)})*{decimal(result.eaf)})",
        "Schedule Estimate, Years (Months)                             = "
        f"{decimal(result.schedule_years)} ({decimal(result.months)})",
        "  (Basic COCOMO model, Months = "
        f"{decimal(coeffs.dev_time)}*(person-months**{decimal(coeffs.c)}))",
        "Estimated Average Number of Developers (Effort/Schedule)      = "
        f"{decimal(result.people)}",
        "Total Estimated Cost to Develop                               = "
        f"{cur}{integer(result.cost)}",
        f"  (average salary = {cur}{integer(result.adjusted_wage)}/year, "
        f"overhead = {decimal(result.overhead)})",
    ]


def _sloccount(result: EstimateResult) -> str:
    return "\n".join(_sloccount_lines(result)) + "\n"


def _sloccount_inflation(result: EstimateResult) -> str:
    lines = _sloccount_lines(result)
    year = result.inflation_year if result.inflation_year is not None else "none"
    lines.append(
        f"  (inflation year = {year}, multiplier = {decimal(result.inflation_multiplier)}, "
        f"{INFLATION_BASE_YEAR} salary = {result.currency}{integer(result.avg_wage)}/year)"
    )
    return "\n".join(lines) + "\n"


_RENDERERS = {
    OutputFormat.MARKDOWN_TABLE: _markdown_table,
    OutputFormat.SLOCCOUNT: _sloccount,
    OutputFormat.SLOCCOUNT_INFLATION: _sloccount_inflation,
}


def render_report(result: EstimateResult, fmt: OutputFormat = OutputFormat.MARKDOWN_TABLE) -> str:
    """Create a report in the requested layout."""
    return _RENDERERS[fmt](result)
