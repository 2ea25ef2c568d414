"""COCOMO effort, schedule, cost and staffing estimation.

All functions are pure and never raise on degenerate input: floating-point
special values propagate the way IEEE-754 defines them. In particular
``sloc = 0`` yields zero effort, a zero-month schedule and NaN staffing.
"""

import logging
import math
from typing import Optional

from cocomo.catalog import resolve_coefficients
from cocomo.constants import (
    DEFAULT_AVERAGE_WAGE,
    DEFAULT_CURRENCY,
    DEFAULT_EAF,
    DEFAULT_INFLATION_MULTIPLIER,
    DEFAULT_OVERHEAD,
    LINES_PER_KSLOC,
    MONTHS_PER_YEAR,
)
from cocomo.inflation import adjust_wage, effective_multiplier
from cocomo.schema import CoefficientSet, EstimateResult, ProjectType

logger = logging.getLogger(__name__)


def _pow(base: float, exponent: float) -> float:
    # math.pow raises where IEEE-754 pow returns a special value
    if base == 0 and exponent < 0:
        # pow(-0, odd negative integer) is -inf
        if float(exponent).is_integer() and exponent % 2 == 1:
            return math.copysign(math.inf, base)
        return math.inf
    # Otherwise infinite operands never raise: pow(-inf, 0.5) and pow(-2, inf) are inf
    if math.isinf(base) or math.isinf(exponent):
        return math.pow(base, exponent)
    if base < 0 and not float(exponent).is_integer():
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def _div(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def estimate_effort(sloc: float, eaf: float, coefficients: CoefficientSet) -> float:
    """Effort in person-months: a * KSLOC**b * EAF."""
    return coefficients.a * _pow(sloc / LINES_PER_KSLOC, coefficients.b) * eaf


def estimate_months(
    effort: float, coefficients: CoefficientSet, dev_time: Optional[float] = None
) -> float:
    """Schedule in calendar months: d * Effort**c.

    ``dev_time`` overrides the coefficient set's development time constant.
    """
    d = coefficients.dev_time if dev_time is None else dev_time
    return d * _pow(effort, coefficients.c)


def estimate_cost(effort: float, avg_wage: float, overhead: float) -> float:
    """Cost to develop; ``avg_wage`` is annual."""
    return effort * avg_wage / MONTHS_PER_YEAR * overhead


def estimate_staffing(effort: float, months: float) -> float:
    """Average number of developers (Effort / Schedule)."""
    return _div(effort, months)


def cocomo(
    sloc: float,
    eaf: float,
    avg_wage: float,
    overhead: float,
    coefficients: CoefficientSet,
    dev_time: Optional[float] = None,
) -> tuple[float, float, float, float]:
    """Calculate COCOMO effort, cost, months and people estimates."""
    effort = estimate_effort(sloc, eaf, coefficients)
    cost = estimate_cost(effort, avg_wage, overhead)
    months = estimate_months(effort, coefficients, dev_time)
    people = estimate_staffing(effort, months)
    return effort, cost, months, people


def compute_estimate(
    sloc: float,
    eaf: float = DEFAULT_EAF,
    avg_wage: float = DEFAULT_AVERAGE_WAGE,
    overhead: float = DEFAULT_OVERHEAD,
    coefficients: Optional[CoefficientSet] = None,
    dev_time: Optional[float] = None,
    inflation_multiplier: float = DEFAULT_INFLATION_MULTIPLIER,
    inflation_year: Optional[int] = None,
    currency: str = DEFAULT_CURRENCY,
    project_type: Optional[ProjectType] = None,
) -> EstimateResult:
    """Compute a full estimate.

    Args:
        sloc: Source lines of code
        eaf: Effort Adjustment Factor
        avg_wage: Average annual wage in base-year money
        overhead: Multiplier from salary to fully loaded cost
        coefficients: Coefficient set; defaults to the project type's, or organic
        dev_time: Overrides the coefficient set's development time constant
        inflation_multiplier: Wage multiplier when no year lookup applies
        inflation_year: Year whose cumulative inflation scales the wage
        currency: Currency symbol echoed into reports
        project_type: Catalog entry the coefficients came from, if any

    Returns:
        EstimateResult
    """
    if coefficients is None:
        project_type = project_type or ProjectType.ORGANIC
        coefficients = resolve_coefficients(project_type)
    if dev_time is not None:
        coefficients = CoefficientSet(coefficients.a, coefficients.b, dev_time, coefficients.c)

    multiplier = effective_multiplier(inflation_multiplier, inflation_year)
    adjusted_wage = adjust_wage(avg_wage, inflation_multiplier, inflation_year)

    effort, cost, months, people = cocomo(sloc, eaf, adjusted_wage, overhead, coefficients)
    logger.debug(
        "Estimate for %s SLOC: effort=%.2f months=%.2f people=%.2f cost=%.2f",
        sloc,
        effort,
        months,
        people,
        cost,
    )

    return EstimateResult(
        sloc=sloc,
        effort=effort,
        cost=cost,
        months=months,
        people=people,
        eaf=eaf,
        avg_wage=avg_wage,
        adjusted_wage=adjusted_wage,
        overhead=overhead,
        coefficients=coefficients,
        currency=currency,
        inflation_year=inflation_year,
        inflation_multiplier=multiplier,
        project_type=project_type,
    )
