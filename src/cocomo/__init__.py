"""COCOMO - estimate software cost, schedule, effort and staffing from source lines of code."""

__version__ = "0.1.0"

from cocomo.catalog import (
    lookup_coefficients,
    parse_coefficients,
    project_type_params,
    resolve_coefficients,
)
from cocomo.errors import (
    CocomoError,
    ConfigError,
    MalformedCoefficients,
    UnknownProjectType,
)
from cocomo.estimator import (
    cocomo,
    compute_estimate,
    estimate_cost,
    estimate_effort,
    estimate_months,
    estimate_staffing,
)
from cocomo.inflation import INFLATION_TABLE, adjust_wage, lookup_inflation
from cocomo.report import render_report
from cocomo.schema import (
    CoefficientSet,
    EstimateResult,
    InflationEntry,
    OutputFormat,
    ProjectType,
)


# Lazy imports for modules that touch the filesystem or optional dependencies
def __getattr__(name):
    """Lazy import for optional modules."""
    if name == "total_sloc":
        from cocomo.sloc import total_sloc

        return total_sloc
    if name == "count_paths":
        from cocomo.sloc import count_paths

        return count_paths
    if name == "EstimateConfig":
        from cocomo.config import EstimateConfig

        return EstimateConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Data model
    "CoefficientSet",
    "EstimateResult",
    "InflationEntry",
    "OutputFormat",
    "ProjectType",
    # Errors
    "CocomoError",
    "ConfigError",
    "MalformedCoefficients",
    "UnknownProjectType",
    # Catalog
    "lookup_coefficients",
    "parse_coefficients",
    "project_type_params",
    "resolve_coefficients",
    # Inflation
    "INFLATION_TABLE",
    "adjust_wage",
    "lookup_inflation",
    # Engine
    "cocomo",
    "compute_estimate",
    "estimate_cost",
    "estimate_effort",
    "estimate_months",
    "estimate_staffing",
    "render_report",
    # Lazy loaded
    "total_sloc",
    "count_paths",
    "EstimateConfig",
]
