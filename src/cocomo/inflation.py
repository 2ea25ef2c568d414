"""Bundled wage inflation table and adjustment helpers.

Rates and multipliers are derived from BLS CPI-U annual averages (US city
average, all items). Multipliers are cumulative relative to 1995, the year
sloccount's default salary is expressed in. 2009 had deflation, so its
multiplier is below 2008's.
"""

import logging
from types import MappingProxyType
from typing import Optional

from cocomo.constants import DEFAULT_INFLATION_MULTIPLIER, INFLATION_BASE_YEAR
from cocomo.schema import InflationEntry

logger = logging.getLogger(__name__)

INFLATION_TABLE = MappingProxyType(
    {
        1995: InflationEntry(rate=0.0283, multiplier=1.0000),
        1996: InflationEntry(rate=0.0295, multiplier=1.0295),
        1997: InflationEntry(rate=0.0229, multiplier=1.0531),
        1998: InflationEntry(rate=0.0156, multiplier=1.0696),
        1999: InflationEntry(rate=0.0221, multiplier=1.0932),
        2000: InflationEntry(rate=0.0336, multiplier=1.1299),
        2001: InflationEntry(rate=0.0285, multiplier=1.1621),
        2002: InflationEntry(rate=0.0158, multiplier=1.1804),
        2003: InflationEntry(rate=0.0228, multiplier=1.2073),
        2004: InflationEntry(rate=0.0266, multiplier=1.2395),
        2005: InflationEntry(rate=0.0339, multiplier=1.2815),
        2006: InflationEntry(rate=0.0323, multiplier=1.3228),
        2007: InflationEntry(rate=0.0283, multiplier=1.3602),
        2008: InflationEntry(rate=0.0386, multiplier=1.4127),
        2009: InflationEntry(rate=-0.0037, multiplier=1.4075),
        2010: InflationEntry(rate=0.0168, multiplier=1.4311),
        2011: InflationEntry(rate=0.0312, multiplier=1.4757),
        2012: InflationEntry(rate=0.0209, multiplier=1.5066),
        2013: InflationEntry(rate=0.0148, multiplier=1.5289),
        2014: InflationEntry(rate=0.0159, multiplier=1.5531),
        2015: InflationEntry(rate=0.0013, multiplier=1.5551),
        2016: InflationEntry(rate=0.0127, multiplier=1.5748),
        2017: InflationEntry(rate=0.0212, multiplier=1.6083),
        2018: InflationEntry(rate=0.0245, multiplier=1.6476),
        2019: InflationEntry(rate=0.0183, multiplier=1.6778),
        2020: InflationEntry(rate=0.0121, multiplier=1.6982),
        2021: InflationEntry(rate=0.0471, multiplier=1.7782),
        2022: InflationEntry(rate=0.0801, multiplier=1.9206),
        2023: InflationEntry(rate=0.0430, multiplier=2.0033),
        2024: InflationEntry(rate=0.0226, multiplier=2.0486),
    }
)


def available_years() -> tuple[int, int]:
    years = sorted(INFLATION_TABLE)
    return years[0], years[-1]


def lookup_inflation(
    year: int, default_multiplier: float = DEFAULT_INFLATION_MULTIPLIER
) -> InflationEntry:
    """Return the table entry for a year, or ``(0.0, default_multiplier)`` if absent."""
    entry = INFLATION_TABLE.get(year)
    if entry is None:
        lo, hi = available_years()
        logger.debug(
            "Inflation year %s not in table (%s-%s); using multiplier %s",
            year,
            lo,
            hi,
            default_multiplier,
        )
        return InflationEntry(rate=0.0, multiplier=default_multiplier)
    return entry


def effective_multiplier(
    inflation_multiplier: float = DEFAULT_INFLATION_MULTIPLIER,
    inflation_year: Optional[int] = None,
) -> float:
    """Multiplier applied to the base wage.

    A year found in the table overrides ``inflation_multiplier``; a missing
    year falls back to it.
    """
    if inflation_year is None:
        return inflation_multiplier
    return lookup_inflation(inflation_year, inflation_multiplier).multiplier


def adjust_wage(
    base_wage: float,
    inflation_multiplier: float = DEFAULT_INFLATION_MULTIPLIER,
    inflation_year: Optional[int] = None,
) -> float:
    """Scale a base-year wage to the given year's money."""
    multiplier = effective_multiplier(inflation_multiplier, inflation_year)
    if inflation_year is not None:
        logger.debug(
            "Adjusting wage %s from %s to %s: x%.4f",
            base_wage,
            INFLATION_BASE_YEAR,
            inflation_year,
            multiplier,
        )
    return base_wage * multiplier
