"""Centralized defaults for cost estimation.

Values shared by the engine, the config layer and the CLI.
"""

# =============================================================================
# Wage & Overhead
# =============================================================================

# Average annual developer salary (sloccount default)
DEFAULT_AVERAGE_WAGE = 56286.0

# Multiplier from salary to fully loaded cost
DEFAULT_OVERHEAD = 2.4

DEFAULT_CURRENCY = "$"


# =============================================================================
# COCOMO Model
# =============================================================================

# Effort Adjustment Factor; typically 0.9 - 1.4
DEFAULT_EAF = 1.0

# Development time constant (d in Months = d * Effort**c)
DEFAULT_DEV_TIME = 2.5

# Person-months per person-year
MONTHS_PER_YEAR = 12.0

# Lines per KSLOC
LINES_PER_KSLOC = 1000.0


# =============================================================================
# Inflation
# =============================================================================

# Wages are expressed in dollars of this year
INFLATION_BASE_YEAR = 1995

# No adjustment
DEFAULT_INFLATION_MULTIPLIER = 1.0
