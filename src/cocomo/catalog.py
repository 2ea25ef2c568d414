"""Project-type catalog and custom coefficient parsing.

Coefficients from Boehm, Software Engineering Economics (1981), basic model:

- Organic: small team, familiar problem, nominal experience.
  Equivalent to ``--custom 2.4,1.05,0.38``.
- Semi-detached: team size and experience between organic and embedded,
  e.g. compilers. Equivalent to ``--custom 3.0,1.12,0.35``.
- Embedded: highest complexity, creativity and experience requirements.
  Equivalent to ``--custom 3.6,1.20,0.32``.
"""

import logging
from types import MappingProxyType

from cocomo.constants import DEFAULT_DEV_TIME
from cocomo.errors import MalformedCoefficients
from cocomo.schema import CoefficientSet, ProjectType

logger = logging.getLogger(__name__)

# (a, b, c); development time constant is supplied separately
PROJECT_TYPE_PARAMS = MappingProxyType(
    {
        ProjectType.ORGANIC: (2.4, 1.05, 0.38),
        ProjectType.SEMI_DETACHED: (3.0, 1.12, 0.35),
        ProjectType.EMBEDDED: (3.6, 1.20, 0.32),
    }
)


def project_type_params(project_type: ProjectType, shape: int = 3) -> tuple[float, ...]:
    """Return the catalog tuple: ``(a, b, c)`` or ``(a, b, 2.5, c)``."""
    return resolve_coefficients(project_type).as_tuple(shape)


def resolve_coefficients(
    project_type: ProjectType, dev_time: float = DEFAULT_DEV_TIME
) -> CoefficientSet:
    """Look up the coefficient set for a project type."""
    return CoefficientSet.from_tuple(PROJECT_TYPE_PARAMS[project_type], dev_time=dev_time)


def lookup_coefficients(name: str, dev_time: float = DEFAULT_DEV_TIME) -> CoefficientSet:
    """Look up coefficients by free-form project type name.

    Raises:
        UnknownProjectType: If the name has no catalog entry
    """
    return resolve_coefficients(ProjectType.parse(name), dev_time=dev_time)


def parse_coefficients(
    text: str, arity: int = 3, dev_time: float = DEFAULT_DEV_TIME
) -> CoefficientSet:
    """Parse custom coefficients from comma-separated text.

    Args:
        text: ``"a,b,c"`` (arity 3) or ``"a,b,d,c"`` (arity 4)
        arity: Expected number of values
        dev_time: Development time constant used for the 3-value form

    Returns:
        CoefficientSet

    Raises:
        MalformedCoefficients: If a token is not a number or the count is wrong
    """
    if arity not in (3, 4):
        raise ValueError(f"Unsupported coefficient arity: {arity}")

    values = []
    for token in text.split(","):
        try:
            values.append(float(token.strip()))
        except ValueError:
            raise MalformedCoefficients(text, arity, f"not a number: {token.strip()!r}")

    if len(values) != arity:
        raise MalformedCoefficients(text, arity, f"got {len(values)} values")

    logger.debug("Using custom coefficients %s", values)
    return CoefficientSet.from_tuple(values, dev_time=dev_time)
