"""Data classes for representing COCOMO coefficients and estimates."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from cocomo.constants import DEFAULT_DEV_TIME, MONTHS_PER_YEAR
from cocomo.errors import MalformedCoefficients, UnknownProjectType


class ProjectType(Enum):
    """Development environment category from Boehm's basic COCOMO."""

    ORGANIC = "organic"  # Small team, well understood problem
    SEMI_DETACHED = "semi-detached"  # Between organic and embedded
    EMBEDDED = "embedded"  # Tight constraints, large experienced team

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def parse(cls, name: str) -> "ProjectType":
        """Resolve a user-supplied name to a project type.

        Accepts the value (``semi-detached``), the member name
        (``SEMI_DETACHED``) and the unseparated spelling (``SemiDetached``),
        case-insensitively.

        Raises:
            UnknownProjectType: If the name matches no project type
        """
        key = name.strip().lower().replace("_", "-")
        for member in cls:
            if key in (member.value, member.value.replace("-", "")):
                return member
        raise UnknownProjectType(name, cls.choices())

    @property
    def title(self) -> str:
        return self.value.replace("-", " ").title()


class OutputFormat(Enum):
    """Report layouts."""

    MARKDOWN_TABLE = "markdown-table"  # Tabular
    SLOCCOUNT = "sloccount"  # Narrative
    SLOCCOUNT_INFLATION = "sloccount-inflation"  # Narrative with inflation

    @classmethod
    def choices(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class CoefficientSet:
    """COCOMO curve: Effort = a * KSLOC**b * EAF; Months = dev_time * Effort**c."""

    a: float
    b: float
    dev_time: float
    c: float

    @classmethod
    def from_tuple(
        cls, values: Sequence[float], dev_time: float = DEFAULT_DEV_TIME
    ) -> "CoefficientSet":
        """Build from ``(a, b, c)`` plus a separate dev_time, or from ``(a, b, d, c)``."""
        if len(values) == 3:
            a, b, c = values
            return cls(float(a), float(b), float(dev_time), float(c))
        if len(values) == 4:
            a, b, d, c = values
            return cls(float(a), float(b), float(d), float(c))
        raise MalformedCoefficients(
            ",".join(str(v) for v in values), 3, f"got {len(values)} values"
        )

    def as_tuple(self, shape: int = 3) -> tuple[float, ...]:
        if shape == 3:
            return (self.a, self.b, self.c)
        if shape == 4:
            return (self.a, self.b, self.dev_time, self.c)
        raise ValueError(f"Unsupported coefficient shape: {shape}")

    def to_dict(self) -> dict:
        return {"a": self.a, "b": self.b, "dev_time": self.dev_time, "c": self.c}


@dataclass(frozen=True)
class InflationEntry:
    """Annual inflation rate and cumulative multiplier relative to the base year."""

    rate: float
    multiplier: float


@dataclass(frozen=True)
class EstimateResult:
    """Computed COCOMO estimate and the inputs that produced it."""

    sloc: float
    effort: float  # person-months
    cost: float
    months: float
    people: float  # effort / months

    # Echoed inputs
    eaf: float
    avg_wage: float  # base wage, before inflation adjustment
    adjusted_wage: float  # wage that fed the cost estimate
    overhead: float
    coefficients: CoefficientSet
    currency: str = "$"
    inflation_year: Optional[int] = None
    inflation_multiplier: float = 1.0
    project_type: Optional[ProjectType] = None

    @property
    def person_years(self) -> float:
        return self.effort / MONTHS_PER_YEAR

    @property
    def schedule_years(self) -> float:
        return self.months / MONTHS_PER_YEAR

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "sloc": self.sloc,
            "effort_person_months": self.effort,
            "effort_person_years": self.person_years,
            "schedule_months": self.months,
            "schedule_years": self.schedule_years,
            "people": self.people,
            "cost": self.cost,
            "currency": self.currency,
            "inputs": {
                "project_type": self.project_type.value if self.project_type else None,
                "coefficients": self.coefficients.to_dict(),
                "eaf": self.eaf,
                "average_wage": self.avg_wage,
                "adjusted_wage": self.adjusted_wage,
                "overhead": self.overhead,
                "inflation_year": self.inflation_year,
                "inflation_multiplier": self.inflation_multiplier,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def to_yaml(self) -> str:
        """Export estimate as YAML string."""
        import yaml

        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
