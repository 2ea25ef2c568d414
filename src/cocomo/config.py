"""Estimate settings loaded from YAML config files."""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from cocomo.constants import (
    DEFAULT_AVERAGE_WAGE,
    DEFAULT_CURRENCY,
    DEFAULT_DEV_TIME,
    DEFAULT_EAF,
    DEFAULT_INFLATION_MULTIPLIER,
    DEFAULT_OVERHEAD,
)
from cocomo.errors import ConfigError
from cocomo.schema import OutputFormat, ProjectType

logger = logging.getLogger(__name__)


@dataclass
class EstimateConfig:
    """Defaults for the ``estimate`` command."""

    average_wage: float = DEFAULT_AVERAGE_WAGE
    overhead: float = DEFAULT_OVERHEAD
    eaf: float = DEFAULT_EAF
    project_type: Optional[str] = None  # defaults to organic
    custom: Optional[str] = None  # "a,b,c"; replaces project_type
    development_time: float = DEFAULT_DEV_TIME
    currency_symbol: str = DEFAULT_CURRENCY
    inflation_year: Optional[int] = None
    inflation_multiplier: float = DEFAULT_INFLATION_MULTIPLIER
    output_format: str = OutputFormat.MARKDOWN_TABLE.value

    def __post_init__(self):
        if self.custom is not None and self.project_type is not None:
            raise ConfigError("custom conflicts with project_type")
        if self.project_type is not None:
            # Normalize names so click's Choice accepts them as defaults
            self.project_type = ProjectType.parse(self.project_type).value
        if self.output_format not in OutputFormat.choices():
            raise ConfigError(
                f"Invalid output_format: {self.output_format!r}. "
                f"Available: {', '.join(OutputFormat.choices())}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "EstimateConfig":
        data = {k.replace("-", "_"): v for k, v in (data or {}).items()}
        unknown = sorted(set(data) - set(cls.__dataclass_fields__))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        try:
            return cls(**data)
        except (AttributeError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid config: {e}")

    @classmethod
    def from_yaml(cls, path: str) -> "EstimateConfig":
        """Load config from YAML file.

        The settings may sit at the top level or under an ``estimate:`` key.
        """
        import yaml

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not load config {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must be a mapping")

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data.get("estimate", data))

    def to_dict(self) -> dict:
        return asdict(self)

    def default_map(self) -> dict:
        """Settings as click defaults, omitting unset optional values."""
        return {k: v for k, v in self.to_dict().items() if v is not None}
