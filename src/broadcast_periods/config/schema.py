"""Parser settings and the frozen configuration handed to `ShowParser`.

`ParserSettings` is the pydantic-settings schema: it reads
BROADCAST_PERIODS_* environment variables, lets keyword arguments win over
them, and normalizes spellings such as ``"All-Or-Nothing"``. `FrozenConfig`
is the validated result.
"""

from dataclasses import dataclass
from typing import Any, Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from broadcast_periods.core.exceptions import ConfigurationError
from broadcast_periods.core.types import FailureMode

AggregationPolicy = Literal["all_or_nothing", "lenient"]


class ParserSettings(BaseSettings):
    """Settings schema; keyword arguments > environment > defaults."""

    model_config = SettingsConfigDict(
        env_prefix="BROADCAST_PERIODS_",
        case_sensitive=False,
        extra="ignore",
    )

    failure_mode: FailureMode = Field(
        default="diagnostic",
        description="Whether failures carry an ExtractionError or nothing",
    )
    aggregation: AggregationPolicy = Field(
        default="all_or_nothing",
        description="Fail the batch on any bad record, or skip bad records",
    )
    sort_by_duration: bool = Field(
        default=False,
        description="Sort successful batches by duration, longest first",
    )

    @field_validator("failure_mode", "aggregation", mode="before")
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower().replace("-", "_")
        return v

    def freeze(self) -> "FrozenConfig":
        return FrozenConfig(
            failure_mode=self.failure_mode,
            aggregation=self.aggregation,
            sort_by_duration=self.sort_by_duration,
        )


@dataclass(frozen=True)
class FrozenConfig:
    """Immutable parser configuration.

    Values are checked on construction, so a misspelt policy can never
    silently fall through to the default behaviour.
    """

    failure_mode: FailureMode = "diagnostic"
    aggregation: AggregationPolicy = "all_or_nothing"
    sort_by_duration: bool = False

    def __post_init__(self) -> None:
        if self.failure_mode not in get_args(FailureMode):
            raise ConfigurationError(f"failure_mode: unknown mode {self.failure_mode!r}")
        if self.aggregation not in get_args(AggregationPolicy):
            raise ConfigurationError(f"aggregation: unknown policy {self.aggregation!r}")
        if not isinstance(self.sort_by_duration, bool):
            raise ConfigurationError("sort_by_duration: must be bool")
