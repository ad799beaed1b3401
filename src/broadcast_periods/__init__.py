"""Parse broadcast period strings such as "Friends (1994-2004)" into records."""

import importlib.metadata
import logging

from broadcast_periods.aggregation import combine, parse_all, parse_all_lenient
from broadcast_periods.config import (
    FrozenConfig,
    ParserSettings,
    config_override,
    config_scope,
    resolve_config,
)
from broadcast_periods.core.exceptions import (
    AggregateParseError,
    BroadcastPeriodsError,
    ConfigurationError,
    ExtractionError,
)
from broadcast_periods.core.types import (
    Failure,
    FailureMode,
    Outcome,
    ShowRecord,
    Success,
    and_then,
    first_success,
    fold,
    is_success,
    map_outcome,
    or_else,
    silence,
)
from broadcast_periods.extraction import (
    extract_any_year,
    extract_any_year_if_name_exists,
    extract_end_year,
    extract_single_year,
    extract_single_year_if_name_exists,
    extract_single_year_or_year_end,
    extract_start_year,
    extract_title,
    parse_record,
)
from broadcast_periods.frontdoor import ShowParser, create_parser, parse_shows
from broadcast_periods.ordering import (
    duration,
    sort_by_duration_ascending,
    sort_by_duration_descending,
)
from broadcast_periods.telemetry import (
    InMemoryReporter,
    ParserTelemetry,
    TelemetryContext,
    TelemetryReporter,
)

try:
    __version__ = importlib.metadata.version("broadcast-periods")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Set up a null handler for the library's root logger.
# This prevents 'No handler found' errors if the consuming app has no logging configured.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Outcomes
    "Success",
    "Failure",
    "Outcome",
    "FailureMode",
    "and_then",
    "first_success",
    "fold",
    "is_success",
    "map_outcome",
    "or_else",
    "silence",
    # Records and parsing
    "ShowRecord",
    "extract_title",
    "extract_start_year",
    "extract_end_year",
    "extract_single_year",
    "extract_single_year_or_year_end",
    "extract_any_year",
    "extract_single_year_if_name_exists",
    "extract_any_year_if_name_exists",
    "parse_record",
    "combine",
    "parse_all",
    "parse_all_lenient",
    "duration",
    "sort_by_duration_ascending",
    "sort_by_duration_descending",
    # Front door
    "ShowParser",
    "create_parser",
    "parse_shows",
    # Configuration
    "FrozenConfig",
    "ParserSettings",
    "config_override",
    "config_scope",
    "resolve_config",
    # Telemetry
    "TelemetryContext",
    "TelemetryReporter",
    "ParserTelemetry",
    "InMemoryReporter",
    # Exceptions
    "BroadcastPeriodsError",
    "ExtractionError",
    "AggregateParseError",
    "ConfigurationError",
]
