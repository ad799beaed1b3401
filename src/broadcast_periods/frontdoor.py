"""Convenience entry points that compose parsing, aggregation and ordering.

`ShowParser` applies a FrozenConfig: which failure mode to parse under,
which batch policy to aggregate with, and whether to sort the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from broadcast_periods.aggregation import ShowBatch, parse_all, parse_all_lenient
from broadcast_periods.config import FrozenConfig, resolve_config
from broadcast_periods.core.exceptions import AggregateParseError
from broadcast_periods.core.types import Failure, Outcome, Success, map_outcome
from broadcast_periods.ordering import sort_by_duration_descending
from broadcast_periods.telemetry import ParserTelemetry, TelemetryContext

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)


class ShowParser:
    """Parses batches of raw show strings under a fixed configuration."""

    def __init__(
        self,
        config: FrozenConfig | None = None,
        *,
        telemetry: ParserTelemetry | None = None,
    ):
        """Initialize the parser.

        Args:
            config: Frozen configuration; library defaults when omitted.
            telemetry: Optional telemetry sink (disabled by default).
        """
        self.config = config if config is not None else FrozenConfig()
        self._ctx = telemetry if telemetry is not None else TelemetryContext()

    def parse(self, raws: Iterable[str]) -> Outcome[ShowBatch]:
        """Parse a batch of raw strings.

        Under the ``all_or_nothing`` policy any malformed string fails the
        batch. Under ``lenient`` the result is always a success holding the
        strings that did parse. Successful batches are sorted by duration,
        longest first, when ``sort_by_duration`` is enabled.
        """
        raws = tuple(raws)

        with self._ctx.timed("parse.aggregate", policy=self.config.aggregation):
            if self.config.aggregation == "lenient":
                shows = parse_all_lenient(raws)
                self._ctx.count("parse.skipped", len(raws) - len(shows))
                outcome: Outcome[ShowBatch] = Success(shows)
            else:
                outcome = parse_all(raws, mode=self.config.failure_mode)

        if isinstance(outcome, Failure):
            self._ctx.count("parse.failures")
            log.debug("Batch of %d show(s) failed: %s", len(raws), outcome.error)
            return outcome

        if self.config.sort_by_duration:
            with self._ctx.timed("parse.sort"):
                outcome = map_outcome(outcome, sort_by_duration_descending)
        return outcome

    def parse_or_raise(self, raws: Iterable[str]) -> ShowBatch:
        """Like `parse`, but raise `AggregateParseError` on failure."""
        outcome = self.parse(raws)
        if isinstance(outcome, Failure):
            detail = outcome.error if outcome.error is not None else "unparseable show"
            raise AggregateParseError(f"Could not parse shows: {detail}", outcome.error)
        return outcome.value


def create_parser(config: FrozenConfig | None = None) -> ShowParser:
    """Create a parser, resolving ambient configuration when none is given."""
    final_config = config if config is not None else resolve_config()
    return ShowParser(final_config)


def parse_shows(
    raws: Iterable[str], *, config: FrozenConfig | None = None
) -> Outcome[ShowBatch]:
    """Parse a batch of raw show strings with resolved configuration.

    Example:
        ```python
        outcome = parse_shows(["The Office (2005-2013)", "Friends (1994-2004)"])
        ```
    """
    return create_parser(config).parse(raws)
