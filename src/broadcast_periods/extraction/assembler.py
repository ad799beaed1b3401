"""Assemble a `ShowRecord` from the individual field extractors."""

from __future__ import annotations

import logging

from broadcast_periods.core.types import (
    FailureMode,
    Outcome,
    ShowRecord,
    Success,
    and_then,
    first_success,
    or_else,
    silence,
)

from .extractors import (
    extract_end_year,
    extract_single_year,
    extract_start_year,
    extract_title,
)

log = logging.getLogger(__name__)


def resolve_start(raw: str) -> Outcome[int]:
    """Start year of a range, falling back to a lone bracketed year."""
    return or_else(extract_start_year(raw), lambda: extract_single_year(raw))


def resolve_end(raw: str) -> Outcome[int]:
    """End year of a range, falling back to a lone bracketed year."""
    return or_else(extract_end_year(raw), lambda: extract_single_year(raw))


def extract_single_year_or_year_end(raw: str) -> Outcome[int]:
    """A lone bracketed year, otherwise the end year of a range."""
    return or_else(extract_single_year(raw), lambda: extract_end_year(raw))


def extract_any_year(raw: str) -> Outcome[int]:
    """The first year found, trying start, end, then a lone year."""
    return first_success(
        lambda: extract_start_year(raw),
        lambda: extract_end_year(raw),
        lambda: extract_single_year(raw),
    )


def extract_single_year_if_name_exists(raw: str) -> Outcome[int]:
    """A lone year, but only for strings that also carry a title."""
    return and_then(extract_title(raw), lambda _title: extract_single_year(raw))


def extract_any_year_if_name_exists(raw: str) -> Outcome[int]:
    """Like `extract_any_year`, gated on a title being present."""
    return and_then(extract_title(raw), lambda _title: extract_any_year(raw))


def parse_record(raw: str, *, mode: FailureMode = "diagnostic") -> Outcome[ShowRecord]:
    """Parse one raw show string into a `ShowRecord`.

    Title, start and end are resolved in that order. The first field that
    fails stops the parse and its failure is returned; later fields are not
    attempted.

    Args:
        raw: A string shaped like ``"Title (start-end)"`` or ``"Title (year)"``.
        mode: ``"diagnostic"`` keeps the `ExtractionError` on failure,
            ``"silent"`` replaces it with None.

    Returns:
        ``Success(ShowRecord)`` or a `Failure`.
    """
    outcome: Outcome[ShowRecord] = and_then(
        extract_title(raw),
        lambda title: and_then(
            resolve_start(raw),
            lambda start: and_then(
                resolve_end(raw),
                lambda end: Success(ShowRecord(title=title, start=start, end=end)),
            ),
        ),
    )
    if not isinstance(outcome, Success):
        log.debug("Unparseable show %r: %s", raw, outcome.error)
        if mode == "silent":
            return silence(outcome)
    return outcome
