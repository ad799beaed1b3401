"""Aggregation policies over many raw show strings.

`parse_all` is all-or-nothing: one malformed record fails the whole batch.
`parse_all_lenient` is the alternative that drops failing records and keeps
the rest.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging

from broadcast_periods.core.types import (
    Failure,
    FailureMode,
    Outcome,
    ShowRecord,
    Success,
)
from broadcast_periods.extraction.assembler import parse_record

log = logging.getLogger(__name__)

type ShowBatch = tuple[ShowRecord, ...]


def combine(acc: Outcome[ShowBatch], nxt: Outcome[ShowRecord]) -> Outcome[ShowBatch]:
    """Append `nxt` to the accumulated batch, or keep the earliest failure.

    Once the accumulator has failed it is returned unchanged; it never
    recovers.
    """
    if isinstance(acc, Failure):
        return acc
    if isinstance(nxt, Failure):
        return nxt
    return Success((*acc.value, nxt.value))


def parse_all(
    raws: Iterable[str], *, mode: FailureMode = "diagnostic"
) -> Outcome[ShowBatch]:
    """Parse every raw string, succeeding only if all of them parse.

    Records are kept in input order. The fold stops at the first failure, so
    strings after it are never parsed.

    Args:
        raws: Raw show strings.
        mode: Failure mode forwarded to `parse_record`.

    Returns:
        ``Success(tuple_of_records)`` or the first record's `Failure`.
    """
    acc: Outcome[ShowBatch] = Success(())
    for index, raw in enumerate(raws):
        acc = combine(acc, parse_record(raw, mode=mode))
        if isinstance(acc, Failure):
            log.debug("Batch rejected at item %d: %r", index, raw)
            break
    return acc


def parse_all_lenient(raws: Iterable[str]) -> ShowBatch:
    """Parse every raw string and keep only the ones that succeed.

    Failures are dropped whatever their diagnostic, so there is no failure
    mode to choose here.
    """
    shows: list[ShowRecord] = []
    skipped = 0
    for raw in raws:
        outcome = parse_record(raw)
        if isinstance(outcome, Success):
            shows.append(outcome.value)
        else:
            skipped += 1
    if skipped:
        log.debug("Skipped %d unparseable show(s)", skipped)
    return tuple(shows)
