"""Ordering of parsed shows by how long they ran."""

from __future__ import annotations

from collections.abc import Iterable

from broadcast_periods.core.types import ShowRecord


def duration(show: ShowRecord) -> int:
    """Derived sort key: ``end - start``."""
    return show.end - show.start


def sort_by_duration_ascending(shows: Iterable[ShowRecord]) -> tuple[ShowRecord, ...]:
    """Shortest-running shows first; ties keep their input order."""
    return tuple(sorted(shows, key=duration))


def sort_by_duration_descending(
    shows: Iterable[ShowRecord],
) -> tuple[ShowRecord, ...]:
    """Longest-running shows first.

    Shows with equal duration keep their relative input order. This differs
    from sorting ascending and then reversing the result, which would also
    reverse the order of ties. The input is never mutated; a new tuple is
    returned.
    """
    return tuple(sorted(shows, key=duration, reverse=True))
