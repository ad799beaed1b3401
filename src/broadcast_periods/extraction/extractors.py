"""Field extractors for raw show strings.

Each extractor looks at the first occurrence of `(`, `)` and `-` in a raw
string and slices out one field. They are independent of each other and
report problems through `Failure(ExtractionError(...))`, never by raising.

All extractors apply the same delimiter rule: the closing delimiter must sit
at least two characters after the opening one, so the slice between them is
never empty.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from broadcast_periods.core.exceptions import ExtractionError
from broadcast_periods.core.types import Failure, Outcome, Success

NOT_FOUND = -1

_YEAR_PATTERN = re.compile(r"[0-9]+")
_TITLE_TRAILING = " \t\r\n,;:"


class Delimiters(NamedTuple):
    """Positions of the first `(`, `)` and `-` in a raw string, or -1."""

    bracket_open: int
    bracket_close: int
    dash: int

    @classmethod
    def scan(cls, raw: str) -> Delimiters:
        return cls(raw.find("("), raw.find(")"), raw.find("-"))


def _encloses(start: int, stop: int) -> bool:
    """True when both positions exist and leave a non-empty slice between them."""
    return start != NOT_FOUND and stop > start + 1


def _parse_year(raw: str, text: str, field: str) -> Outcome[int]:
    candidate = text.strip()
    if not _YEAR_PATTERN.fullmatch(candidate):
        return Failure(
            ExtractionError(
                field, raw, f"Cannot parse {field} {text!r} as a year from: {raw}"
            )
        )
    return Success(int(candidate))


def extract_title(raw: str) -> Outcome[str]:
    """Extract the text before the opening bracket.

    Args:
        raw: A raw show string such as ``"Friends (1994-2004)"``.

    Returns:
        ``Success("Friends")`` or a failure when there is no `(` after at
        least one character, or nothing but whitespace/punctuation before it.
    """
    bracket_open = Delimiters.scan(raw).bracket_open
    if bracket_open > 0:
        title = raw[:bracket_open].rstrip(_TITLE_TRAILING).lstrip()
        if title:
            return Success(title)
    return Failure(ExtractionError("title", raw))


def extract_start_year(raw: str) -> Outcome[int]:
    """Extract the year between `(` and `-`."""
    found = Delimiters.scan(raw)
    if not _encloses(found.bracket_open, found.dash):
        return Failure(ExtractionError("year start", raw))
    return _parse_year(raw, raw[found.bracket_open + 1 : found.dash], "year start")


def extract_end_year(raw: str) -> Outcome[int]:
    """Extract the year between `-` and `)`."""
    found = Delimiters.scan(raw)
    if not _encloses(found.dash, found.bracket_close):
        return Failure(ExtractionError("year end", raw))
    return _parse_year(raw, raw[found.dash + 1 : found.bracket_close], "year end")


def extract_single_year(raw: str) -> Outcome[int]:
    """Extract a lone bracketed year, as in ``"Game of Thrones (2011)"``.

    Fails whenever a `-` appears anywhere in the string.
    """
    found = Delimiters.scan(raw)
    if found.dash != NOT_FOUND or not _encloses(
        found.bracket_open, found.bracket_close
    ):
        return Failure(ExtractionError("single year", raw))
    return _parse_year(
        raw, raw[found.bracket_open + 1 : found.bracket_close], "single year"
    )
