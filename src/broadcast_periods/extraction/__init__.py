"""Field extraction and record assembly for raw show strings."""

from .assembler import (
    extract_any_year,
    extract_any_year_if_name_exists,
    extract_single_year_if_name_exists,
    extract_single_year_or_year_end,
    parse_record,
    resolve_end,
    resolve_start,
)
from .extractors import (
    extract_end_year,
    extract_single_year,
    extract_start_year,
    extract_title,
)

__all__ = [
    "extract_any_year",
    "extract_any_year_if_name_exists",
    "extract_end_year",
    "extract_single_year",
    "extract_single_year_if_name_exists",
    "extract_single_year_or_year_end",
    "extract_start_year",
    "extract_title",
    "parse_record",
    "resolve_end",
    "resolve_start",
]
