from ._custom_claim import parse_custom_claim
from ._time_expression import (
    UNIT_DURATIONS,
    format_instant,
    parse_duration,
    parse_time,
    parse_timestamp,
)

__all__ = [
    "UNIT_DURATIONS",
    "format_instant",
    "parse_custom_claim",
    "parse_duration",
    "parse_time",
    "parse_timestamp",
]
