from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from pasetomint.exceptions import InvalidDurationError, InvalidTimestampError

UNIT_DURATIONS: dict[str, timedelta] = {
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
    "d": timedelta(days=1),
}

_AMOUNT = re.compile(r"[+-]?[0-9]+")
_RFC3339 = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"[Tt](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_duration(expression: str) -> timedelta:
    """
    Parse a signed relative offset such as ``2h``, ``-30m`` or ``5d``.

    The last character selects the unit and everything before it (after an
    optional leading ``-``) must be an integer amount.
    """
    unit = expression[-1:]
    if unit not in UNIT_DURATIONS:
        raise InvalidDurationError(expression)

    body = expression[:-1]
    sign = 1
    if body.startswith("-"):
        sign, body = -1, body[1:]

    if not _AMOUNT.fullmatch(body):
        raise InvalidDurationError(expression)

    try:
        return UNIT_DURATIONS[unit] * (int(body) * sign)
    except OverflowError as error:
        raise InvalidDurationError(expression) from error


def parse_timestamp(expression: str) -> datetime:
    """Parse a strict RFC 3339 timestamp and return it as an aware UTC datetime."""
    match = _RFC3339.fullmatch(expression)
    if match is None:
        raise InvalidTimestampError(
            expression, "expected an RFC 3339 timestamp such as 2024-07-23T00:20:32Z"
        )

    fraction = (match["fraction"] or "")[:6].ljust(6, "0")
    # datetime has no leap seconds; :60 is held at :59.
    second = 59 if match["second"] == "60" else int(match["second"])
    try:
        offset = match["offset"]
        if offset in ("Z", "z"):
            tzinfo = timezone.utc
        else:
            hours, minutes = int(offset[1:3]), int(offset[4:6])
            if minutes > 59:
                raise ValueError("UTC offset minutes must be in 0..59")
            delta = timedelta(hours=hours, minutes=minutes)
            tzinfo = timezone(-delta if offset[0] == "-" else delta)

        instant = datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            second,
            int(fraction),
            tzinfo=tzinfo,
        )
        return instant.astimezone(timezone.utc)
    except (ValueError, OverflowError) as error:
        raise InvalidTimestampError(expression, str(error)) from error


def parse_time(expression: str, now: datetime) -> datetime:
    """
    Resolve an absolute or relative time expression into a UTC instant.

    Expressions ending in ``s``, ``m``, ``h`` or ``d`` are offsets from
    ``now``; anything else must be an RFC 3339 timestamp. A leading ``-``
    can only start a negative offset, so it is parsed as one too.
    ``now`` must be timezone aware.
    """
    if expression.endswith(tuple(UNIT_DURATIONS)) or expression.startswith("-"):
        offset = parse_duration(expression)
        try:
            return (now + offset).astimezone(timezone.utc)
        except OverflowError as error:
            raise InvalidDurationError(expression) from error
    return parse_timestamp(expression)


def format_instant(instant: datetime) -> str:
    """Serialize an instant as RFC 3339 in UTC at second precision."""
    return instant.astimezone(timezone.utc).isoformat(timespec="seconds")
