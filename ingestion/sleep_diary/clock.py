import logging
import re

log = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

_CLOCK = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)


class ClockParseError(ValueError):
    pass


def parse_clock(value: str) -> int:
    """Parse an ``HH:MM`` string into minutes since midnight.

    Raises ClockParseError when the string is not two colon-separated numbers
    or the hour/minute falls outside 0-23 / 0-59.
    """
    if value is None:
        raise ClockParseError("Missing clock time")
    if not isinstance(value, str):
        raise ClockParseError(f"Clock time must be a string, got {type(value).__name__}: {value!r}")
    m = _CLOCK.fullmatch(value.strip())
    if not m:
        raise ClockParseError(f"Invalid clock time: {value!r}")
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise ClockParseError(f"Clock time out of range: {value!r}")
    return hour * 60 + minute


def clock_to_minutes(value: str) -> int:
    """Lenient parse_clock: unparseable input becomes 0 (same as "00:00")."""
    try:
        return parse_clock(value)
    except ClockParseError as e:
        log.warning("%s, treating as 00:00", e)
        return 0


def window_minutes(bed: int, wake: int) -> int:
    """Minutes from bed to wake; a wake time at or before bed is on the next day."""
    for name, v in (("bed", bed), ("wake", wake)):
        if not 0 <= v < MINUTES_PER_DAY:
            raise ValueError(f"{name} minutes out of range: {v}")
    if wake <= bed:
        wake += MINUTES_PER_DAY
    return wake - bed
