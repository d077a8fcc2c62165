import re
from typing import Optional
from roombooker.errors import RejectionReason

BUSINESS_DAY_START = 8 * 60
BUSINESS_DAY_END = 18 * 60
MIN_DURATION_MINUTES = 30
MAX_DURATION_MINUTES = 4 * 60

TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


class InvalidTimeFormatError(ValueError):
    pass


def time_to_minutes(value: str) -> int:
    """
    Convert an "HH:MM" string to minutes since midnight.

    Only the shape is checked here, so "25:99" converts to 1599; range checks
    belong to check_time_window.
    """
    match = TIME_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeFormatError(f"Invalid time value: {value!r}, expected HH:MM")
    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes)


def check_time_window(start_minutes: int, end_minutes: int) -> Optional[RejectionReason]:
    if start_minutes >= end_minutes:
        return RejectionReason.TIME_ORDER_INVALID

    if start_minutes < BUSINESS_DAY_START or end_minutes > BUSINESS_DAY_END:
        return RejectionReason.OUTSIDE_BUSINESS_HOURS

    duration = end_minutes - start_minutes
    if duration < MIN_DURATION_MINUTES or duration > MAX_DURATION_MINUTES:
        return RejectionReason.DURATION_OUT_OF_RANGE

    return None
