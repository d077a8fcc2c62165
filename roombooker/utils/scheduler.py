from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
from roombooker.errors import REJECTION_MESSAGES, RejectionReason
from roombooker.utils.validation_helpers import (
    InvalidTimeFormatError,
    check_time_window,
    time_to_minutes,
)


@dataclass(frozen=True)
class BookingCandidate:
    room_id: int
    date: str
    start_time: str
    end_time: str


@dataclass(frozen=True)
class BookingDecision:
    reason: Optional[RejectionReason] = None
    overlapping: Tuple = ()

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> Optional[str]:
        return REJECTION_MESSAGES.get(self.reason)


def intervals_overlap(start: int, end: int, other_start: int, other_end: int) -> bool:
    """Half-open test: [start, end) and [other_start, other_end) share a minute."""
    return not (end <= other_start or start >= other_end)


def find_overlapping_bookings(start: int, end: int, existing: Iterable) -> List:
    """
    Return the bookings from `existing` whose interval overlaps [start, end).
    A booking ending exactly when the window starts does not overlap.
    """
    return [
        booking
        for booking in existing
        if intervals_overlap(
            start,
            end,
            time_to_minutes(booking.start_time),
            time_to_minutes(booking.end_time),
        )
    ]


def check_candidate_times(candidate: BookingCandidate) -> Optional[RejectionReason]:
    """Format, ordering, business-hours and duration rules; needs no stored data."""
    try:
        start = time_to_minutes(candidate.start_time)
        end = time_to_minutes(candidate.end_time)
    except InvalidTimeFormatError:
        return RejectionReason.INVALID_TIME_FORMAT
    return check_time_window(start, end)


def validate_booking(
    candidate: BookingCandidate,
    room,
    existing: Iterable,
    exclude_id=None,
) -> BookingDecision:
    """
    Decide whether a booking may be written.

    - **candidate**: room id, date and HH:MM start/end of the proposed booking.
    - **room**: the resolved room (anything with `capacity`), or None.
    - **existing**: stored bookings; only those on the candidate's room and
      date are counted.
    - **exclude_id**: id of the booking being updated, so it never collides
      with itself.

    The first failing rule wins.
    """
    reason = check_candidate_times(candidate)
    if reason is not None:
        return BookingDecision(reason)
    start = time_to_minutes(candidate.start_time)
    end = time_to_minutes(candidate.end_time)

    if room is None:
        return BookingDecision(RejectionReason.ROOM_NOT_FOUND)

    same_slot = [
        booking
        for booking in existing
        if booking.room_id == candidate.room_id
        and booking.date == candidate.date
        and (exclude_id is None or booking.id != exclude_id)
    ]
    overlapping = find_overlapping_bookings(start, end, same_slot)
    if len(overlapping) >= room.capacity:
        return BookingDecision(RejectionReason.CAPACITY_EXCEEDED, tuple(overlapping))

    return BookingDecision(overlapping=tuple(overlapping))
