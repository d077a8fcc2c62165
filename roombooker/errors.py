from enum import Enum
from fastapi import status


class RejectionReason(str, Enum):
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    TIME_ORDER_INVALID = "TIME_ORDER_INVALID"
    OUTSIDE_BUSINESS_HOURS = "OUTSIDE_BUSINESS_HOURS"
    DURATION_OUT_OF_RANGE = "DURATION_OUT_OF_RANGE"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"


REJECTION_MESSAGES = {
    RejectionReason.INVALID_TIME_FORMAT: "Time must be in HH:MM format",
    RejectionReason.TIME_ORDER_INVALID: "Start time must be before end time",
    RejectionReason.OUTSIDE_BUSINESS_HOURS: "Booking must be within business hours (8:00 - 18:00)",
    RejectionReason.DURATION_OUT_OF_RANGE: "Booking duration must be between 30 minutes and 4 hours",
    RejectionReason.ROOM_NOT_FOUND: "Room not found",
    RejectionReason.CAPACITY_EXCEEDED: "Room capacity full for this time slot",
}


class RoomBookingError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "SERVER_ERROR"
    message = "Server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(RoomBookingError):
    status_code = status.HTTP_404_NOT_FOUND


class RoomNotFoundError(NotFoundError):
    code = RejectionReason.ROOM_NOT_FOUND.value
    message = REJECTION_MESSAGES[RejectionReason.ROOM_NOT_FOUND]


class BookingNotFoundError(NotFoundError):
    code = "BOOKING_NOT_FOUND"
    message = "Booking not found"


class BookingRejectedError(RoomBookingError):
    """Raised when a booking fails one of the write-time rules."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, decision):
        self.decision = decision
        self.code = decision.reason.value
        super().__init__(decision.message)
