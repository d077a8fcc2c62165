import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from roombooker.errors import (
    BookingNotFoundError,
    BookingRejectedError,
    RejectionReason,
    RoomNotFoundError,
)
from roombooker.models.booking import Booking
from roombooker.models.room import Room
from roombooker.schemas.booking import BookingCreate, BookingUpdate
from roombooker.utils.locks import SlotLocks
from roombooker.utils.scheduler import (
    BookingCandidate,
    BookingDecision,
    check_candidate_times,
    validate_booking,
)

logger = logging.getLogger(__name__)


class BookingStore:
    """
    CRUD over bookings.

    Creates and updates run the full booking rules while holding the lock for
    the target room and date, so two writers cannot both pass the capacity
    check on the same slot.
    """

    def __init__(self, db: Session, locks: SlotLocks) -> None:
        self.db = db
        self.locks = locks

    def create(self, data: BookingCreate) -> Booking:
        candidate = data.to_candidate()
        self._check_times(candidate)
        with self.locks.hold(candidate.room_id, candidate.date):
            self._check(candidate)
            db_booking = Booking(**data.model_dump())
            self.db.add(db_booking)
            self.db.commit()
        self.db.refresh(db_booking)
        logger.debug(
            f"Created booking: {db_booking.id}, room_id: {db_booking.room_id}, "
            f"{db_booking.date} {db_booking.start_time}-{db_booking.end_time}"
        )
        return db_booking

    def get(self, booking_id: int) -> Booking:
        booking = self.db.query(Booking).filter(Booking.id == booking_id).first()
        if not booking:
            logger.warning(f"Booking not found: {booking_id}")
            raise BookingNotFoundError()
        return booking

    def list(self, room_id: Optional[int] = None, date: Optional[str] = None) -> List[Booking]:
        query = self.db.query(Booking).options(joinedload(Booking.room))
        if room_id is not None:
            query = query.filter(Booking.room_id == room_id)
        if date:
            query = query.filter(Booking.date == date)
        bookings = query.order_by(Booking.id).all()
        logger.debug(f"Retrieved {len(bookings)} bookings, room_id: {room_id}, date: {date}")
        return bookings

    def update(self, booking_id: int, data: BookingUpdate) -> Booking:
        db_booking = self.get(booking_id)
        candidate = data.to_candidate()
        self._check_times(candidate)
        with self.locks.hold(candidate.room_id, candidate.date):
            self._check(candidate, exclude_id=booking_id)
            for key, value in data.model_dump().items():
                setattr(db_booking, key, value)
            self.db.commit()
        self.db.refresh(db_booking)
        logger.debug(f"Updated booking: {booking_id}")
        return db_booking

    def delete(self, booking_id: int) -> None:
        deleted = self.db.query(Booking).filter(Booking.id == booking_id).delete()
        self.db.commit()
        logger.debug(f"Deleted booking: {booking_id}, rows: {deleted}")

    def _check(self, candidate: BookingCandidate, exclude_id=None) -> BookingDecision:
        room = self.db.query(Room).filter(Room.id == candidate.room_id).first()
        existing = []
        if room is not None:
            existing = (
                self.db.query(Booking)
                .filter(Booking.room_id == candidate.room_id, Booking.date == candidate.date)
                .all()
            )

        decision = validate_booking(candidate, room, existing, exclude_id=exclude_id)
        self._raise_if_rejected(candidate, decision)
        return decision

    def _check_times(self, candidate: BookingCandidate) -> None:
        reason = check_candidate_times(candidate)
        if reason is not None:
            self._raise_if_rejected(candidate, BookingDecision(reason))

    def _raise_if_rejected(self, candidate: BookingCandidate, decision: BookingDecision) -> None:
        if decision.reason is RejectionReason.ROOM_NOT_FOUND:
            logger.warning(f"Room not found: {candidate.room_id}")
            raise RoomNotFoundError()
        if not decision.accepted:
            logger.warning(
                f"Booking rejected ({decision.reason.value}) for room_id: {candidate.room_id}, "
                f"{candidate.date} {candidate.start_time}-{candidate.end_time}"
            )
            raise BookingRejectedError(decision)
