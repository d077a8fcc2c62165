from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session
from roombooker.db import get_db
from roombooker.schemas.booking import (
    BookingCreate,
    BookingUpdate,
    BookingResponse,
    BookingWithRoomResponse,
)
from roombooker.schemas.room import MessageResponse
from roombooker.stores.bookings import BookingStore


router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


def get_booking_store(request: Request, db: Session = Depends(get_db)) -> BookingStore:
    return BookingStore(db, request.app.state.slot_locks)


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Book a room for a time slot within business hours, subject to room capacity."
)
def create_booking(
    booking: BookingCreate,
    store: BookingStore = Depends(get_booking_store),
):
    """
    Create a new booking.

    - **room**: ID of the room to book.
    - **date**: Day of the booking (e.g., 2025-05-04).
    - **startTime** / **endTime**: HH:MM, between 08:00 and 18:00, 30 minutes to 4 hours apart.
    - **title**, **description**: Optional free text.

    Rejected with 400 when the slot already holds as many overlapping bookings
    as the room's capacity, and with 404 when the room does not exist.
    """
    return store.create(booking)

@router.get(
    "",
    response_model=List[BookingWithRoomResponse],
    summary="List bookings",
    description="Retrieve bookings, optionally filtered by room and date, with the room populated."
)
def get_bookings(
    room_id: Optional[int] = Query(default=None, alias="roomId"),
    date: Optional[str] = None,
    store: BookingStore = Depends(get_booking_store),
):
    """
    Retrieve bookings.

    - **roomId**: Only bookings for this room.
    - **date**: Only bookings on this date.

    The `room` field is null for bookings whose room has been deleted.
    """
    return store.list(room_id=room_id, date=date)

@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
    description="Retrieve a specific booking by its ID."
)
def get_booking(
    booking_id: int,
    store: BookingStore = Depends(get_booking_store),
):
    return store.get(booking_id)

@router.put(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Update a booking",
    description="Replace a booking's details. The same rules as for creation apply."
)
def update_booking(
    booking_id: int,
    booking_update: BookingUpdate,
    store: BookingStore = Depends(get_booking_store),
):
    """
    Update a booking.

    The booking being updated is not counted against the room's capacity, so
    moving it within its own slot always passes the capacity check.
    """
    return store.update(booking_id, booking_update)

@router.delete(
    "/{booking_id}",
    response_model=MessageResponse,
    summary="Delete a booking",
)
def delete_booking(
    booking_id: int,
    store: BookingStore = Depends(get_booking_store),
):
    store.delete(booking_id)
    return {"message": "Booking deleted"}
