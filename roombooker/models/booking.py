from sqlalchemy import Column, Index, Integer, String
from sqlalchemy.orm import relationship
from roombooker.db import Base


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (Index("ix_bookings_room_date", "room_id", "date"),)

    id = Column(Integer, primary_key=True, index=True)
    # No foreign key: deleting a room leaves its bookings in place.
    room_id = Column(Integer, nullable=False)
    date = Column(String, nullable=False)
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)

    room = relationship(
        "Room",
        primaryjoin="foreign(Booking.room_id) == Room.id",
        viewonly=True,
    )
