import logging
from typing import List
from sqlalchemy.orm import Session
from roombooker.errors import RoomNotFoundError
from roombooker.models.room import Room
from roombooker.schemas.room import RoomCreate, RoomUpdate

logger = logging.getLogger(__name__)


class RoomStore:
    """CRUD over rooms. Deleting a room never touches bookings that reference it."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, data: RoomCreate) -> Room:
        db_room = Room(**data.model_dump())
        self.db.add(db_room)
        self.db.commit()
        self.db.refresh(db_room)
        logger.debug(f"Created room: {db_room.id}, capacity: {db_room.capacity}")
        return db_room

    def get(self, room_id: int) -> Room:
        room = self.db.query(Room).filter(Room.id == room_id).first()
        if not room:
            logger.warning(f"Room not found: {room_id}")
            raise RoomNotFoundError()
        return room

    def list(self) -> List[Room]:
        return self.db.query(Room).order_by(Room.id).all()

    def update(self, room_id: int, data: RoomUpdate) -> Room:
        db_room = self.get(room_id)

        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        for key, value in update_data.items():
            setattr(db_room, key, value)

        self.db.commit()
        self.db.refresh(db_room)
        logger.debug(f"Updated room: {room_id}, fields: {sorted(update_data)}")
        return db_room

    def delete(self, room_id: int) -> None:
        deleted = self.db.query(Room).filter(Room.id == room_id).delete()
        self.db.commit()
        logger.debug(f"Deleted room: {room_id}, rows: {deleted}")
