from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from roombooker.db import get_db
from roombooker.schemas.room import MessageResponse, RoomCreate, RoomUpdate, RoomResponse
from roombooker.stores.rooms import RoomStore


router = APIRouter(
    prefix="/rooms",
    tags=["rooms"],
)


def get_room_store(db: Session = Depends(get_db)) -> RoomStore:
    return RoomStore(db)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(room: RoomCreate, store: RoomStore = Depends(get_room_store)):
    """
    Create a new meeting room.
    """
    return store.create(room)


@router.get("", response_model=List[RoomResponse])
def get_rooms(store: RoomStore = Depends(get_room_store)):
    """
    Retrieve a list of all meeting rooms.
    """
    return store.list()


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, store: RoomStore = Depends(get_room_store)):
    """
    Retrieve a specific meeting room by ID.
    """
    return store.get(room_id)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, room_update: RoomUpdate, store: RoomStore = Depends(get_room_store)):
    """
    Update a meeting room's name and/or capacity.
    """
    return store.update(room_id, room_update)


@router.delete("/{room_id}", response_model=MessageResponse)
def delete_room(room_id: int, store: RoomStore = Depends(get_room_store)):
    """
    Delete a meeting room.
    Bookings that reference it are kept and keep pointing at the old id.
    """
    store.delete(room_id)
    return {"message": "Room deleted"}
