from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from roombooker.schemas.room import RoomResponse
from roombooker.utils.scheduler import BookingCandidate


class BookingCreate(BaseModel):
    """Request body; times stay as HH:MM strings and are checked by the scheduler."""

    model_config = ConfigDict(populate_by_name=True)

    room_id: int = Field(alias="room")
    date: str = Field(min_length=1)
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    title: Optional[str] = None
    description: Optional[str] = None

    def to_candidate(self) -> BookingCandidate:
        return BookingCandidate(
            room_id=self.room_id,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class BookingUpdate(BookingCreate):
    pass


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    room_id: int = Field(serialization_alias="room")
    date: str
    start_time: str = Field(serialization_alias="startTime")
    end_time: str = Field(serialization_alias="endTime")
    title: Optional[str] = None
    description: Optional[str] = None


class BookingWithRoomResponse(BookingResponse):
    room_id: int = Field(serialization_alias="roomId")
    room: Optional[RoomResponse] = None
