from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class RoomBase(BaseModel):
    name: str = Field(min_length=1)
    capacity: int = Field(gt=0)

class RoomCreate(RoomBase):
    pass

class RoomUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    capacity: Optional[int] = Field(default=None, gt=0)

class RoomResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    capacity: int

class MessageResponse(BaseModel):
    message: str
