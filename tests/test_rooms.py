import pytest
from fastapi import status
from roombooker.models.booking import Booking
from roombooker.models.room import Room
from tests.conf_tests import client, clear_db, test_db


@pytest.fixture
def test_room(test_db): # pylint: disable=redefined-outer-name
    room = Room(name="Conference Room A", capacity=10)
    test_db.add(room)
    test_db.commit()
    test_db.refresh(room)
    return room


# Tests
def test_root_reports_running():
    response = client.get("/")
    assert response.status_code == status.HTTP_200_OK
    assert response.text == "API is running..."


def test_create_room_success():
    room_data = {"name": "Meeting Room", "capacity": 5}
    response = client.post("/api/rooms", json=room_data)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["name"] == "Meeting Room"
    assert data["capacity"] == 5
    assert isinstance(data["id"], int)


@pytest.mark.parametrize(
    "room_data",
    [
        {"name": "Meeting Room"},
        {"name": "Meeting Room", "capacity": 0},
        {"name": "Meeting Room", "capacity": -3},
        {"name": "", "capacity": 3},
        {"capacity": 3},
    ],
)
def test_create_room_invalid(room_data):
    response = client.post("/api/rooms", json=room_data)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    body = response.json()
    assert body["code"] == "INVALID_REQUEST"
    assert body["message"]


def test_get_rooms_empty():
    response = client.get("/api/rooms")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


# pylint: disable-next=redefined-outer-name
def test_get_rooms_with_data(test_room):
    response = client.get("/api/rooms")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert len(data) == 1
    assert data[0]["id"] == test_room.id
    assert data[0]["name"] == test_room.name


# pylint: disable-next=redefined-outer-name
def test_get_room_success(test_room):
    response = client.get(f"/api/rooms/{test_room.id}")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == test_room.id
    assert data["capacity"] == test_room.capacity


def test_get_room_not_found():
    response = client.get("/api/rooms/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Room not found", "code": "ROOM_NOT_FOUND"}


# pylint: disable-next=redefined-outer-name
def test_update_room_success(test_room):
    update_data = {"name": "Updated Conference Room", "capacity": 15}
    response = client.put(f"/api/rooms/{test_room.id}", json=update_data)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["name"] == update_data["name"]
    assert data["capacity"] == update_data["capacity"]


# pylint: disable-next=redefined-outer-name
def test_partial_update_room(test_room):
    response = client.put(f"/api/rooms/{test_room.id}", json={"capacity": 20})
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["capacity"] == 20
    assert data["name"] == test_room.name


# pylint: disable-next=redefined-outer-name
def test_update_room_rejects_zero_capacity(test_room):
    response = client.put(f"/api/rooms/{test_room.id}", json={"capacity": 0})
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_update_room_not_found():
    response = client.put("/api/rooms/9999", json={"name": "Non-existent Room"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_delete_room_success(test_room, test_db):
    room_id = test_room.id
    response = client.delete(f"/api/rooms/{room_id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Room deleted"}
    test_db.expire_all()
    deleted_room = test_db.query(Room).filter(Room.id == room_id).first()
    assert deleted_room is None


def test_delete_room_missing_is_noop():
    response = client.delete("/api/rooms/9999")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Room deleted"}


# pylint: disable-next=redefined-outer-name
def test_delete_room_keeps_its_bookings(test_room, test_db):
    booking = Booking(
        room_id=test_room.id, date="2025-05-04", start_time="09:00", end_time="10:00"
    )
    test_db.add(booking)
    test_db.commit()
    test_db.refresh(booking)

    response = client.delete(f"/api/rooms/{test_room.id}")
    assert response.status_code == status.HTTP_200_OK

    listed = client.get("/api/bookings").json()
    assert len(listed) == 1
    assert listed[0]["roomId"] == test_room.id
    assert listed[0]["room"] is None

    response = client.delete(f"/api/bookings/{booking.id}")
    assert response.status_code == status.HTTP_200_OK
    assert client.get("/api/bookings").json() == []
