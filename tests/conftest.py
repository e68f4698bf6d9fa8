"""Pytest configuration and shared fixtures."""

import pytest

from bookings.domain import Enrollment
from bookings.services import BookingService
from tests.fakes import (
    FakeBookingStore,
    FakeEnrollmentStore,
    FakeRoomStore,
    FakeTicketStore,
    make_room,
    make_ticket,
)

USER_ID = 7


@pytest.fixture
def enrollments() -> FakeEnrollmentStore:
    return FakeEnrollmentStore(Enrollment(id=1, user_id=USER_ID, name="Ada Lovelace"))


@pytest.fixture
def tickets() -> FakeTicketStore:
    return FakeTicketStore(make_ticket(enrollment_id=1))


@pytest.fixture
def rooms() -> FakeRoomStore:
    return FakeRoomStore(make_room(room_id=1, capacity=3), make_room(room_id=2, capacity=1))


@pytest.fixture
def bookings(rooms: FakeRoomStore) -> FakeBookingStore:
    return FakeBookingStore(rooms)


@pytest.fixture
def service(
    enrollments: FakeEnrollmentStore,
    tickets: FakeTicketStore,
    rooms: FakeRoomStore,
    bookings: FakeBookingStore,
) -> BookingService:
    return BookingService(
        enrollments=enrollments,
        tickets=tickets,
        rooms=rooms,
        bookings=bookings,
    )
