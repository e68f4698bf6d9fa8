"""Integration tests for the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

from decimal import Decimal

import pytest

from bookings import models
from bookings.domain import Money, TicketStatus
from bookings.services import build_booking_service
from bookings.stores.django_store import (
    DjangoBookingStore,
    DjangoEnrollmentStore,
    DjangoRoomStore,
    DjangoTicketStore,
)

pytestmark = pytest.mark.django_db(transaction=True)


@pytest.fixture
async def user(django_user_model):
    return await django_user_model.objects.acreate(username="ada")


@pytest.fixture
async def enrollment(user):
    enrollment = await models.Enrollment.objects.acreate(user=user, name="Ada Lovelace")
    await models.Address.objects.acreate(
        enrollment=enrollment,
        street="Rua Augusta",
        number="100",
        neighborhood="Consolacao",
        city="Sao Paulo",
        state="SP",
        postal_code="01305-000",
    )
    return enrollment


@pytest.fixture
async def room():
    return await models.Room.objects.acreate(name="101", capacity=2)


async def _create_ticket(enrollment, status=models.Ticket.Status.PAID, is_remote=False, includes_hotel=True):
    """Create a ticket and its ticket type for the enrollment."""
    ticket_type = await models.TicketType.objects.acreate(
        name="Presencial + Hotel",
        price=Decimal("600.00"),
        is_remote=is_remote,
        includes_hotel=includes_hotel,
    )
    return await models.Ticket.objects.acreate(
        enrollment=enrollment, ticket_type=ticket_type, status=status
    )


class TestDjangoEnrollmentStore:
    """Tests for DjangoEnrollmentStore."""

    async def test_returns_enrollment_with_addresses(self, user, enrollment):
        """Returns the enrollment with its addresses."""
        found = await DjangoEnrollmentStore().find_with_address_by_user_id(user.id)

        assert found is not None
        assert found.id == enrollment.id
        assert found.user_id == user.id
        assert [a.city for a in found.addresses] == ["Sao Paulo"]

    async def test_returns_none_for_unknown_user(self):
        """Returns None when the user never enrolled."""
        assert await DjangoEnrollmentStore().find_with_address_by_user_id(999) is None


class TestDjangoTicketStore:
    """Tests for DjangoTicketStore."""

    async def test_returns_ticket_with_type(self, enrollment):
        """Returns the ticket with its ticket type."""
        ticket = await _create_ticket(enrollment, status=models.Ticket.Status.RESERVED)

        found = await DjangoTicketStore().find_ticket_by_enrollment_id(enrollment.id)

        assert found is not None
        assert found.id == ticket.id
        assert found.status is TicketStatus.RESERVED
        assert found.ticket_type.price == Money(Decimal("600.00"))
        assert found.ticket_type.includes_hotel

    async def test_returns_none_without_ticket(self, enrollment):
        """Returns None when the enrollment has no ticket."""
        assert await DjangoTicketStore().find_ticket_by_enrollment_id(enrollment.id) is None


class TestDjangoRoomStore:
    """Tests for DjangoRoomStore."""

    async def test_returns_room(self, room):
        """Returns the room with its capacity."""
        found = await DjangoRoomStore().find_by_id(room.id)

        assert found is not None
        assert found.capacity.value == 2

    async def test_returns_none_for_unknown_room(self):
        """Returns None for an unknown room id."""
        assert await DjangoRoomStore().find_by_id(999) is None


class TestDjangoBookingStore:
    """Tests for DjangoBookingStore."""

    async def test_create_and_find(self, user, room):
        """A created booking is found by room and by user."""
        store = DjangoBookingStore()

        created = await store.create(room_id=room.id, user_id=user.id)

        by_room = await store.find_by_room_id(room.id)
        by_user = await store.find_by_user_id(user.id)
        assert [b.id for b in by_room] == [created.id]
        assert by_user is not None
        assert by_user.id == created.id
        assert by_user.room is not None
        assert by_user.room.id == room.id

    async def test_find_by_user_id_returns_none(self, user):
        """Returns None when the user has no booking."""
        assert await DjangoBookingStore().find_by_user_id(user.id) is None

    async def test_upsert_updates_in_place(self, user, room):
        """Upsert keeps the booking id and changes its room."""
        store = DjangoBookingStore()
        other = await models.Room.objects.acreate(name="102", capacity=1)
        created = await store.create(room_id=room.id, user_id=user.id)

        updated = await store.upsert_booking(
            booking_id=created.id, room_id=other.id, user_id=user.id
        )

        assert updated.id == created.id
        assert updated.room_id == other.id
        assert await models.Booking.objects.acount() == 1


class TestBookingServiceWiring:
    """End-to-end checks through build_booking_service."""

    async def test_book_and_change_room(self, user, enrollment, room):
        """Books a room, moves it and reads it back."""
        await _create_ticket(enrollment)
        other = await models.Room.objects.acreate(name="102", capacity=1)
        service = build_booking_service()

        booking = await service.book_room(user.id, room.id)
        moved = await service.change_booking_room(user.id, other.id)
        current = await service.get_booking(user.id)

        assert moved.id == booking.id
        assert current.room_id == other.id
