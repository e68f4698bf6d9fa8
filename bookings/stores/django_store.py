"""Django ORM implementations of the booking stores.

Each store queries the ORM through its async API and converts rows to
domain models.
"""

from bookings import models
from bookings.domain import (
    Address,
    Booking,
    Capacity,
    Enrollment,
    Money,
    Room,
    Ticket,
    TicketStatus,
    TicketType,
)
from bookings.stores.interfaces import BookingStore, EnrollmentStore, RoomStore, TicketStore


def _to_address(row: models.Address) -> Address:
    return Address(
        id=row.id,
        enrollment_id=row.enrollment_id,
        street=row.street,
        number=row.number,
        neighborhood=row.neighborhood,
        city=row.city,
        state=row.state,
        postal_code=row.postal_code,
        detail=row.detail,
    )


def _to_room(row: models.Room) -> Room:
    return Room(id=row.id, name=row.name, capacity=Capacity(row.capacity))


def _to_booking(row: models.Booking, with_room: bool = False) -> Booking:
    return Booking(
        id=row.id,
        user_id=row.user_id,
        room_id=row.room_id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        room=_to_room(row.room) if with_room else None,
    )


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment lookups backed by the Django ORM."""

    async def find_with_address_by_user_id(self, user_id: int) -> Enrollment | None:
        row = await models.Enrollment.objects.filter(user_id=user_id).afirst()
        if row is None:
            return None

        addresses = [
            _to_address(address)
            async for address in models.Address.objects.filter(enrollment_id=row.id).order_by("id")
        ]
        return Enrollment(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            addresses=tuple(addresses),
        )


class DjangoTicketStore(TicketStore):
    """Ticket lookups backed by the Django ORM."""

    async def find_ticket_by_enrollment_id(self, enrollment_id: int) -> Ticket | None:
        row = await (
            models.Ticket.objects.select_related("ticket_type")
            .filter(enrollment_id=enrollment_id)
            .order_by("id")
            .afirst()
        )
        if row is None:
            return None

        ticket_type = row.ticket_type
        return Ticket(
            id=row.id,
            enrollment_id=row.enrollment_id,
            status=TicketStatus(row.status),
            ticket_type=TicketType(
                id=ticket_type.id,
                name=ticket_type.name,
                price=Money(ticket_type.price),
                is_remote=ticket_type.is_remote,
                includes_hotel=ticket_type.includes_hotel,
            ),
        )


class DjangoRoomStore(RoomStore):
    """Room lookups backed by the Django ORM."""

    async def find_by_id(self, room_id: int) -> Room | None:
        row = await models.Room.objects.filter(pk=room_id).afirst()
        return _to_room(row) if row is not None else None


class DjangoBookingStore(BookingStore):
    """Booking persistence backed by the Django ORM."""

    async def find_by_room_id(self, room_id: int) -> list[Booking]:
        return [
            _to_booking(row)
            async for row in models.Booking.objects.filter(room_id=room_id).order_by("id")
        ]

    async def find_by_user_id(self, user_id: int) -> Booking | None:
        row = await (
            models.Booking.objects.select_related("room")
            .filter(user_id=user_id)
            .order_by("id")
            .afirst()
        )
        return _to_booking(row, with_room=True) if row is not None else None

    async def create(self, room_id: int, user_id: int) -> Booking:
        row = await models.Booking.objects.acreate(room_id=room_id, user_id=user_id)
        return _to_booking(row)

    async def upsert_booking(self, booking_id: int, room_id: int, user_id: int) -> Booking:
        row, _ = await models.Booking.objects.aupdate_or_create(
            id=booking_id,
            defaults={"room_id": room_id, "user_id": user_id},
        )
        return _to_booking(row)
